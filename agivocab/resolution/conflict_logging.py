"""Logging of duplicate and skipped-variant findings."""

from loguru import logger

from agivocab.core.types import DuplicateReport, SkippedVariantReport


def log_duplicate_words(duplicates: list[DuplicateReport]) -> None:
    """Log every ambiguous literal with all of its registrations.

    Args:
        duplicates: Reports from find_duplicate_words()
    """
    logger.error(
        "Duplicate words found in vocabulary! "
        "Each word must map to exactly one word number."
    )
    for duplicate in duplicates:
        logger.error(f'  "{duplicate.word}" appears in:')
        for occurrence in duplicate.occurrences:
            logger.error(f"    - Word #{occurrence.word_number} ({occurrence.source.value})")


def log_skipped_variants(skipped: list[SkippedVariantReport], verbose: bool) -> None:
    """Summarize skipped prefix variants.

    Args:
        skipped: Reports from find_skipped_prefix_variants()
        verbose: Whether to print the summary line
    """
    if not skipped:
        return

    if verbose:
        logger.info(f"  Skipped {len(skipped)} prefix variants that collide with existing words")

    for report in skipped:
        logger.debug(
            f'  "{report.variant}" (prefix of "{report.base_synonym}"): '
            f"#{report.source_word_number} ({report.source_word}) conflicts with "
            f"#{report.conflict_word_number} ({report.conflict_word})"
        )
