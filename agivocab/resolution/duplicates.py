"""Detection of literals that map to more than one word number."""

from collections import defaultdict

from tqdm import tqdm

from agivocab.core.prefixes import expand_synonym
from agivocab.core.types import (
    DuplicateOccurrence,
    DuplicateReport,
    LiteralSource,
    Vocabulary,
)
from agivocab.resolution.literals import collect_existing_literals
from agivocab.utils.helpers import normalize_literal


def find_duplicate_words(vocabulary: Vocabulary, verbose: bool = False) -> list[DuplicateReport]:
    """Find literals that map to more than one word number.

    Every owned literal is registered, and for noun groups every prefix
    variant that does not already exist verbatim somewhere in the
    vocabulary. Variants that do exist are not generated, so they are
    reported as skipped homographs instead of duplicates.

    The whole vocabulary is checked in one pass so that every problem is
    reported at once.

    Args:
        vocabulary: The full vocabulary (not modified)
        verbose: Whether to show a progress bar

    Returns:
        One report per ambiguous literal, in first-registration order
    """
    existing = collect_existing_literals(vocabulary)
    registrations: dict[str, list[DuplicateOccurrence]] = defaultdict(list)

    def register(literal: str, word_number: int, source: LiteralSource) -> None:
        registrations[normalize_literal(literal)].append(
            DuplicateOccurrence(word_number=word_number, source=source)
        )

    groups = vocabulary.groups
    if verbose:
        groups = tqdm(groups, desc="Checking duplicates", unit="group")

    for group in groups:
        register(group.canonical_word, group.word_number, LiteralSource.CANONICAL_WORD)

        for synonym in group.source_synonyms:
            register(synonym, group.word_number, LiteralSource.SOURCE_SYNONYM)

        for synonym in group.target_synonyms:
            register(synonym, group.word_number, LiteralSource.TARGET_SYNONYM)

            for generated in expand_synonym(group, synonym):
                if normalize_literal(generated.variant) not in existing:
                    register(generated.variant, group.word_number, LiteralSource.PREFIX_VARIANT)

    duplicates = []
    for word, occurrences in registrations.items():
        word_numbers = {occ.word_number for occ in occurrences}
        if len(word_numbers) > 1:
            duplicates.append(DuplicateReport(word=word, occurrences=occurrences))

    return duplicates
