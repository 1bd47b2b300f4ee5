"""Audit of prefix variants skipped because of homograph collisions."""

from tqdm import tqdm

from agivocab.core.prefixes import expand_group
from agivocab.core.types import SkippedVariantReport, Vocabulary
from agivocab.resolution.literals import build_literal_owners
from agivocab.utils.debug import log_if_debug_word
from agivocab.utils.helpers import normalize_literal


def find_skipped_prefix_variants(
    vocabulary: Vocabulary,
    debug_words: frozenset[str] = frozenset(),
    verbose: bool = False,
) -> list[SkippedVariantReport]:
    """Find prefix variants that collide with another word's literal.

    These are expected homographs, not errors: the variant is simply not
    generated and the other word keeps the literal. Assumes duplicate
    detection already passed.

    Args:
        vocabulary: The full vocabulary (not modified)
        debug_words: Normalized literals to trace
        verbose: Whether to show a progress bar

    Returns:
        One report per skipped variant, in vocabulary order
    """
    owners = build_literal_owners(vocabulary)
    skipped = []

    groups = vocabulary.groups
    if verbose:
        groups = tqdm(groups, desc="Auditing prefix variants", unit="group")

    for group in groups:
        for generated in expand_group(group):
            conflict_group = owners.get(normalize_literal(generated.variant))
            if conflict_group is None or conflict_group.word_number == group.word_number:
                continue

            skipped.append(
                SkippedVariantReport(
                    variant=generated.variant,
                    base_synonym=generated.base_synonym,
                    source_word_number=generated.word_number,
                    source_word=generated.source_word,
                    conflict_word_number=conflict_group.word_number,
                    conflict_word=conflict_group.canonical_word,
                )
            )
            log_if_debug_word(
                (generated.variant, generated.base_synonym),
                f"Prefix variant '{generated.variant}' of '{generated.base_synonym}' "
                f"skipped for #{group.word_number}: already owned by "
                f"#{conflict_group.word_number} ({conflict_group.canonical_word})",
                debug_words,
                "Audit",
            )

    return skipped
