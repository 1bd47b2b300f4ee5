"""Construction of the accepted token table."""

from tqdm import tqdm

from agivocab.core.prefixes import expand_synonym
from agivocab.core.types import TokenEntry, Vocabulary
from agivocab.resolution.literals import collect_existing_literals
from agivocab.utils.debug import log_if_debug_word
from agivocab.utils.helpers import normalize_literal


def build_accepted_token_table(
    vocabulary: Vocabulary,
    debug_words: frozenset[str] = frozenset(),
    verbose: bool = False,
) -> list[TokenEntry]:
    """Build the ordered (literal, word_number) table the runtime loads.

    Groups are emitted in input order. Within a group: canonical word,
    source synonyms, then each target synonym followed by its own prefix
    variants. A variant is only added when it does not already exist
    verbatim anywhere in the vocabulary. Repeated (literal, word_number)
    pairs keep their first occurrence.

    Only call this after find_duplicate_words() came back empty; otherwise
    the table would contain ambiguous literals.

    Args:
        vocabulary: The full vocabulary (not modified)
        debug_words: Normalized literals to trace
        verbose: Whether to show a progress bar

    Returns:
        Ordered list of (literal, word_number) entries
    """
    existing = collect_existing_literals(vocabulary)
    table: list[TokenEntry] = []
    seen: set[tuple[str, int]] = set()

    def add(literal: str, word_number: int) -> bool:
        key = (normalize_literal(literal), word_number)
        if key in seen:
            return False
        seen.add(key)
        table.append((literal, word_number))
        return True

    groups = vocabulary.groups
    if verbose:
        groups = tqdm(groups, desc="Building token table", unit="group")

    for group in groups:
        word_number = group.word_number

        add(group.canonical_word, word_number)
        for synonym in group.source_synonyms:
            add(synonym, word_number)

        for synonym in group.target_synonyms:
            add(synonym, word_number)

            for generated in expand_synonym(group, synonym):
                if normalize_literal(generated.variant) in existing:
                    log_if_debug_word(
                        (generated.variant, synonym),
                        f"Prefix variant '{generated.variant}' not generated for "
                        f"#{word_number}: literal already exists",
                        debug_words,
                        "Token table",
                    )
                    continue

                if add(generated.variant, word_number):
                    log_if_debug_word(
                        (generated.variant, synonym),
                        f"Added prefix variant '{generated.variant}' of '{synonym}' "
                        f"as #{word_number}",
                        debug_words,
                        "Token table",
                    )

    return table
