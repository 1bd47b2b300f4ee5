"""Prefix variant generation for target-language nouns."""

from agivocab.core.types import GeneratedVariant, PartOfSpeech, WordGroup
from agivocab.utils.constants import Constants


def is_target_script_char(char: str) -> bool:
    """Check if a character lies in the target script's Unicode block."""
    code = ord(char)
    return Constants.TARGET_SCRIPT_FIRST <= code <= Constants.TARGET_SCRIPT_LAST


def starts_with_target_script(literal: str) -> bool:
    """Check if a literal starts with a target-script character."""
    return len(literal) > 0 and is_target_script_char(literal[0])


def is_noun_group(group: WordGroup) -> bool:
    """Check if a word group should receive prefix variants.

    The filler group (word number 0) is never expanded.
    """
    if group.word_number == Constants.FILLER_WORD_NUMBER:
        return False
    return group.part_of_speech == PartOfSpeech.NOUN


def generate_prefix_variants(literal: str) -> list[str]:
    """Generate prefixed forms of a literal.

    For a phrase only the first word takes the prefix:
    "בית" -> ["בבית", "הבית", "לבית"]
    "בית לבן" -> ["בבית לבן", "הבית לבן", "לבית לבן"]

    Args:
        literal: A target synonym

    Returns:
        One variant per prefix in declaration order, or an empty list for
        literals outside the target script
    """
    if not starts_with_target_script(literal):
        return []

    space_index = literal.find(" ")
    if space_index > 0:
        first_word = literal[:space_index]
        rest = literal[space_index:]  # keeps the space
        return [prefix + first_word + rest for prefix in Constants.HEBREW_PREFIXES]

    return [prefix + literal for prefix in Constants.HEBREW_PREFIXES]


def expand_synonym(group: WordGroup, synonym: str) -> list[GeneratedVariant]:
    """Generate the prefix variants of one target synonym of a group.

    Returns an empty list for groups that are not expandable nouns.
    """
    if not is_noun_group(group):
        return []

    return [
        GeneratedVariant(
            variant=variant,
            base_synonym=synonym,
            word_number=group.word_number,
            source_word=group.canonical_word,
        )
        for variant in generate_prefix_variants(synonym)
    ]


def expand_group(group: WordGroup) -> list[GeneratedVariant]:
    """Generate every prefix variant of a group's target synonyms."""
    variants = []
    for synonym in group.target_synonyms:
        variants.extend(expand_synonym(group, synonym))
    return variants
