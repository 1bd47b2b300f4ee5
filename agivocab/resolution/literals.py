"""Baseline literal indexes shared by the conflict checks."""

from agivocab.core.types import Vocabulary, WordGroup
from agivocab.utils.helpers import normalize_literal


def collect_existing_literals(vocabulary: Vocabulary) -> set[str]:
    """Collect every literal that exists verbatim, normalized.

    Prefix variants that land in this set are never generated.

    Args:
        vocabulary: The full vocabulary

    Returns:
        Set of lower-cased canonical words, source synonyms and target synonyms
    """
    existing = set()
    for group in vocabulary.groups:
        for literal, _ in group.owned_literals():
            existing.add(normalize_literal(literal))
    return existing


def build_literal_owners(vocabulary: Vocabulary) -> dict[str, WordGroup]:
    """Map every existing normalized literal to the group that owns it.

    When two groups own the same literal the later group wins; such
    vocabularies are rejected by duplicate detection beforehand.
    """
    owners: dict[str, WordGroup] = {}
    for group in vocabulary.groups:
        for literal, _ in group.owned_literals():
            owners[normalize_literal(literal)] = group
    return owners
