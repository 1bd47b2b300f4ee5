"""Collision detection and token table resolution for agivocab."""

from .conflict_logging import log_duplicate_words, log_skipped_variants
from .duplicates import find_duplicate_words
from .literals import build_literal_owners, collect_existing_literals
from .skipped import find_skipped_prefix_variants
from .token_table import build_accepted_token_table

__all__ = [
    "log_duplicate_words",
    "log_skipped_variants",
    "find_duplicate_words",
    "build_literal_owners",
    "collect_existing_literals",
    "find_skipped_prefix_variants",
    "build_accepted_token_table",
]
