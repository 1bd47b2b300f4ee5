"""Utility functions for agivocab."""

from agivocab.utils.constants import Constants
from agivocab.utils.debug import (
    is_debug_word,
    log_debug_word,
    log_if_debug_word,
    normalize_debug_words,
)
from agivocab.utils.helpers import expand_file_path, normalize_literal, write_file_safely
from agivocab.utils.logging import setup_logger

__all__ = [
    "Constants",
    "is_debug_word",
    "log_debug_word",
    "log_if_debug_word",
    "normalize_debug_words",
    "expand_file_path",
    "normalize_literal",
    "write_file_safely",
    "setup_logger",
]
