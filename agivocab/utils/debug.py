"""Debug tracing for selected vocabulary literals."""

from collections.abc import Iterable

from loguru import logger

from agivocab.utils.helpers import normalize_literal


def normalize_debug_words(debug_words: Iterable[str] | None) -> frozenset[str]:
    """Normalize user-provided debug words for case-insensitive matching."""
    if not debug_words:
        return frozenset()
    return frozenset(normalize_literal(word.strip()) for word in debug_words if word.strip())


def is_debug_word(literal: str, debug_words: frozenset[str]) -> bool:
    """Check if a literal is being traced.

    Args:
        literal: The literal to check
        debug_words: Normalized set of traced literals
    """
    return bool(debug_words) and normalize_literal(literal) in debug_words


def log_debug_word(literal: str, message: str, stage: str = "") -> None:
    """Log a debug message for a traced literal."""
    stage_marker = f" [{stage}]" if stage else ""
    logger.debug(f"[DEBUG WORD: '{literal}']{stage_marker} {message}")


def log_if_debug_word(
    literals: Iterable[str],
    message: str,
    debug_words: frozenset[str],
    stage: str = "",
) -> None:
    """Log a message once for the first traced literal among several.

    A prefix variant is traced when either the variant or its base synonym
    is listed in debug_words.
    """
    if not debug_words:
        return
    for literal in literals:
        if is_debug_word(literal, debug_words):
            log_debug_word(literal, message, stage)
            return
