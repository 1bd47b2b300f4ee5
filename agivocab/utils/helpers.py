"""Shared utility functions for agivocab."""

import os
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def normalize_literal(literal: str) -> str:
    """Normalize a literal for case-insensitive comparison."""
    return literal.lower()


def write_file_safely(
    filepath: Path,
    write_content: Callable[[TextIO], None],
    description: str,
) -> None:
    """Open a UTF-8 text file and hand it to a writer callback.

    Args:
        filepath: Destination file (parent directories are created)
        write_content: Callback that writes the file body
        description: What is being written, for the error log

    Raises:
        OSError: If the file cannot be written
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            write_content(f)
    except OSError as e:
        logger.error(f"Error {description} to {filepath}: {e}")
        raise
