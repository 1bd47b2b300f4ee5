"""Repair of escape sequences dropped from translated message text.

Translators often strip the backslashes of escape sequences, e.g. the
original %m8\\"%w1\\" comes back as %m8"%w1". The escapes present in the
original message are restored in the translation.
"""

import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from agivocab.core.errors import MessagesLoadError
from agivocab.utils.helpers import expand_file_path

ESCAPED_QUOTE = '\\"'
ESCAPED_NEWLINE = "\\n"
PREVIEW_LENGTH = 100


class EscapeFixResult(BaseModel):
    """Counts from fixing a messages file."""

    checked: int = 0
    fixed: int = 0


def fix_escape_sequences(original: str, translation: str) -> str:
    """Restore escaped quotes and newlines that the original message has.

    Doubled backslashes are left alone: whether a lone backslash in the
    translation should become one or two is ambiguous.

    Args:
        original: Source-language message text
        translation: Translated message text

    Returns:
        The repaired translation (unchanged if nothing applied)
    """
    if not translation or not translation.strip():
        return translation

    fixed = translation

    if ESCAPED_QUOTE in original and ESCAPED_QUOTE not in fixed and '"' in fixed:
        fixed = fixed.replace('"', ESCAPED_QUOTE)

    if ESCAPED_NEWLINE in original and ESCAPED_NEWLINE not in fixed:
        fixed = fixed.replace("\n", ESCAPED_NEWLINE)

    return fixed


def _preview(text: str) -> str:
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + "..."
    return text


def fix_messages_file(path: str | Path, dry_run: bool = False) -> EscapeFixResult:
    """Fix escape sequences in every translated message of a messages file.

    Args:
        path: messages.json path
        dry_run: Log what would change without writing

    Returns:
        EscapeFixResult with checked and fixed counts

    Raises:
        MessagesLoadError: If the file is missing or not valid JSON
    """
    filepath = Path(expand_file_path(str(path)))
    try:
        document = json.loads(filepath.read_text(encoding="utf-8"))
    except OSError as e:
        raise MessagesLoadError(f"Cannot read messages file {filepath}: {e}") from e
    except json.JSONDecodeError as e:
        raise MessagesLoadError(f"Invalid messages file {filepath}: {e}") from e

    result = EscapeFixResult()

    for message in document.get("messages", []):
        original = message.get("original") or ""
        translation = message.get("translation") or ""

        if not translation or not translation.strip():
            continue

        result.checked += 1
        fixed_translation = fix_escape_sequences(original, translation)
        if fixed_translation == translation:
            continue

        result.fixed += 1
        if dry_run:
            logger.info(
                f"[DRY RUN] Would fix {message.get('logicFile')} "
                f"message {message.get('messageNumber')}:"
            )
            logger.info(f"  Before: {_preview(translation)}")
            logger.info(f"  After:  {_preview(fixed_translation)}")
        else:
            message["translation"] = fixed_translation

    if not dry_run and result.fixed > 0:
        filepath.write_text(
            json.dumps(document, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    return result
