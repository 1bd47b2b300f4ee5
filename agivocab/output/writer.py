"""Token table serialization and file output."""

import os
import sys
from pathlib import Path

from loguru import logger

from agivocab.core.types import TokenEntry
from agivocab.output.encoding import encode_token_text
from agivocab.output.formatting import format_token_table
from agivocab.utils.constants import Constants


def render_token_table(
    table: list[TokenEntry],
    header: str = Constants.TOKEN_TABLE_HEADER,
    encoding: str = Constants.DEFAULT_ENCODING,
) -> bytes:
    """Render the accepted token table into its on-disk bytes.

    The text is assembled first and then encoded as a separate step.

    Raises:
        TokenEncodingError: If a literal cannot be represented in the code page
    """
    text = format_token_table(table, header)
    return encode_token_text(text, encoding)


def determine_output_path(output_path: str | None) -> Path | None:
    """Determine final table file path.

    A directory (existing, or any path not named like the table file) gets
    the table file name appended.
    """
    if not output_path:
        return None

    path = Path(os.path.expanduser(output_path))
    if path.is_dir() or path.name != Constants.TOKEN_TABLE_FILENAME:
        return path / Constants.TOKEN_TABLE_FILENAME
    return path


def write_token_table(data: bytes, output_path: str | None, verbose: bool = False) -> Path | None:
    """Write the encoded table, replacing any previous file.

    Args:
        data: Encoded table bytes
        output_path: Output directory or file; None writes to stdout
        verbose: Whether to log the written path

    Returns:
        The written file path, or None when written to stdout
    """
    output_file = determine_output_path(output_path)

    if output_file is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return None

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_bytes(data)

    if verbose:
        logger.info(f"  Wrote {len(data):,} bytes to {output_file}")
    return output_file
