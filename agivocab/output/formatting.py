"""Text rendering of the token table."""

from agivocab.core.types import TokenEntry
from agivocab.utils.constants import Constants


def format_token_line(literal: str, word_number: int) -> str:
    """Format one table line without its terminator.

    Format: <literal><NUL><word number, zero-padded to 5 digits>

    Raises:
        ValueError: If the literal contains a line or field separator
    """
    if "\n" in literal or Constants.TOKEN_SEPARATOR in literal:
        raise ValueError(f"Literal for word #{word_number} contains a separator: {literal!r}")
    return f"{literal}{Constants.TOKEN_SEPARATOR}{word_number:0{Constants.WORD_NUMBER_WIDTH}d}"


def format_token_table(
    table: list[TokenEntry],
    header: str = Constants.TOKEN_TABLE_HEADER,
) -> str:
    """Assemble the full table text: header line, then one line per entry.

    Every line, including the last one, ends with a newline.
    """
    lines = [header]
    lines.extend(format_token_line(literal, word_number) for literal, word_number in table)
    return "\n".join(lines) + "\n"
