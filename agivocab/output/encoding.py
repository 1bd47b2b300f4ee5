"""Conversion of assembled table text into the runtime's code page."""

from agivocab.core.errors import TokenEncodingError
from agivocab.utils.constants import Constants


def _locate_line(text: str, position: int) -> tuple[str, int | None]:
    """Return the (literal, word_number) of the table line holding position.

    The header line has no word number.
    """
    line_start = text.rfind("\n", 0, position) + 1
    line_end = text.find("\n", position)
    if line_end == -1:
        line_end = len(text)
    line = text[line_start:line_end]

    if Constants.TOKEN_SEPARATOR not in line:
        return line, None

    literal, number = line.split(Constants.TOKEN_SEPARATOR, 1)
    return literal, int(number)


def encode_token_text(text: str, encoding: str = Constants.DEFAULT_ENCODING) -> bytes:
    """Encode table text strictly into a single-byte code page.

    Characters outside the code page are never substituted.

    Args:
        text: Fully assembled table text
        encoding: Target codec name

    Returns:
        Encoded bytes

    Raises:
        TokenEncodingError: On the first character the code page cannot represent
    """
    try:
        return text.encode(encoding, errors="strict")
    except UnicodeEncodeError as e:
        literal, word_number = _locate_line(text, e.start)
        raise TokenEncodingError(literal, word_number, text[e.start], encoding) from e
