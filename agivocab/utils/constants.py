"""Constants used throughout the agivocab codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Prefix expansion
    HEBREW_PREFIXES = ("ב", "ה", "ל")
    """Prepositional prefixes glued onto nouns: in/at, the, to/for."""

    TARGET_SCRIPT_FIRST = 0x0590
    """First code point of the Hebrew Unicode block."""

    TARGET_SCRIPT_LAST = 0x05FF
    """Last code point of the Hebrew Unicode block."""

    FILLER_WORD_NUMBER = 0
    """Word number reserved for ignored filler words."""

    # Token table format
    TOKEN_TABLE_HEADER = "WORDS.TOK: Unofficial extended format to support ASCII range of 128-255"
    """Header line of the extended token table."""

    WORD_NUMBER_WIDTH = 5
    """Width of the zero-padded word number field."""

    TOKEN_SEPARATOR = "\0"
    """Separator between a literal and its word number."""

    DEFAULT_ENCODING = "cp1255"
    """Windows-1255, the single-byte code page for the Hebrew alphabet."""

    # File names
    TOKEN_TABLE_FILENAME = "WORDS.TOK.EXTENDED"
    """File name the runtime looks for next to the compiled resources."""

    SKIPPED_VARIANTS_FILENAME = "SKIPPED_PREFIX_VARIANTS.txt"
    """Audit file listing homograph-skipped prefix variants."""

    DEFAULT_VOCABULARY_FILE = "vocabulary.json"
    """Default vocabulary document path."""
