"""Exceptions raised by agivocab."""

from agivocab.core.types import DuplicateReport


class AgiVocabError(Exception):
    """Base class for agivocab errors."""


class VocabularyLoadError(AgiVocabError):
    """The vocabulary document is missing or malformed."""


class MessagesLoadError(AgiVocabError):
    """The messages document is missing or malformed."""


class AmbiguousVocabularyError(AgiVocabError):
    """One or more literals map to more than one word number."""

    def __init__(self, duplicates: list[DuplicateReport]):
        self.duplicates = duplicates
        super().__init__(
            f"{len(duplicates)} literal(s) map to more than one word number; "
            "each literal must map to exactly one word number"
        )


class TokenEncodingError(AgiVocabError):
    """A literal contains a character outside the target code page."""

    def __init__(
        self,
        literal: str,
        word_number: int | None,
        character: str,
        encoding: str,
    ):
        self.literal = literal
        self.word_number = word_number
        self.character = character
        self.encoding = encoding
        owner = f"word #{word_number}" if word_number is not None else "table header"
        super().__init__(
            f"Cannot encode {character!r} (U+{ord(character):04X}) of {literal!r} "
            f"({owner}) in {encoding}"
        )
