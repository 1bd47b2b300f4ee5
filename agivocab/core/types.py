"""Vocabulary model and report types for agivocab."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from agivocab.utils.constants import Constants

# Type alias for accepted token table rows: (literal, word_number)
TokenEntry = tuple[str, int]


class PartOfSpeech(str, Enum):
    """Word type classification of a vocabulary group."""

    UNCLASSIFIED = ""
    NOUN = "noun"
    VERB = "verb"
    OTHER = "other"


class LiteralSource(str, Enum):
    """Where a literal registered against a word number came from."""

    CANONICAL_WORD = "canonical word"
    SOURCE_SYNONYM = "source synonym"
    TARGET_SYNONYM = "target synonym"
    PREFIX_VARIANT = "prefix variant"


class WordGroup(BaseModel):
    """One semantic vocabulary entry: literals sharing a runtime word number.

    Field aliases follow the camelCase keys of vocabulary.json.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word_number: int = Field(alias="wordNumber")
    canonical_word: str = Field(alias="word")
    source_synonyms: tuple[str, ...] = Field(default=(), alias="originalSynonyms")
    target_synonyms: tuple[str, ...] = Field(default=(), alias="translatedSynonyms")
    part_of_speech: PartOfSpeech = Field(default=PartOfSpeech.UNCLASSIFIED, alias="wordType")
    notes: str = ""

    @field_validator("canonical_word", "source_synonyms", "target_synonyms")
    @classmethod
    def reject_separators(cls, value):
        """Literals cannot hold the table's line or field separator."""
        literals = (value,) if isinstance(value, str) else value
        for literal in literals:
            if "\n" in literal or Constants.TOKEN_SEPARATOR in literal:
                raise ValueError(f"literal contains a line or field separator: {literal!r}")
        return value

    def owned_literals(self) -> list[tuple[str, LiteralSource]]:
        """Return every literal the group owns verbatim, in table order."""
        literals = [(self.canonical_word, LiteralSource.CANONICAL_WORD)]
        literals.extend((syn, LiteralSource.SOURCE_SYNONYM) for syn in self.source_synonyms)
        literals.extend((syn, LiteralSource.TARGET_SYNONYM) for syn in self.target_synonyms)
        return literals


class Vocabulary(BaseModel):
    """A vocabulary document: ordered word groups plus uninterpreted metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
    groups: tuple[WordGroup, ...] = Field(default=(), alias="vocabulary")


@dataclass(frozen=True)
class GeneratedVariant:
    """A prefix variant of a target synonym, with provenance for reporting."""

    variant: str
    base_synonym: str
    word_number: int
    source_word: str


class DuplicateOccurrence(BaseModel):
    """One registration of a literal against a word number."""

    word_number: int
    source: LiteralSource


class DuplicateReport(BaseModel):
    """A normalized literal that maps to more than one word number."""

    word: str
    occurrences: list[DuplicateOccurrence]

    @property
    def word_numbers(self) -> list[int]:
        """Distinct word numbers in first-seen order."""
        return list(dict.fromkeys(occ.word_number for occ in self.occurrences))


class SkippedVariantReport(BaseModel):
    """A prefix variant left out because another word already owns it."""

    variant: str
    base_synonym: str
    source_word_number: int
    source_word: str
    conflict_word_number: int
    conflict_word: str
