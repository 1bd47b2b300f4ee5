"""Result models passed between pipeline stages."""

from pathlib import Path

from pydantic import BaseModel, Field

from agivocab.core.types import DuplicateReport, SkippedVariantReport, TokenEntry, Vocabulary


class VocabularyData(BaseModel):
    """Output of the loading stage."""

    vocabulary: Vocabulary
    source_path: Path
    elapsed_time: float = 0.0


class ValidationResult(BaseModel):
    """Output of the validation stage."""

    duplicates: list[DuplicateReport] = Field(default_factory=list)
    skipped: list[SkippedVariantReport] = Field(default_factory=list)
    elapsed_time: float = 0.0


class TokenTableResult(BaseModel):
    """Output of the table-building stage."""

    table: list[TokenEntry] = Field(default_factory=list)
    elapsed_time: float = 0.0


class OutputResult(BaseModel):
    """Output of the writing stage."""

    table_path: Path | None = None
    audit_path: Path | None = None
    byte_count: int = 0
    elapsed_time: float = 0.0
