"""Pipeline stages for agivocab."""

from .data_models import OutputResult, TokenTableResult, ValidationResult, VocabularyData
from .loading import load_vocabulary, load_vocabulary_stage
from .output import write_output
from .table_generation import build_token_table_stage
from .validation import validate_vocabulary

__all__ = [
    "OutputResult",
    "TokenTableResult",
    "ValidationResult",
    "VocabularyData",
    "load_vocabulary",
    "load_vocabulary_stage",
    "write_output",
    "build_token_table_stage",
    "validate_vocabulary",
]
