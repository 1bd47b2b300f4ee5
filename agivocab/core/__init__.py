"""Core domain logic for agivocab."""

from .config import Config, load_config
from .errors import (
    AgiVocabError,
    AmbiguousVocabularyError,
    MessagesLoadError,
    TokenEncodingError,
    VocabularyLoadError,
)
from .prefixes import (
    expand_group,
    expand_synonym,
    generate_prefix_variants,
    is_noun_group,
    is_target_script_char,
    starts_with_target_script,
)
from .types import (
    DuplicateOccurrence,
    DuplicateReport,
    GeneratedVariant,
    LiteralSource,
    PartOfSpeech,
    SkippedVariantReport,
    TokenEntry,
    Vocabulary,
    WordGroup,
)

__all__ = [
    "Config",
    "load_config",
    "AgiVocabError",
    "AmbiguousVocabularyError",
    "MessagesLoadError",
    "TokenEncodingError",
    "VocabularyLoadError",
    "expand_group",
    "expand_synonym",
    "generate_prefix_variants",
    "is_noun_group",
    "is_target_script_char",
    "starts_with_target_script",
    "DuplicateOccurrence",
    "DuplicateReport",
    "GeneratedVariant",
    "LiteralSource",
    "PartOfSpeech",
    "SkippedVariantReport",
    "TokenEntry",
    "Vocabulary",
    "WordGroup",
]
