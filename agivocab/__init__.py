"""agivocab - Extended word table generator for translated AGI games.

Expand translated nouns with prepositional prefixes, reject ambiguous
vocabulary and write the runtime's WORDS.TOK.EXTENDED table.
"""

from .core import Config, Vocabulary, WordGroup, load_config
from .processing import run_pipeline

__version__ = "0.1.0"
__all__ = ["Config", "Vocabulary", "WordGroup", "load_config", "run_pipeline"]
