"""Stage 1: Vocabulary loading."""

import time
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from agivocab.core import Config, Vocabulary, VocabularyLoadError
from agivocab.processing.stages.data_models import VocabularyData
from agivocab.utils.debug import is_debug_word, log_debug_word, normalize_debug_words
from agivocab.utils.helpers import expand_file_path


def load_vocabulary(path: str | Path) -> Vocabulary:
    """Read and validate a vocabulary document.

    Raises:
        VocabularyLoadError: If the file cannot be read or does not match the model
    """
    filepath = Path(expand_file_path(str(path)))
    try:
        content = filepath.read_text(encoding="utf-8")
    except OSError as e:
        raise VocabularyLoadError(f"Cannot read vocabulary file {filepath}: {e}") from e

    try:
        return Vocabulary.model_validate_json(content)
    except ValidationError as e:
        raise VocabularyLoadError(f"Invalid vocabulary file {filepath}:\n{e}") from e


def load_vocabulary_stage(config: Config, verbose: bool = False) -> VocabularyData:
    """Load the vocabulary named in the configuration.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        VocabularyData with the parsed vocabulary
    """
    start_time = time.time()
    source_path = Path(expand_file_path(config.vocabulary))

    if verbose:
        logger.info(f"  Loading vocabulary from {source_path}...")

    vocabulary = load_vocabulary(source_path)

    if verbose:
        logger.info(f"  Loaded {len(vocabulary.groups):,} word groups")

    debug_words = normalize_debug_words(config.debug_words)
    if debug_words:
        for group in vocabulary.groups:
            for literal, source in group.owned_literals():
                if is_debug_word(literal, debug_words):
                    log_debug_word(
                        literal,
                        f"Loaded as {source.value} of #{group.word_number} "
                        f"({group.canonical_word}, {group.part_of_speech.value or 'unclassified'})",
                        "Loading",
                    )

    return VocabularyData(
        vocabulary=vocabulary,
        source_path=source_path,
        elapsed_time=time.time() - start_time,
    )
