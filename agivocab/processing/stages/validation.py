"""Stage 2: Duplicate detection and homograph audit."""

import time

from loguru import logger

from agivocab.core import AmbiguousVocabularyError, Config
from agivocab.processing.stages.data_models import ValidationResult, VocabularyData
from agivocab.resolution import (
    find_duplicate_words,
    find_skipped_prefix_variants,
    log_skipped_variants,
)
from agivocab.utils.debug import normalize_debug_words


def validate_vocabulary(
    vocab_data: VocabularyData,
    config: Config,
    verbose: bool = False,
) -> ValidationResult:
    """Check the vocabulary for ambiguous literals and audit skipped variants.

    Args:
        vocab_data: Output of the loading stage
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        ValidationResult with the skipped-variant audit

    Raises:
        AmbiguousVocabularyError: If any literal maps to more than one word number
    """
    start_time = time.time()

    duplicates = find_duplicate_words(vocab_data.vocabulary, verbose=verbose)
    if duplicates:
        raise AmbiguousVocabularyError(duplicates)

    if verbose:
        logger.info("  No duplicate words found")

    skipped = find_skipped_prefix_variants(
        vocab_data.vocabulary,
        debug_words=normalize_debug_words(config.debug_words),
        verbose=verbose,
    )
    log_skipped_variants(skipped, verbose)

    return ValidationResult(
        duplicates=duplicates,
        skipped=skipped,
        elapsed_time=time.time() - start_time,
    )
