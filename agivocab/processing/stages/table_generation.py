"""Stage 3: Accepted token table construction."""

import time

from loguru import logger

from agivocab.core import Config
from agivocab.processing.stages.data_models import TokenTableResult, VocabularyData
from agivocab.resolution import build_accepted_token_table
from agivocab.utils.debug import normalize_debug_words


def build_token_table_stage(
    vocab_data: VocabularyData,
    config: Config,
    verbose: bool = False,
) -> TokenTableResult:
    """Build the token table from a vocabulary that passed validation.

    Args:
        vocab_data: Output of the loading stage
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        TokenTableResult with the ordered table
    """
    start_time = time.time()

    table = build_accepted_token_table(
        vocab_data.vocabulary,
        debug_words=normalize_debug_words(config.debug_words),
        verbose=verbose,
    )

    if verbose:
        logger.info(f"  Accepted {len(table):,} tokens")

    return TokenTableResult(table=table, elapsed_time=time.time() - start_time)
