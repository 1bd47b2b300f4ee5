"""Main processing pipeline orchestration."""

from loguru import logger

from agivocab.core import Config
from agivocab.processing.stages import (
    OutputResult,
    build_token_table_stage,
    load_vocabulary_stage,
    validate_vocabulary,
    write_output,
)
from agivocab.reports import format_time


def run_pipeline(config: Config) -> OutputResult:
    """Generate the extended token table for a vocabulary.

    Stages:
        1. Load the vocabulary document
        2. Reject ambiguous literals, audit skipped prefix variants
        3. Build the accepted token table
        4. Encode and write the table and the audit file

    Nothing is written unless validation and encoding both succeed.

    Args:
        config: Configuration object

    Returns:
        OutputResult of the final stage

    Raises:
        VocabularyLoadError: If the vocabulary cannot be loaded
        AmbiguousVocabularyError: If any literal maps to more than one word number
        TokenEncodingError: If a literal is outside the target code page
    """
    verbose = config.verbose

    if verbose:
        logger.info("Stage 1: Loading vocabulary")
    vocab_data = load_vocabulary_stage(config, verbose)

    if verbose:
        logger.info("Stage 2: Checking for duplicate words")
    validation_result = validate_vocabulary(vocab_data, config, verbose)

    if verbose:
        logger.info("Stage 3: Building token table")
    table_result = build_token_table_stage(vocab_data, config, verbose)

    if verbose:
        logger.info("Stage 4: Writing output")
    output_result = write_output(table_result, validation_result, config, verbose)

    if verbose:
        total_time = (
            vocab_data.elapsed_time
            + validation_result.elapsed_time
            + table_result.elapsed_time
            + output_result.elapsed_time
        )
        logger.info(f"  Done in {format_time(total_time)}")
        if output_result.audit_path:
            logger.info(f"  Skipped variants report: {output_result.audit_path}")

    return output_result
