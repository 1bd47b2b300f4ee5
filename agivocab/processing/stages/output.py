"""Stage 4: Serialization and file output."""

import time
from pathlib import Path

from loguru import logger

from agivocab.core import Config
from agivocab.output import determine_output_path, render_token_table, write_token_table
from agivocab.processing.stages.data_models import OutputResult, TokenTableResult, ValidationResult
from agivocab.reports import generate_skipped_variants_report
from agivocab.utils.constants import Constants
from agivocab.utils.helpers import expand_file_path


def _report_dir(config: Config) -> Path | None:
    """Directory for the audit file: --reports, else next to the table."""
    if config.reports:
        return Path(expand_file_path(config.reports))
    table_path = determine_output_path(config.output)
    if table_path is None:
        return None
    return table_path.parent


def write_output(
    table_result: TokenTableResult,
    validation_result: ValidationResult,
    config: Config,
    verbose: bool = False,
) -> OutputResult:
    """Encode the table and write it together with the audit file.

    Encoding happens before anything is written, so an encoding failure
    leaves no partial output behind.

    Args:
        table_result: Output of the table-building stage
        validation_result: Output of the validation stage
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        OutputResult with the written paths

    Raises:
        TokenEncodingError: If a literal is outside the target code page
    """
    start_time = time.time()

    data = render_token_table(table_result.table, config.header, config.encoding)
    table_path = write_token_table(data, config.output, verbose)

    audit_path = None
    report_dir = _report_dir(config)
    if report_dir is not None:
        audit_path = generate_skipped_variants_report(validation_result.skipped, report_dir)
    elif validation_result.skipped:
        logger.warning(
            f"{len(validation_result.skipped)} prefix variants were skipped but not audited; "
            f"pass --reports or --output to write {Constants.SKIPPED_VARIANTS_FILENAME}"
        )

    return OutputResult(
        table_path=table_path,
        audit_path=audit_path,
        byte_count=len(data),
        elapsed_time=time.time() - start_time,
    )
