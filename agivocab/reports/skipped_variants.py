"""Skipped prefix variant audit report."""

from pathlib import Path
from typing import TextIO

from agivocab.core.types import SkippedVariantReport
from agivocab.reports.helpers import write_report_header, write_section_header
from agivocab.utils.constants import Constants
from agivocab.utils.helpers import write_file_safely


def write_skipped_variants_content(f: TextIO, skipped: list[SkippedVariantReport]) -> None:
    """Write the audit body: one block per skipped variant."""
    write_report_header(f, "SKIPPED PREFIX VARIANTS DUE TO CONFLICTS")
    f.write(
        f"These prefix variants ({', '.join(Constants.HEBREW_PREFIXES)}) were NOT generated "
        "because they\nconflict with existing words in the vocabulary (homographs).\n\n"
    )
    f.write(f"Total skipped: {len(skipped):,}\n\n")

    write_section_header(f, "")
    for report in skipped:
        f.write(f'"{report.variant}" (prefix of "{report.base_synonym}")\n')
        f.write(f"  Would add to: #{report.source_word_number} ({report.source_word})\n")
        f.write(f"  Conflicts with: #{report.conflict_word_number} ({report.conflict_word})\n")
        f.write("\n")


def generate_skipped_variants_report(
    skipped: list[SkippedVariantReport], report_dir: Path
) -> Path | None:
    """Write the skipped-variant audit file, or remove a stale one.

    The file is only produced when something was skipped.

    Args:
        skipped: Reports from find_skipped_prefix_variants()
        report_dir: Directory to write the report to

    Returns:
        Path of the written report, or None if nothing was skipped
    """
    filepath = report_dir / Constants.SKIPPED_VARIANTS_FILENAME

    if not skipped:
        filepath.unlink(missing_ok=True)
        return None

    write_file_safely(
        filepath,
        lambda f: write_skipped_variants_content(f, skipped),
        "writing skipped prefix variants report",
    )
    return filepath
