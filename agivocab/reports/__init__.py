"""Report generation for agivocab."""

from .helpers import format_time, write_report_header, write_section_header
from .skipped_variants import generate_skipped_variants_report, write_skipped_variants_content

__all__ = [
    "format_time",
    "write_report_header",
    "write_section_header",
    "generate_skipped_variants_report",
    "write_skipped_variants_content",
]
