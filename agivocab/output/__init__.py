"""Token table serialization for agivocab."""

from .encoding import encode_token_text
from .formatting import format_token_line, format_token_table
from .writer import determine_output_path, render_token_table, write_token_table

__all__ = [
    "encode_token_text",
    "format_token_line",
    "format_token_table",
    "determine_output_path",
    "render_token_table",
    "write_token_table",
]
