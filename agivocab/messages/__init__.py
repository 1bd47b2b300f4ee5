"""Translated message text utilities."""

from .escapes import EscapeFixResult, fix_escape_sequences, fix_messages_file

__all__ = ["EscapeFixResult", "fix_escape_sequences", "fix_messages_file"]
