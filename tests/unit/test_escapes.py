"""Unit tests for escape sequence repair behavior."""

import json
import sys

import pytest

from agivocab.__main__ import fix_escapes_main
from agivocab.core import MessagesLoadError
from agivocab.messages import fix_escape_sequences, fix_messages_file


class TestFixEscapeSequences:
    """Test fix_escape_sequences behavior."""

    def test_restores_escaped_quotes(self) -> None:
        original = 'You see %m8\\"%w1\\"'
        assert fix_escape_sequences(original, 'אתה רואה %m8"%w1"') == 'אתה רואה %m8\\"%w1\\"'

    def test_already_escaped_quotes_are_untouched(self) -> None:
        original = 'Say \\"hi\\"'
        translation = 'אמור \\"שלום\\"'
        assert fix_escape_sequences(original, translation) == translation

    def test_restores_escaped_newlines(self) -> None:
        original = "First line\\nSecond line"
        assert fix_escape_sequences(original, "שורה\nשנייה") == "שורה\\nשנייה"

    def test_quotes_not_escaped_when_original_has_none(self) -> None:
        assert fix_escape_sequences("plain", 'עם "מרכאות"') == 'עם "מרכאות"'

    def test_blank_translation_is_returned_unchanged(self) -> None:
        assert fix_escape_sequences('Say \\"hi\\"', "   ") == "   "

    def test_doubled_backslashes_are_not_repaired(self) -> None:
        """Backslash repair is ambiguous and is left alone."""
        assert fix_escape_sequences("C:\\\\GAME", "C:\\GAME") == "C:\\GAME"


def _write_messages(path, translation: str) -> None:
    document = {
        "version": "1.0",
        "metadata": {"contentType": "messages"},
        "messages": [
            {
                "logicFile": "0.agilogic",
                "messageNumber": 1,
                "original": 'Say \\"hi\\"',
                "translation": translation,
                "notes": "",
                "placeholders": [],
            },
            {
                "logicFile": "0.agilogic",
                "messageNumber": 2,
                "original": "Untranslated",
                "translation": "",
                "notes": "",
                "placeholders": [],
            },
        ],
    }
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")


class TestFixMessagesFile:
    """Test fix_messages_file behavior."""

    def test_counts_only_translated_messages(self, tmp_path) -> None:
        messages_file = tmp_path / "messages.json"
        _write_messages(messages_file, 'אמור "שלום"')
        result = fix_messages_file(messages_file, dry_run=True)
        assert (result.checked, result.fixed) == (1, 1)

    def test_dry_run_does_not_write(self, tmp_path) -> None:
        messages_file = tmp_path / "messages.json"
        _write_messages(messages_file, 'אמור "שלום"')
        before = messages_file.read_text(encoding="utf-8")
        fix_messages_file(messages_file, dry_run=True)
        assert messages_file.read_text(encoding="utf-8") == before

    def test_fix_is_written_back(self, tmp_path) -> None:
        messages_file = tmp_path / "messages.json"
        _write_messages(messages_file, 'אמור "שלום"')
        fix_messages_file(messages_file)
        document = json.loads(messages_file.read_text(encoding="utf-8"))
        assert document["messages"][0]["translation"] == 'אמור \\"שלום\\"'

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(MessagesLoadError):
            fix_messages_file(tmp_path / "missing.json")

    def test_null_original_and_translation_are_skipped(self, tmp_path) -> None:
        messages_file = tmp_path / "messages.json"
        document = {
            "messages": [
                {"logicFile": "1.agilogic", "messageNumber": 4, "original": None, "translation": None},
                {"logicFile": "1.agilogic", "messageNumber": 5, "original": None, "translation": "שלום"},
            ]
        }
        messages_file.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")

        result = fix_messages_file(messages_file, dry_run=True)

        assert (result.checked, result.fixed) == (1, 0)


class TestFixEscapesMain:
    """Test the escape repair command line."""

    def test_verbose_flag_prints_summary(self, tmp_path, monkeypatch, capsys) -> None:
        messages_file = tmp_path / "messages.json"
        _write_messages(messages_file, 'אמור \\"שלום\\"')
        monkeypatch.setattr(sys, "argv", ["agivocab-fix-escapes", str(messages_file), "-v"])

        fix_escapes_main()

        assert "Messages checked: 1" in capsys.readouterr().err

    def test_quiet_by_default(self, tmp_path, monkeypatch, capsys) -> None:
        messages_file = tmp_path / "messages.json"
        _write_messages(messages_file, 'אמור \\"שלום\\"')
        monkeypatch.setattr(sys, "argv", ["agivocab-fix-escapes", str(messages_file)])

        fix_escapes_main()

        assert "Messages checked" not in capsys.readouterr().err
