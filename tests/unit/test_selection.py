"""Tests for suggestion selection and extraction."""

import pytest
from rich.console import Console

from shelly.core.errors import (
    ClipboardUnavailableError,
    InvalidSelectionError,
    SelectionNotFoundError,
)
from shelly.ui.selection import CommandSelector, extract_command, parse_selection


class TestParseSelection:

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("2\n", 2), ("  3  ", 3)])
    def test_valid(self, raw, expected):
        assert parse_selection(raw) == expected

    @pytest.mark.parametrize("raw", ["4", "0", "abc", "", "1.", "01", "1 2"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidSelectionError) as exc_info:
            parse_selection(raw)
        assert "Invalid selection" in str(exc_info.value)


class TestExtractCommand:

    def test_plain_numbered_lines(self):
        assert extract_command("1. foo\n2. bar\n3. baz", 2) == "bar"

    def test_backticks_removed(self):
        assert extract_command("1. ls\n2. ls -a\n3. `ls -la`", 3) == "ls -la"

    def test_indented_line_and_explanation(self, suggestions):
        reply = "Explanation first.\n\n   1.   du -sh *   \n2. x\n3. y"
        assert extract_command(reply, 1) == "du -sh *"
        assert extract_command(suggestions, 3) == "find . -maxdepth 1"

    def test_first_match_wins(self):
        assert extract_command("2. first\n2. second", 2) == "first"

    def test_number_needs_dot(self):
        with pytest.raises(SelectionNotFoundError):
            extract_command("1) foo\n2) bar\n3) baz", 2)

    def test_unnumbered_reply(self):
        with pytest.raises(SelectionNotFoundError) as exc_info:
            extract_command("Just use ls.", 1)
        assert str(exc_info.value) == "Could not find the selected command"

    def test_empty_command(self):
        with pytest.raises(SelectionNotFoundError):
            extract_command("1.\n2. bar", 1)


class TestCommandSelector:

    @pytest.fixture
    def output(self):
        return Console(record=True, width=120)

    def test_copies_selected_command(self, make_terminal, fake_clipboard, output, suggestions):
        selector = CommandSelector(make_terminal(answers=["3"]), fake_clipboard, output)

        assert selector.select_and_copy(suggestions) == "find . -maxdepth 1"
        assert fake_clipboard.copied == ["find . -maxdepth 1"]

        text = output.export_text()
        assert "Select a command (1-3): " in text
        assert "Command copied to clipboard: find . -maxdepth 1" in text

    def test_invalid_selection_skips_clipboard(self, make_terminal, fake_clipboard, output, suggestions):
        selector = CommandSelector(make_terminal(answers=["4"]), fake_clipboard, output)

        with pytest.raises(InvalidSelectionError):
            selector.select_and_copy(suggestions)
        assert fake_clipboard.copied == []

    def test_missing_selection_skips_clipboard(self, make_terminal, fake_clipboard, output):
        selector = CommandSelector(make_terminal(answers=["2"]), fake_clipboard, output)

        with pytest.raises(SelectionNotFoundError):
            selector.select_and_copy("1. only one")
        assert fake_clipboard.copied == []

    def test_clipboard_error_propagates(self, make_terminal, output, suggestions):
        class NoClipboard:
            def copy(self, text):
                raise ClipboardUnavailableError()

        selector = CommandSelector(make_terminal(answers=["1"]), NoClipboard(), output)
        with pytest.raises(ClipboardUnavailableError):
            selector.select_and_copy(suggestions)
        assert "copied" not in output.export_text()
