"""Tests for terminal access."""

import io

from shelly.ui.terminal import SystemTerminal, read_context


class TestSystemTerminal:

    def test_pipe_is_not_interactive(self):
        assert SystemTerminal(stdin=io.StringIO("")).is_interactive() is False

    def test_read_piped_joins_lines(self):
        terminal = SystemTerminal(stdin=io.StringIO("a\nb\nc\n"))
        assert terminal.read_piped() == "a\nb\nc"

    def test_read_piped_without_trailing_newline(self):
        assert SystemTerminal(stdin=io.StringIO("a\nb")).read_piped() == "a\nb"

    def test_read_piped_keeps_inner_carriage_return(self):
        assert SystemTerminal(stdin=io.StringIO("a\r\r\nb")).read_piped() == "a\r\nb"

    def test_read_piped_crlf(self):
        assert SystemTerminal(stdin=io.StringIO("a\r\nb\r\n")).read_piped() == "a\nb"

    def test_read_piped_keeps_blank_lines(self):
        assert SystemTerminal(stdin=io.StringIO("a\n\nb\n")).read_piped() == "a\n\nb"

    def test_read_line_prefers_tty(self, tmp_path):
        tty = tmp_path / "tty"
        tty.write_text("2\n")
        terminal = SystemTerminal(stdin=io.StringIO("piped\n"), tty_path=str(tty))

        assert terminal.read_line() == "2\n"

    def test_read_line_falls_back_to_stdin(self, tmp_path):
        terminal = SystemTerminal(
            stdin=io.StringIO("3\n"), tty_path=str(tmp_path / "missing-tty")
        )
        assert terminal.read_line() == "3\n"


class TestReadContext:

    def test_piped(self, make_terminal):
        terminal = make_terminal(piped="a\nb\nc")
        assert read_context(terminal) == "a\nb\nc"

    def test_interactive_does_not_read(self, make_terminal):
        terminal = make_terminal()
        assert read_context(terminal) == ""
        assert terminal.piped_reads == 0


class TestUndecodableInput:

    def test_read_piped_replaces_invalid_utf8(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"ok\n\xff\xfe bad\n"), encoding="utf-8")
        assert SystemTerminal(stdin=stdin).read_piped() == "ok\n�� bad"

    def test_read_piped_only_drops_final_terminator(self):
        stdin = io.TextIOWrapper(io.BytesIO(b"a\r\r\nb\r\n"), encoding="utf-8")
        assert SystemTerminal(stdin=stdin).read_piped() == "a\r\nb"

    def test_read_line_from_tty_with_invalid_utf8(self, tmp_path):
        tty = tmp_path / "tty"
        tty.write_bytes(b"2\xff\n")
        terminal = SystemTerminal(stdin=io.StringIO(""), tty_path=str(tty))

        assert terminal.read_line() == "2�\n"

    def test_read_line_from_stdin_with_invalid_utf8(self, tmp_path):
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff1\n"), encoding="utf-8")
        terminal = SystemTerminal(stdin=stdin, tty_path=str(tmp_path / "missing-tty"))

        assert terminal.read_line() == "�1\n"
