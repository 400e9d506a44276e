"""Access to standard input and the controlling terminal."""

from abc import ABC, abstractmethod
from typing import IO, Iterator, List, Optional
import logging
import sys

logger = logging.getLogger(__name__)

CONTROLLING_TERMINAL = "/dev/tty"


class Terminal(ABC):
    """What the assistant needs from the terminal it runs in."""

    @abstractmethod
    def is_interactive(self) -> bool:
        """True when standard input is an interactive terminal."""

    @abstractmethod
    def read_piped(self) -> str:
        """Read standard input to end of input, joining lines with newlines."""

    @abstractmethod
    def read_line(self) -> str:
        """Read one line typed by the user."""


class SystemTerminal(Terminal):
    """Terminal backed by the process's real streams.

    read_line prefers the controlling terminal device so that a prompt
    still reaches the user when standard input is a pipe.
    """

    def __init__(self, stdin: Optional[IO[str]] = None, tty_path: str = CONTROLLING_TERMINAL):
        self._stdin = stdin
        self.tty_path = tty_path

    @property
    def stdin(self) -> IO[str]:
        return self._stdin if self._stdin is not None else sys.stdin

    def is_interactive(self) -> bool:
        try:
            return self.stdin.isatty()
        except ValueError:
            # closed stream
            return False

    def read_piped(self) -> str:
        lines: List[str] = [_strip_terminator(line) for line in self._stdin_lines()]
        logger.debug(f"Read {len(lines)} piped lines")
        return "\n".join(lines)

    def read_line(self) -> str:
        try:
            with open(self.tty_path, "r", encoding="utf-8", errors="replace") as tty:
                return tty.readline()
        except OSError:
            logger.debug(f"{self.tty_path} unavailable, reading selection from stdin")
            buffer = getattr(self.stdin, "buffer", None)
            if buffer is not None:
                return _decode(buffer.readline())
            return self.stdin.readline()

    def _stdin_lines(self) -> Iterator[str]:
        # Piped bytes need not be valid UTF-8; decode them leniently
        buffer = getattr(self.stdin, "buffer", None)
        if buffer is None:
            yield from self.stdin
            return
        for raw in buffer:
            yield _decode(raw)


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _strip_terminator(line: str) -> str:
    """Remove one trailing "\\n" or "\\r\\n", leaving other characters intact."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_context(terminal: Terminal) -> str:
    """Piped input, or an empty string when stdin is a terminal."""
    if terminal.is_interactive():
        return ""
    return terminal.read_piped()


def create_terminal() -> Terminal:
    """Create the terminal used by the CLI."""
    return SystemTerminal()
