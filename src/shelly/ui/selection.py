"""Interactive selection of a suggested command."""

import logging
from typing import Optional

from rich.console import Console

from ..core.errors import InvalidSelectionError, SelectionNotFoundError
from ..services.clipboard import Clipboard
from .terminal import Terminal

logger = logging.getLogger(__name__)

SELECTION_PROMPT = "\nSelect a command (1-3): "
VALID_SELECTIONS = ("1", "2", "3")


def parse_selection(raw: str) -> int:
    """Validate a typed selection.

    Raises:
        InvalidSelectionError: Input is not exactly 1, 2 or 3
    """
    selection = raw.strip()
    if selection not in VALID_SELECTIONS:
        raise InvalidSelectionError(selection)
    return int(selection)


def extract_command(reply: str, selection: int) -> str:
    """Pull the command numbered `selection` out of a reply.

    The first line whose stripped text starts with "<selection>." wins.
    The number, surrounding whitespace and enclosing backticks are removed.

    Raises:
        SelectionNotFoundError: No such line, or the line holds no command
    """
    prefix = f"{selection}."
    for line in reply.splitlines():
        line = line.strip()
        if line.startswith(prefix):
            command = line[len(prefix):].strip().strip("`")
            if not command:
                break
            return command
    raise SelectionNotFoundError(selection)


class CommandSelector:
    """Asks the user to pick a suggestion and copies it to the clipboard."""

    def __init__(self, terminal: Terminal, clipboard: Clipboard, console: Optional[Console] = None):
        self.terminal = terminal
        self.clipboard = clipboard
        self.console = console or Console()

    def select_and_copy(self, reply: str) -> str:
        """Run the prompt, parse, extract and copy steps in order.

        Returns:
            The command that was copied
        """
        self.console.print(SELECTION_PROMPT, end="", markup=False, highlight=False, emoji=False)
        selection = parse_selection(self.terminal.read_line())
        command = extract_command(reply, selection)
        logger.debug(f"Selected suggestion {selection}")

        self.clipboard.copy(command)
        self.console.print(
            f"Command copied to clipboard: {command}",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        return command
