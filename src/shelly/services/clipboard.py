"""
Clipboard integration.

Text is copied by piping it into the first supported clipboard utility
found on PATH.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..core.errors import ClipboardExecError, ClipboardUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClipboardCommand:
    """A clipboard utility and the arguments that make it read stdin."""
    program: str
    args: Tuple[str, ...] = ()

    @property
    def argv(self) -> Tuple[str, ...]:
        return (self.program, *self.args)


# Probed in order
CLIPBOARD_COMMANDS: Tuple[ClipboardCommand, ...] = (
    ClipboardCommand("xclip", ("-selection", "clipboard")),
    ClipboardCommand("xsel", ("--clipboard", "--input")),
    ClipboardCommand("wl-copy"),
)


class Clipboard:
    """Copies text with an external clipboard utility."""

    def __init__(self, commands: Sequence[ClipboardCommand] = CLIPBOARD_COMMANDS):
        self.commands = tuple(commands)

    def find_command(self) -> Optional[ClipboardCommand]:
        """Return the first clipboard utility available on PATH."""
        for command in self.commands:
            if shutil.which(command.program):
                return command
        return None

    def copy(self, text: str) -> None:
        """Copy text to the clipboard.

        Raises:
            ClipboardUnavailableError: No clipboard utility was found
            ClipboardExecError: The utility could not run or failed
        """
        command = self.find_command()
        if command is None:
            raise ClipboardUnavailableError()

        logger.debug(f"Copying {len(text)} characters with {command.program}")
        try:
            subprocess.run(list(command.argv), input=text, text=True, check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise ClipboardExecError(command.program, original_error=e) from e


def create_clipboard() -> Clipboard:
    """Create the clipboard used by the CLI."""
    return Clipboard()
