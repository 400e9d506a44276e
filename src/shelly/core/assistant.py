"""
Mode handlers for Shelly.

The Assistant builds the prompt for a mode, sends it, prints the reply and,
for the debug and command modes, lets the user copy one of the suggested
commands.
"""

import logging
from typing import Optional

from rich.console import Console

from ..prompts import build_command_prompt, build_debug_prompt, build_question_prompt
from ..ui.selection import CommandSelector
from ..ui.terminal import Terminal, read_context
from .client import ChatClient

logger = logging.getLogger(__name__)


class Assistant:
    """Runs one mode per invocation."""

    def __init__(
        self,
        client: ChatClient,
        terminal: Terminal,
        selector: CommandSelector,
        console: Optional[Console] = None,
    ):
        self.client = client
        self.terminal = terminal
        self.selector = selector
        self.console = console or Console()

    def debug(self, description: str) -> str:
        """Explain a failing command piped on stdin and offer three fixes."""
        piped_input = read_context(self.terminal)
        reply = self._ask(build_debug_prompt(description, piped_input))
        self.selector.select_and_copy(reply)
        return reply

    def command(self, request: str) -> str:
        """Suggest three commands for a task."""
        reply = self._ask(build_command_prompt(request))
        self.selector.select_and_copy(reply)
        return reply

    def question(self, question: str) -> str:
        """Answer a question, using piped stdin as context."""
        context = read_context(self.terminal)
        return self._ask(build_question_prompt(question, context))

    def _ask(self, prompt: str) -> str:
        logger.debug(f"Sending prompt of {len(prompt)} characters")
        reply = self.client.send(prompt)
        self.console.print(reply, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return reply
