"""User interaction components for Shelly."""

from .terminal import Terminal, SystemTerminal, create_terminal, read_context
from .selection import CommandSelector, parse_selection, extract_command

__all__ = [
    "Terminal",
    "SystemTerminal",
    "create_terminal",
    "read_context",
    "CommandSelector",
    "parse_selection",
    "extract_command",
]
