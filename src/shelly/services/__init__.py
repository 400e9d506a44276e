"""
Services for Shelly.

This package contains the integrations with external programs.
"""

from .clipboard import Clipboard, ClipboardCommand, CLIPBOARD_COMMANDS, create_clipboard

__all__ = [
    "Clipboard",
    "ClipboardCommand",
    "CLIPBOARD_COMMANDS",
    "create_clipboard",
]
