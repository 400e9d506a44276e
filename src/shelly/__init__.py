"""
Shelly - a terminal command assistant.

This package forwards a failing command, a task description or a question
to a chat-completion endpoint and prints the reply, optionally copying one
of the suggested commands to the clipboard.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "shelly"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
