"""Logging setup for the command-line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config.settings import ShellySettings


def configure_logging(settings: ShellySettings) -> None:
    """Send shelly's log records to stderr through rich.

    Only the shelly logger hierarchy is configured. Calling this again
    replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger("shelly")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=settings.debug,
        rich_tracebacks=settings.debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(settings.effective_log_level)
    logger.propagate = False
