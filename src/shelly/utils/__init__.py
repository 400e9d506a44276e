"""
Utilities package for Shelly.

This package contains shared helpers such as logging setup.
"""

from .log import configure_logging

__all__ = ["configure_logging"]
