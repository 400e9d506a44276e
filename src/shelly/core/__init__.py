"""
Core functionality for Shelly.

This package contains the chat client, the assistant that drives each mode
and the error types shared across the application.
"""

from .errors import ShellyError

__all__ = ["ShellyError"]
