"""
CLI interface package for Shelly.

This package contains the command-line entry point and its dispatching logic.
"""

__all__ = ["app"]
