"""
Configuration package for Shelly.

This package contains the runtime settings and the on-disk credential store.
"""

__all__ = ["settings", "store"]
