"""
Entry point for running Shelly as a module.

This allows users to run the CLI using:
    python -m shelly [options]
"""

from shelly.cli.app import main

if __name__ == "__main__":
    main()
