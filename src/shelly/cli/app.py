"""
Main CLI application entry point.

This module contains the Typer application for Shelly. It validates the
mode flags, wires the assistant together and is the only place where a
failure turns into a process exit status.
"""

from typing import Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from shelly import VERSION
from shelly.config.settings import ShellySettings, get_settings
from shelly.config.store import Config, ConfigStore
from shelly.core.assistant import Assistant
from shelly.core.client import create_chat_client
from shelly.core.errors import InvalidApiKeyError, ShellyError, create_user_friendly_message
from shelly.services.clipboard import create_clipboard
from shelly.ui.selection import CommandSelector
from shelly.ui.terminal import create_terminal
from shelly.utils.log import configure_logging

# Create the main Typer application
app = typer.Typer(
    name="shelly",
    help="Shelly - Your terminal command assistant",
    add_completion=False,
    rich_markup_mode="rich",
)

# Rich consoles for output
console = Console()
err_console = Console(stderr=True)

USAGE = """Shelly - Your terminal command assistant

Usage:
  shelly --init                              Initialize with API key
  <command> | shelly -d "description"        Debug a command
  shelly -c "what you want to do"            Generate command suggestions
  shelly -q "your question"                  Ask a question

Flags:
  -d, --debug     Debug mode: analyze and fix a command
  -c, --command   Command mode: generate command suggestions
  -q, --question  Question mode: answer a question
  --init          Initialize shelly with your API key"""


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]Shelly[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


def _print_plain(target: Console, text: str) -> None:
    target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


@app.command()
def shelly(
    debug: Optional[str] = typer.Option(
        None, "--debug", "-d", help="Debug mode: analyze and fix a command"
    ),
    command: Optional[str] = typer.Option(
        None, "--command", "-c", help="Command mode: generate command suggestions"
    ),
    question: Optional[str] = typer.Option(
        None, "--question", "-q", help="Question mode: answer a question"
    ),
    init: bool = typer.Option(
        False, "--init", help="Initialize shelly with your API key"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Ask an AI model to debug a command, suggest commands or answer a question."""
    if init:
        _run_guarded(_initialize)
        return

    modes = {
        name: text
        for name, text in (("debug", debug), ("command", command), ("question", question))
        if text
    }

    if not modes:
        _print_plain(console, USAGE)
        raise typer.Exit(1)

    if len(modes) > 1:
        err_console.print("Error: Only one mode can be used at a time", markup=False)
        raise typer.Exit(1)

    mode, text = next(iter(modes.items()))
    _run_guarded(lambda: _run_mode(mode, text))


def _run_guarded(action: Callable[[], None]) -> None:
    """Run an action, reporting any failure and exiting with status 1."""
    try:
        action()
    except ShellyError as e:
        _print_plain(err_console, create_user_friendly_message(e))
        raise typer.Exit(e.exit_code)
    except ValidationError as e:
        _print_plain(err_console, f"Error: invalid settings: {e}")
        raise typer.Exit(1)


def _initialize() -> None:
    """Prompt for an API key and store it."""
    settings = get_settings()
    configure_logging(settings)

    console.print("Initializing Shelly...")
    api_key = typer.prompt(
        "Enter your OpenRouter API key", default="", show_default=False
    ).strip()
    if not api_key:
        raise InvalidApiKeyError()
    if not api_key.isascii():
        raise InvalidApiKeyError("API key must contain only ASCII characters")

    path = ConfigStore(settings.config_file_path).save(Config(api_key=api_key))
    _print_plain(console, f"Configuration saved to {path}")
    console.print("Shelly is ready to use!")


def _run_mode(mode: str, text: str) -> None:
    settings: ShellySettings = get_settings()
    configure_logging(settings)
    config = ConfigStore(settings.config_file_path).load()

    terminal = create_terminal()
    selector = CommandSelector(terminal, create_clipboard(), console)
    with create_chat_client(settings, config) as client:
        assistant = Assistant(client, terminal, selector, console)
        getattr(assistant, mode)(text)


def main() -> None:
    """Console script entry point."""
    app()
