"""
Structured error system for Shelly.

Every failure the assistant can hit is represented by a ShellyError subclass.
Errors propagate up to the CLI, which reports them and exits with status 1;
nothing below the CLI terminates the process.
"""

from pathlib import Path
from typing import Any, Dict, Optional

INIT_HINT = "Run 'shelly --init' to set up your API key"


class ShellyError(Exception):
    """Base exception for all Shelly errors."""

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.original_error = original_error
        self.hint = hint

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "code": self.code,
            "details": self.details,
            "hint": self.hint,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message}: {self.original_error}"
        return self.message


# Configuration errors

class ConfigError(ShellyError):
    """Base class for config file errors."""

    def __init__(self, message: str, path: Optional[Path] = None, **kwargs):
        super().__init__(message, **kwargs)
        if path is not None:
            self.details["path"] = str(path)


class ConfigLoadError(ConfigError):
    """Base class for errors raised while loading the config file."""


class ConfigMissingError(ConfigLoadError):
    """The config file does not exist yet."""

    def __init__(self, path: Path, **kwargs):
        super().__init__(
            f"Config file not found: {path}",
            path=path,
            code="CONFIG_MISSING",
            hint=INIT_HINT,
            **kwargs,
        )


class ConfigUnreadableError(ConfigLoadError):
    """The config file exists but could not be read."""

    def __init__(self, path: Path, **kwargs):
        super().__init__(
            f"Could not read config file {path}",
            path=path,
            code="CONFIG_UNREADABLE",
            **kwargs,
        )


class ConfigMalformedError(ConfigLoadError):
    """The config file could not be parsed."""

    def __init__(self, path: Path, **kwargs):
        super().__init__(
            f"Config file {path} is corrupt",
            path=path,
            code="CONFIG_MALFORMED",
            **kwargs,
        )


class ConfigDirectoryError(ConfigError):
    """The config directory could not be created."""

    def __init__(self, path: Path, **kwargs):
        super().__init__(
            f"Could not create config directory {path}",
            path=path,
            code="CONFIG_DIR_CREATE_FAILED",
            **kwargs,
        )


class ConfigWriteError(ConfigError):
    """The config file could not be written."""

    def __init__(self, path: Path, **kwargs):
        super().__init__(
            f"Could not write config file {path}",
            path=path,
            code="CONFIG_WRITE_FAILED",
            **kwargs,
        )


class InvalidApiKeyError(ShellyError):
    """The API key entered during initialization cannot be used."""

    def __init__(self, message: str = "API key cannot be empty", **kwargs):
        super().__init__(message, code="INVALID_API_KEY", **kwargs)


# Chat client errors

class RequestBuildError(ShellyError):
    """The chat request could not be serialized or built."""

    def __init__(self, message: str = "Could not create request", **kwargs):
        super().__init__(message, code="REQUEST_BUILD_FAILED", **kwargs)


class TransportError(ShellyError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str = "API request failed", **kwargs):
        super().__init__(message, code="TRANSPORT_FAILED", **kwargs)


class ApiStatusError(ShellyError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, status: int, body: str, **kwargs):
        super().__init__(
            f"API error (status {status}): {body}",
            code="HTTP_STATUS_ERROR",
            **kwargs,
        )
        self.status = status
        self.body = body
        self.details["status"] = status


class ResponseMalformedError(ShellyError):
    """The response body is not a chat completion document."""

    def __init__(self, message: str = "Could not parse response", **kwargs):
        super().__init__(message, code="RESPONSE_MALFORMED", **kwargs)


class EmptyReplyError(ShellyError):
    """The response carried no choices."""

    def __init__(self, message: str = "No response from API", **kwargs):
        super().__init__(message, code="EMPTY_REPLY", **kwargs)


# Selection and clipboard errors

class InvalidSelectionError(ShellyError):
    """The user typed something other than 1, 2 or 3."""

    def __init__(self, selection: str, **kwargs):
        super().__init__(
            "Invalid selection. Please enter 1, 2, or 3.",
            code="INVALID_SELECTION",
            **kwargs,
        )
        self.details["selection"] = selection


class SelectionNotFoundError(ShellyError):
    """The reply has no line numbered with the chosen selection."""

    def __init__(self, selection: int, **kwargs):
        super().__init__(
            "Could not find the selected command",
            code="SELECTION_NOT_FOUND",
            **kwargs,
        )
        self.details["selection"] = selection


class ClipboardUnavailableError(ShellyError):
    """No supported clipboard utility is on PATH."""

    def __init__(
        self,
        message: str = "No clipboard utility found (install xclip, xsel, or wl-clipboard)",
        **kwargs,
    ):
        super().__init__(message, code="CLIPBOARD_UNAVAILABLE", **kwargs)


class ClipboardExecError(ShellyError):
    """The clipboard utility failed to run."""

    def __init__(self, program: str, **kwargs):
        super().__init__(
            f"Could not copy to clipboard with {program}",
            code="CLIPBOARD_EXEC_FAILED",
            **kwargs,
        )
        self.details["program"] = program


def create_user_friendly_message(error: ShellyError) -> str:
    """
    Create the message shown to the user for an error.

    Args:
        error: The ShellyError to convert

    Returns:
        Message text, with the hint on a second line when there is one
    """
    if isinstance(error, ConfigLoadError):
        message = f"Error loading config: {error}"
    else:
        message = f"Error: {error}"

    if error.hint:
        message = f"{message}\n{error.hint}"
    return message
