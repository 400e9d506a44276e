"""
On-disk credential store for Shelly.

The API key is kept in a small JSON document under the user's config
directory. The directory is created owner-only (0700) and the file is
written owner-only (0600).
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.errors import (
    ConfigDirectoryError,
    ConfigMalformedError,
    ConfigMissingError,
    ConfigUnreadableError,
    ConfigWriteError,
)

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o700
FILE_MODE = 0o600


class Config(BaseModel):
    """Persisted credentials."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    api_key: str = Field(repr=False, description="OpenRouter API key")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """The key is sent in an HTTP header, so it must be ASCII."""
        if not v.isascii():
            raise ValueError("API key must contain only ASCII characters")
        return v

    def masked(self) -> str:
        """Display-safe form of the API key."""
        if len(self.api_key) <= 8:
            return "***masked***"
        return f"{self.api_key[:4]}...{self.api_key[-4:]}"


class ConfigStore:
    """Loads and saves the Config document at a fixed path."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Config:
        """Load the config file.

        Returns:
            The stored Config

        Raises:
            ConfigMissingError: The file does not exist
            ConfigUnreadableError: The file exists but could not be read
            ConfigMalformedError: The file is not a valid config document
        """
        try:
            data = self.path.read_bytes()
        except FileNotFoundError as e:
            raise ConfigMissingError(self.path) from e
        except OSError as e:
            raise ConfigUnreadableError(self.path, original_error=e) from e

        try:
            config = Config.model_validate_json(data)
        except ValidationError as e:
            raise ConfigMalformedError(self.path, original_error=e) from e

        logger.debug(f"Loaded config from {self.path}")
        return config

    def save(self, config: Config) -> Path:
        """Write the config file with owner-only permissions.

        Args:
            config: Config to persist

        Returns:
            Path of the written file

        Raises:
            ConfigDirectoryError: The parent directory could not be created
            ConfigWriteError: The file could not be written
        """
        directory = self.path.parent
        try:
            directory.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigDirectoryError(directory, original_error=e) from e

        payload = config.model_dump_json(indent=2)
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            # os.open only applies the mode to newly created files
            os.chmod(self.path, FILE_MODE)
        except OSError as e:
            raise ConfigWriteError(self.path, original_error=e) from e

        logger.debug(f"Saved config to {self.path}")
        return self.path
