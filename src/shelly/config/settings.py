"""
Runtime settings for Shelly.

This module provides settings management using Pydantic settings. Values
that used to be hard-coded (endpoint, model, config location) can be
overridden through SHELLY_-prefixed environment variables or a .env file,
which keeps them substitutable in tests.
"""

from typing import Optional, Dict, Any
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "deepseek/deepseek-chat-v3.1:free"
CONFIG_FILE_NAME = "config.json"


class ShellySettings(BaseSettings):
    """
    Main runtime settings for Shelly.

    Settings are loaded from multiple sources in order of preference:
    1. Environment variables (prefixed with SHELLY_)
    2. A .env file in the working directory
    3. Default values

    The API key is not a setting; it lives in the config file managed by
    shelly.config.store.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHELLY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Chat completions endpoint"
    )

    model: str = Field(
        default=DEFAULT_MODEL,
        description="Model identifier sent with every request"
    )

    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds (unset waits indefinitely)",
        gt=0
    )

    # Directory Configuration
    config_dir: Path = Field(
        default_factory=lambda: Path.home() / ".config" / "shelly",
        description="Configuration directory path"
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def config_file_path(self) -> Path:
        """Path to the credential file."""
        return self.config_dir / CONFIG_FILE_NAME

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()


def get_settings() -> ShellySettings:
    """Get the current Shelly settings."""
    return ShellySettings()
