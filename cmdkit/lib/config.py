"""Configuration management for cmdkit applications.

Loads environment variables and provides a validated AppConfig dataclass.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from cmdkit.lib.constants import (
    ALL_LOG_FORMATS,
    DEFAULT_APP_NAME,
    DEFAULT_APP_VERSION,
    DEFAULT_LOG_FORMAT,
    LOG_FORMATS_LITERAL,
)
from cmdkit.lib.verbosity import Verbosity


@dataclass
class AppConfig:
    """Application configuration."""

    # Application metadata
    app_name: str = DEFAULT_APP_NAME
    app_version: str = DEFAULT_APP_VERSION
    description: str = ""

    # Verbosity threshold: level name or number 0-5
    verbosity: str = "error"

    # Logging
    log_level: str = "DEBUG"
    log_format: LOG_FORMATS_LITERAL = DEFAULT_LOG_FORMAT  # type: ignore[assignment]

    # Short options must begin with '-', long options with '--'
    strict: bool = False

    def validate(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.app_name.strip():
            raise ValueError("CMDKIT_APP_NAME can not be empty")

        # Validate verbosity
        Verbosity.parse(self.verbosity)

        # Validate log level
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(valid_levels))}")

        if self.log_format not in ALL_LOG_FORMATS:
            raise ValueError(f"log_format must be one of: {', '.join(ALL_LOG_FORMATS)}")

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "AppConfig":
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            AppConfig instance

        Raises:
            ValueError: If configuration is invalid
        """
        # Load .env file if specified
        if env_file:
            load_dotenv(env_file)
        else:
            # Try to load from default locations
            for path in ["config/.env", ".env"]:
                if Path(path).exists():
                    load_dotenv(path)
                    break

        config = cls(
            app_name=os.getenv("CMDKIT_APP_NAME", DEFAULT_APP_NAME),
            app_version=os.getenv("CMDKIT_APP_VERSION", DEFAULT_APP_VERSION),
            description=os.getenv("CMDKIT_DESCRIPTION", ""),
            verbosity=os.getenv("CMDKIT_VERBOSITY", "error"),
            log_level=os.getenv("CMDKIT_LOG_LEVEL", "DEBUG"),
            log_format=os.getenv("CMDKIT_LOG_FORMAT", DEFAULT_LOG_FORMAT),  # type: ignore
            strict=os.getenv("CMDKIT_STRICT", "false").lower() == "true",
        )

        config.validate()
        return config


# Global config instance (loaded on first use)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get global config instance.

    Returns:
        AppConfig instance
    """
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def set_config(config: AppConfig | None) -> None:
    """Set global config instance (for testing).

    Args:
        config: AppConfig instance, or None to reload from environment
    """
    global _config
    _config = config
