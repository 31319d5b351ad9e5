"""Configuration management for the selector builder."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from selector_builder.utils.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    """Application configuration."""

    strict_combinators: bool = True
    log_level: str = "WARNING"


class ConfigLoader:
    """Loads configuration from environment variables."""

    @staticmethod
    def load() -> AppConfig:
        """Load configuration from environment.

        Raises:
            ConfigurationError: If a configuration value is invalid.
        """
        load_dotenv()  # Load .env file if present

        return AppConfig(
            strict_combinators=ConfigLoader._get_bool_env(
                "SELECTOR_BUILDER_STRICT_COMBINATORS", True
            ),
            log_level=ConfigLoader._get_log_level_env(
                "SELECTOR_BUILDER_LOG_LEVEL", "WARNING"
            ),
        )

    @staticmethod
    def _get_bool_env(name: str, default: bool) -> bool:
        """Get a boolean environment variable.

        Args:
            name: The environment variable name.
            default: The default value if not set.

        Returns:
            The boolean value.

        Raises:
            ConfigurationError: If the value is not a recognized boolean.
        """
        value = os.environ.get(name)
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"Invalid value for {name}: '{value}' is not a valid boolean"
        )

    @staticmethod
    def _get_log_level_env(name: str, default: str) -> str:
        value = os.environ.get(name)
        if value is None:
            return default
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(
                f"Invalid value for {name}: '{value}' is not a logging level"
            )
        return level
