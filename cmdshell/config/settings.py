"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from cmdshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

ENV_PREFIX = "CMDSHELL_"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.prompt: str = self._get_env("PROMPT", "Demo >")
        self.terminators: tuple[str, ...] = self._get_list_env("TERMINATORS", "bye,exit")
        self.pad_length: int = self._get_int_env("PAD_LENGTH", 4)
        self.truncation_marker: str = self._get_env("TRUNCATION_MARKER", "... ")
        self.name_columns: int = self._get_int_env("NAME_COLUMNS", 10)
        self.attribute_columns: int = self._get_int_env("ATTRIBUTE_COLUMNS", 8)
        self.size_columns: int = self._get_int_env("SIZE_COLUMNS", 3)
        self.exit_delay: float = self._get_float_env("EXIT_DELAY", 1.0)
        self.list_recursive: bool = self._get_bool_env("LIST_RECURSIVE", False)
        self.log_level: str = self._get_env("LOG_LEVEL", "WARNING").upper()

        if self.pad_length < 1:
            raise ConfigurationError(f"{ENV_PREFIX}PAD_LENGTH must be at least 1")
        if len(self.truncation_marker) > self.pad_length:
            raise ConfigurationError(
                f"{ENV_PREFIX}TRUNCATION_MARKER must not be longer than one pad unit"
            )
        if not self.terminators:
            raise ConfigurationError(f"{ENV_PREFIX}TERMINATORS must name at least one keyword")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if malformed."""
        raw = self._get_env(key, str(default))
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {ENV_PREFIX}{key} must be an integer, got {raw!r}"
            )

    def _get_float_env(self, key: str, default: float) -> float:
        """Get a float environment variable, raise error if malformed."""
        raw = self._get_env(key, str(default))
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {ENV_PREFIX}{key} must be a number, got {raw!r}"
            )
        if value < 0:
            raise ConfigurationError(f"Environment variable {ENV_PREFIX}{key} must not be negative")
        return value

    def _get_bool_env(self, key: str, default: bool) -> bool:
        val = self._get_env(key, "1" if default else "0").strip().lower()
        return val not in ("0", "false", "no", "off", "")

    def _get_list_env(self, key: str, default: str) -> tuple[str, ...]:
        raw = self._get_env(key, default)
        return tuple(item.strip().lower() for item in raw.split(",") if item.strip())
