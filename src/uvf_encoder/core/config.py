"""
Configuration module for the UVF encoder.

Loads configuration from an optional JSON file and environment variables.
"""

import codecs
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils


class Config:
    """Configuration manager for the encoder."""

    def __init__(self, config_file: Optional[str] = None, load_env: bool = True):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses the
                        UVF_CONFIG_FILE env var. Without either, defaults apply.
            load_env: Read UVF_* environment variables. When False, neither
                      UVF_CONFIG_FILE nor the overrides are consulted.
        """
        if load_env:
            config_file = config_file or os.getenv("UVF_CONFIG_FILE")
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self._load_config()
        if load_env:
            self._override_from_env()
        self._validate_config()

    @classmethod
    def defaults(cls) -> "Config":
        """Built-in defaults only, independent of files and environment."""
        return cls(load_env=False)

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self.config_file:
            return

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("UVF_LINE_ENDING"):
            self._set("uvf", "line_ending", os.getenv("UVF_LINE_ENDING"))

        if os.getenv("UVF_TIME_ZONE"):
            self._set("uvf", "time_zone", os.getenv("UVF_TIME_ZONE"))

        if os.getenv("UVF_CHARSET"):
            self._set("uvf", "charset", os.getenv("UVF_CHARSET"))

        # Logging
        if os.getenv("UVF_LOG_LEVEL"):
            self._set("logging", "level", os.getenv("UVF_LOG_LEVEL"))

        if os.getenv("UVF_LOG_FILE"):
            self._set("logging", "file", os.getenv("UVF_LOG_FILE"))

    def _validate_config(self) -> None:
        """Validate configured values."""
        for section in ("uvf", "logging"):
            if section in self.config and not isinstance(self.config[section], dict):
                raise ValueError(f"Configuration section '{section}' must be an object")

        if self.line_ending not in constants.LINE_ENDINGS:
            raise ValueError(
                f"Invalid uvf.line_ending: {self.line_ending} "
                f"(expected one of {', '.join(constants.LINE_ENDINGS)})"
            )

        try:
            DateUtils.parse_timezone(self.time_zone)
        except ValueError:
            raise ValueError(f"Invalid uvf.time_zone: {self.time_zone}")

        try:
            codecs.lookup(self.charset)
        except LookupError:
            raise ValueError(f"Invalid uvf.charset: {self.charset}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'uvf.time_zone')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def line_ending(self) -> str:
        """Get line ending name (Unix, Windows or Mac)."""
        return self.get("uvf.line_ending", constants.DEFAULT_LINE_ENDING)

    @property
    def line_separator(self) -> str:
        """Get the line break characters for the configured line ending."""
        return constants.LINE_ENDINGS[self.line_ending]

    @property
    def time_zone(self) -> str:
        """Get timezone UVF timestamps are rendered in."""
        return self.get("uvf.time_zone", constants.DEFAULT_TIME_ZONE)

    @property
    def charset(self) -> str:
        """Get output charset."""
        return self.get("uvf.charset", constants.DEFAULT_CHARSET)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path, if file logging is enabled."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(file={self.config_file}, line_ending={self.line_ending}, "
            f"time_zone={self.time_zone}, charset={self.charset})"
        )
