"""Configuration loading and validation for nakedret."""
from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from nakedret.constants import CONFIG_FILENAME, CONFIG_KEYS, DEFAULT_MAX_LENGTH
from nakedret.types import ConfigError, NakedRetConfig


class ConfigLoader:
    """Loads and validates nakedret configuration."""

    @staticmethod
    def find_config_file(start_path: Path | None = None) -> Path | None:
        """
        Find .nakedret.toml by walking up from start_path.

        Args:
            start_path: Directory to start searching from. Defaults to cwd.

        Returns:
            Path to the config file if found, None otherwise.
        """
        if start_path is None:
            start_path = Path.cwd()

        start_path = start_path.resolve()

        for directory in [start_path, *start_path.parents]:
            config_path: Path = directory / CONFIG_FILENAME
            if config_path.is_file():
                return config_path

        return None

    @staticmethod
    def load(path: Path | None = None) -> NakedRetConfig:
        """
        Load configuration from a .nakedret.toml file.

        Args:
            path: Explicit config file path. If None, searches upward.

        Returns:
            Validated NakedRetConfig instance.

        Raises:
            ConfigError: If configuration is invalid.
        """
        if path is None:
            path = ConfigLoader.find_config_file()

        if path is None:
            return NakedRetConfig()

        try:
            with open(path, "rb") as f:
                data: dict[str, Any] = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", path=path) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", path=path) from e

        return ConfigLoader._parse_config(data, config_path=path)

    @staticmethod
    def _parse_config(
        data: dict[str, Any],
        *,
        config_path: Path | None = None,
    ) -> NakedRetConfig:
        """Parse and validate configuration dictionary."""
        errors: list[str] = []

        unknown: list[str] = sorted(key for key in data if key not in CONFIG_KEYS)
        if unknown:
            errors.append(f"unknown keys: {unknown}")

        max_length: Any = data.get("max_length", DEFAULT_MAX_LENGTH)
        if isinstance(max_length, bool) or not isinstance(max_length, int):
            errors.append(
                f"max_length must be an integer, got {type(max_length).__name__}"
            )
        elif max_length < 0:
            errors.append(f"max_length must not be negative, got {max_length}")

        if errors:
            error_msg: str = "Configuration errors:\n" + "\n".join(
                f"  - {e}" for e in errors
            )
            raise ConfigError(error_msg, path=config_path)

        return NakedRetConfig(config_path=config_path, max_length=max_length)


def load_config(path: Path | None = None) -> NakedRetConfig:
    """
    Convenience function to load configuration.

    Args:
        path: Optional explicit path to a config file.

    Returns:
        Validated configuration.
    """
    return ConfigLoader.load(path)
