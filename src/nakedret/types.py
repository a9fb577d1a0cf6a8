"""Common types and dataclasses for nakedret."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nakedret.constants import DEFAULT_MAX_LENGTH, OutputFormat


@dataclass(frozen=True, slots=True)
class NakedRetConfig:
    """Complete nakedret configuration."""

    config_path: Path | None = None
    max_length: int | None = DEFAULT_MAX_LENGTH
    output_format: OutputFormat = OutputFormat.TEXT
    set_exit_status: bool = False


class ConfigError(Exception):
    """Error during configuration loading or validation."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path: Path | None = path
        super().__init__(message)


class InputError(Exception):
    """Invalid path argument or unparseable Go source."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path: Path | None = path
        super().__init__(message)
