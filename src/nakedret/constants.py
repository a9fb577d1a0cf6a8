"""Constants and enums for nakedret."""
from __future__ import annotations

from enum import Enum
from typing import Final

__version__: Final[str] = "0.1.0"

DEFAULT_MAX_LENGTH: Final[int] = 5

DEFAULT_PATH: Final[str] = "./"
RECURSIVE_SUFFIX: Final[str] = "/..."
GO_SOURCE_SUFFIX: Final[str] = ".go"

CONFIG_FILENAME: Final[str] = ".nakedret.toml"
CONFIG_KEYS: Final[frozenset[str]] = frozenset({"max_length"})


class OutputFormat(Enum):
    """Output format options."""

    TEXT = "text"
    JSON = "json"


class ScanDepth(Enum):
    """How far into a function body return statements are looked for."""

    SHALLOW = "shallow"
    NESTED = "nested"
