"""Diagnostic data model for nakedret."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source code location. All values are 1-based."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A naked return found in a function longer than the threshold."""

    file: Path
    location: SourceLocation
    function: str
    line_span: int

    @property
    def message(self) -> str:
        return f"{self.function} naked returns on {self.line_span} line function"
