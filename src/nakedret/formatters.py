"""Output formatters for nakedret diagnostics."""
from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Protocol

from nakedret.constants import OutputFormat
from nakedret.diagnostics import Diagnostic


class Formatter(Protocol):
    def format(self, *, diagnostics: Sequence[Diagnostic]) -> str: ...


class TextFormatter:
    def format(self, *, diagnostics: Sequence[Diagnostic]) -> str:
        return "\n".join(
            f"{diag.file}:{diag.location.line} {diag.message}"
            for diag in diagnostics
        )


class JsonFormatter:
    def format(self, *, diagnostics: Sequence[Diagnostic]) -> str:
        items: list[dict[str, object]] = [
            {
                "file": str(diag.file),
                "line": diag.location.line,
                "column": diag.location.column,
                "function": diag.function,
                "line_span": diag.line_span,
                "message": diag.message,
            }
            for diag in diagnostics
        ]
        return json.dumps(items, indent=2)


def get_formatter(*, output_format: OutputFormat) -> Formatter:
    if output_format == OutputFormat.JSON:
        return JsonFormatter()
    return TextFormatter()


def format_summary(*, diagnostics: Sequence[Diagnostic]) -> str:
    count: int = len(diagnostics)
    if count == 0:
        return "No naked returns found."
    return f"Found {count} naked return{'s' if count != 1 else ''}."
