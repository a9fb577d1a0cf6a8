"""Check orchestrator for nakedret."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from nakedret.constants import ScanDepth
from nakedret.detector import detect, validate_max_length
from nakedret.diagnostics import Diagnostic
from nakedret.formatters import Formatter, format_summary, get_formatter
from nakedret.loader import load_sources
from nakedret.parser import ParseResult
from nakedret.types import NakedRetConfig

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckResult:
    diagnostics: tuple[Diagnostic, ...]
    files_checked: int
    exit_code: int


def check_paths(
    *,
    args: tuple[str, ...],
    config: NakedRetConfig,
    scan_depth: ScanDepth = ScanDepth.SHALLOW,
) -> CheckResult:
    """
    Load the Go files named by args and report their naked returns.

    Raises:
        ConfigError: If the threshold is unset or invalid.
        InputError: If an argument is invalid or a file fails to parse.
    """
    started: float = time.perf_counter()
    max_length: int = validate_max_length(config.max_length)

    trees: list[ParseResult] = load_sources(args=args)
    diagnostics: list[Diagnostic] = detect(
        trees,
        max_length=max_length,
        scan_depth=scan_depth,
    )

    logger.info(format_summary(diagnostics=diagnostics))
    logger.info("Completed in %.3fs", time.perf_counter() - started)

    exit_code: int = 1 if diagnostics and config.set_exit_status else 0
    return CheckResult(
        diagnostics=tuple(diagnostics),
        files_checked=len(trees),
        exit_code=exit_code,
    )


def format_results(*, result: CheckResult, config: NakedRetConfig) -> str:
    formatter: Formatter = get_formatter(output_format=config.output_format)
    return formatter.format(diagnostics=result.diagnostics)
