"""Tests for --verbose and --debug logging flags."""
from __future__ import annotations

import contextlib
import logging
from collections.abc import Generator
from pathlib import Path

from click.testing import CliRunner

from nakedret.cli import cli


class TestDefaultNoLogging:
    """Default mode should not emit logging output."""

    def test_no_warnings_by_default(
        self, go_package: Path, caplog: logging.LogRecord,
    ) -> None:
        runner: CliRunner = CliRunner()
        with caplog.at_level(logging.DEBUG):  # type: ignore[union-attr]
            result = runner.invoke(cli, [str(go_package)])

        assert result.exit_code == 0
        nakedret_warnings: list[str] = [
            r.message for r in caplog.records  # type: ignore[union-attr]
            if r.name.startswith("nakedret") and r.levelno >= logging.WARNING
        ]
        assert nakedret_warnings == []

    def test_file_mode_warns_about_ignored_directories(self, go_package: Path) -> None:
        runner: CliRunner = CliRunner()
        with _capture_logs("nakedret", level=logging.WARNING) as records:
            runner.invoke(cli, [str(go_package / "docs"), str(go_package / "main.go")])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "Ignoring directory" in messages


class TestVerboseFlag:
    """--verbose shows INFO-level messages."""

    def test_verbose_shows_file_count_and_timing(self, go_package: Path) -> None:
        runner: CliRunner = CliRunner()
        with _capture_logs("nakedret") as records:
            runner.invoke(cli, ["--verbose", str(go_package)])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "Found 2 Go files" in messages
        assert "Found 1 naked return." in messages
        assert "Completed in" in messages

    def test_verbose_does_not_corrupt_json(self, go_package: Path) -> None:
        runner: CliRunner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "--format", "json", str(go_package)])

        assert result.exit_code == 0
        assert "nakedret.runner:" not in result.stdout


class TestDebugFlag:
    """--debug shows DEBUG-level messages."""

    def test_debug_shows_per_file_detail(self, go_package: Path) -> None:
        runner: CliRunner = CliRunner()
        with _capture_logs("nakedret", level=logging.DEBUG) as records:
            runner.invoke(cli, ["--debug", str(go_package)])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "Parsing" in messages
        assert "diagnostics" in messages

    def test_debug_notes_anonymous_functions(self, tmp_path: Path) -> None:
        (tmp_path / "lit.go").write_text(
            "package sample\n"
            "\n"
            "var run = func() (err error) {\n"
            "\t_ = 1\n"
            "\t_ = 2\n"
            "\t_ = 3\n"
            "\t_ = 4\n"
            "\t_ = 5\n"
            "\treturn\n"
            "}\n"
        )
        runner: CliRunner = CliRunner()
        with _capture_logs("nakedret", level=logging.DEBUG) as records:
            result = runner.invoke(cli, ["--debug", str(tmp_path)])

        messages: str = "\n".join(r.getMessage() for r in records)
        assert "anonymous function not reported" in messages
        assert "naked returns on" not in result.output


class _LogCapture(logging.Handler):
    """Simple log handler that collects records."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@contextlib.contextmanager
def _capture_logs(
    name: str, *, level: int = logging.INFO,
) -> Generator[list[logging.LogRecord], None, None]:
    """Capture log records from a named logger."""
    handler = _LogCapture()
    handler.setLevel(level)
    log: logging.Logger = logging.getLogger(name)
    old_level: int = log.level
    log.setLevel(level)
    log.addHandler(handler)
    try:
        yield handler.records
    finally:
        log.removeHandler(handler)
        log.setLevel(old_level)
