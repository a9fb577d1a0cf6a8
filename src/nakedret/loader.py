"""Resolve path arguments into parsed Go syntax trees."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from nakedret.constants import DEFAULT_PATH, GO_SOURCE_SUFFIX, RECURSIVE_SUFFIX
from nakedret.parser import ParseResult, SyntaxErrorInfo, parse_file
from nakedret.types import InputError

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SourceSet:
    """Package directories and explicitly named files from the arguments."""

    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    @property
    def file_mode(self) -> bool:
        """Explicit files were given; directory arguments are then ignored."""
        return bool(self.files)

    def add_directory(self, directory: Path) -> None:
        if directory not in self.directories:
            self.directories.append(directory)


def _walk_directories(*, root: Path) -> list[Path]:
    """Return root and every directory below it, parents before children."""
    found: list[Path] = []
    for dirpath, dirnames, _ in os.walk(root):
        dirnames.sort()
        found.append(Path(dirpath))
    return found


def resolve_arguments(*, args: tuple[str, ...]) -> SourceSet:
    """
    Classify path arguments.

    Args:
        args: Command-line path arguments. An argument ending in ``/...``
            names a directory tree, a directory names one package, and
            anything else must be a ``.go`` file.

    Returns:
        The package directories and files to load.

    Raises:
        InputError: If an argument is neither a directory nor a Go file.
    """
    sources: SourceSet = SourceSet()

    if not args:
        sources.add_directory(Path(DEFAULT_PATH))
        return sources

    for arg in args:
        if arg.endswith(RECURSIVE_SUFFIX):
            prefix: str = arg[: -len(RECURSIVE_SUFFIX)]
            # Path("") would resolve to the working directory
            if not prefix or not Path(prefix).is_dir():
                raise InputError(f"{arg} is not a valid directory", path=Path(arg))
            for directory in _walk_directories(root=Path(prefix)):
                sources.add_directory(directory)
        elif Path(arg).is_dir():
            sources.add_directory(Path(arg))
        elif arg.endswith(GO_SOURCE_SUFFIX):
            sources.files.append(Path(arg))
        else:
            raise InputError(f"invalid file {arg} specified", path=Path(arg))

    return sources


def _package_files(*, directory: Path) -> list[Path]:
    """Go files directly inside a directory, sorted by name."""
    try:
        entries: list[Path] = list(directory.iterdir())
    except OSError as e:
        raise InputError(f"Cannot read directory {directory}: {e}", path=directory) from e
    return sorted(
        entry for entry in entries
        if entry.suffix == GO_SOURCE_SUFFIX and entry.is_file()
    )


def _load(*, file: Path) -> ParseResult:
    logger.debug("Parsing %s", file)
    result: ParseResult = parse_file(file=file)
    err: SyntaxErrorInfo | None = result.syntax_error
    if err is not None:
        raise InputError(f"{file}:{err.line}:{err.column}: {err.message}", path=file)
    return result


def load_sources(*, args: tuple[str, ...]) -> list[ParseResult]:
    """
    Parse every Go file selected by the path arguments.

    The first unreadable or unparseable file aborts loading; no partial
    result is returned.
    """
    sources: SourceSet = resolve_arguments(args=args)

    files: list[Path]
    if sources.file_mode:
        for directory in sources.directories:
            logger.warning("Ignoring directory %s: Go files were given explicitly", directory)
        files = list(sources.files)
    else:
        files = []
        for directory in sources.directories:
            files.extend(_package_files(directory=directory))

    logger.info("Found %d Go files", len(files))
    return [_load(file=file) for file in files]
