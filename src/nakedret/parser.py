"""Go parsing with syntax error detection for nakedret."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tree_sitter import Node, Parser, Tree

from nakedret.syntax import GO_LANGUAGE, end_line, node_text, start_column, start_line

logger: logging.Logger = logging.getLogger(__name__)

_PARSER: Parser = Parser(GO_LANGUAGE)


@dataclass(frozen=True, slots=True)
class SyntaxErrorInfo:
    """Syntax error details. Line/column are 1-based."""

    line: int
    column: int
    message: str
    source_line: str | None


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Result of parsing a Go file."""

    file: Path
    tree: Tree | None
    source: bytes
    source_lines: tuple[str, ...]
    syntax_error: SyntaxErrorInfo | None


def _first_error(node: Node) -> Node | None:
    """Return the first ERROR or MISSING node in document order."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found: Node | None = _first_error(child)
            if found is not None:
                return found
    return None


def _describe_error(node: Node) -> str:
    if node.is_missing:
        return f"expected {node.type}"
    text: str = node_text(node).strip()
    if not text:
        return "syntax error"
    first_line: str = text.splitlines()[0]
    if start_line(node) != end_line(node):
        first_line += " ..."
    return f"unexpected {first_line}"


def parse_source(source: bytes, *, file: Path) -> ParseResult:
    """Parse Go source held in memory."""
    try:
        text: str = source.decode("utf-8")
    except UnicodeDecodeError as e:
        return ParseResult(
            file=file,
            tree=None,
            source=source,
            source_lines=(),
            syntax_error=SyntaxErrorInfo(
                line=1,
                column=1,
                message=f"Encoding error: {e}",
                source_line=None,
            ),
        )

    source_lines: tuple[str, ...] = tuple(text.splitlines())
    tree: Tree = _PARSER.parse(source)

    if tree.root_node.has_error:
        error_node: Node = _first_error(tree.root_node) or tree.root_node
        line: int = start_line(error_node)
        source_line: str | None = None
        if 1 <= line <= len(source_lines):
            source_line = source_lines[line - 1]
        logger.debug("Syntax error in %s at line %d", file, line)
        return ParseResult(
            file=file,
            tree=None,
            source=source,
            source_lines=source_lines,
            syntax_error=SyntaxErrorInfo(
                line=line,
                column=start_column(error_node),
                message=_describe_error(error_node),
                source_line=source_line,
            ),
        )

    return ParseResult(
        file=file,
        tree=tree,
        source=source,
        source_lines=source_lines,
        syntax_error=None,
    )


def parse_file(*, file: Path) -> ParseResult:
    """Parse a Go file, returning a syntax tree or syntax error."""
    try:
        source: bytes = file.read_bytes()
    except OSError as e:
        return ParseResult(
            file=file,
            tree=None,
            source=b"",
            source_lines=(),
            syntax_error=SyntaxErrorInfo(
                line=1,
                column=1,
                message=f"Cannot read file: {e}",
                source_line=None,
            ),
        )
    return parse_source(source, file=file)
