"""Detect naked returns in long Go functions with named results."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from tree_sitter import Node

from nakedret.constants import ScanDepth
from nakedret.diagnostics import Diagnostic, SourceLocation
from nakedret.parser import ParseResult
from nakedret.syntax import (
    FUNCTION_KINDS,
    NodeKind,
    SyntaxVisitor,
    code_children,
    end_line,
    node_kind,
    node_text,
    start_column,
    start_line,
)
from nakedret.types import ConfigError

logger: logging.Logger = logging.getLogger(__name__)

_RESULT_FIELD_KINDS: frozenset[NodeKind] = frozenset({
    NodeKind.PARAMETER_DECLARATION,
    NodeKind.VARIADIC_PARAMETER_DECLARATION,
})


def validate_max_length(max_length: object) -> int:
    """Return the threshold, or raise ConfigError if it is unset or invalid."""
    if max_length is None:
        raise ConfigError("max length is not set")
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        raise ConfigError(
            f"max length must be an integer, got {type(max_length).__name__}"
        )
    if max_length < 0:
        raise ConfigError(f"max length must not be negative, got {max_length}")
    return max_length


def named_results(function: Node) -> list[str]:
    """Names bound in a function's result list, in declaration order."""
    result: Node | None = function.child_by_field_name("result")
    if result is None or node_kind(result) is not NodeKind.PARAMETER_LIST:
        return []

    names: list[str] = []
    for field in result.named_children:
        if node_kind(field) not in _RESULT_FIELD_KINDS:
            continue
        for ident in field.children_by_field_name("name"):
            name: str = node_text(ident)
            if name:
                names.append(name)
    return names


def line_span(function: Node) -> int:
    return end_line(function) - start_line(function)


def _direct_statements(block: Node) -> Iterator[Node]:
    # Newer grammars wrap block contents in a statement_list node.
    for child in code_children(block):
        if node_kind(child) is NodeKind.STATEMENT_LIST:
            yield from code_children(child)
        else:
            yield child


def _nested_returns(node: Node) -> Iterator[Node]:
    for child in code_children(node):
        kind: NodeKind = node_kind(child)
        if kind is NodeKind.RETURN_STATEMENT:
            yield child
        elif kind not in FUNCTION_KINDS:
            yield from _nested_returns(child)


def return_statements(body: Node, *, scan_depth: ScanDepth) -> Iterator[Node]:
    """
    Return statements belonging to a function body.

    SHALLOW yields only returns that are direct statements of the body.
    NESTED also yields returns inside nested blocks, but never those of
    nested function literals.
    """
    if scan_depth is ScanDepth.NESTED:
        yield from _nested_returns(body)
        return
    for stmt in _direct_statements(body):
        if node_kind(stmt) is NodeKind.RETURN_STATEMENT:
            yield stmt


def is_naked(return_stmt: Node) -> bool:
    return not code_children(return_stmt)


class NakedReturnVisitor(SyntaxVisitor):
    """Syntax visitor that records naked returns in over-long functions."""

    def __init__(self, *, file: Path, max_length: int, scan_depth: ScanDepth) -> None:
        self._file: Path = file
        self._max_length: int = max_length
        self._scan_depth: ScanDepth = scan_depth
        self.diagnostics: list[Diagnostic] = []

    def visit_function_declaration(self, node: Node) -> None:
        self._check_function(node)
        self.generic_visit(node)

    def visit_method_declaration(self, node: Node) -> None:
        self._check_function(node)
        self.generic_visit(node)

    def visit_func_literal(self, node: Node) -> None:
        self._check_function(node)
        self.generic_visit(node)

    def _check_function(self, node: Node) -> None:
        body: Node | None = node.child_by_field_name("body")
        if body is None or not named_results(node):
            return

        span: int = line_span(node)
        name_node: Node | None = node.child_by_field_name("name")

        for stmt in return_statements(body, scan_depth=self._scan_depth):
            if not is_naked(stmt) or span <= self._max_length:
                continue
            if name_node is None:
                logger.debug(
                    "%s:%d naked return in anonymous function not reported",
                    self._file,
                    start_line(stmt),
                )
                continue
            self.diagnostics.append(
                Diagnostic(
                    file=self._file,
                    location=SourceLocation(
                        line=start_line(stmt),
                        column=start_column(stmt),
                    ),
                    function=node_text(name_node),
                    line_span=span,
                ),
            )


def check_tree(
    *,
    parse_result: ParseResult,
    max_length: int,
    scan_depth: ScanDepth = ScanDepth.SHALLOW,
) -> list[Diagnostic]:
    """Run naked return detection over one parsed file."""
    if parse_result.tree is None:
        return []
    visitor: NakedReturnVisitor = NakedReturnVisitor(
        file=parse_result.file,
        max_length=max_length,
        scan_depth=scan_depth,
    )
    visitor.visit(parse_result.tree.root_node)
    logger.debug("%s: %d diagnostics", parse_result.file, len(visitor.diagnostics))
    return visitor.diagnostics


def detect(
    trees: Iterable[ParseResult],
    *,
    max_length: int | None,
    scan_depth: ScanDepth = ScanDepth.SHALLOW,
) -> list[Diagnostic]:
    """
    Find naked returns in functions longer than max_length lines.

    Args:
        trees: Parsed Go files, analysed in the given order.
        max_length: Functions whose line span is strictly greater than this
            are reported.
        scan_depth: Whether returns in nested blocks are inspected.

    Returns:
        Diagnostics in traversal order.

    Raises:
        ConfigError: If max_length is unset or invalid.
    """
    threshold: int = validate_max_length(max_length)
    diagnostics: list[Diagnostic] = []
    for parse_result in trees:
        diagnostics.extend(
            check_tree(
                parse_result=parse_result,
                max_length=threshold,
                scan_depth=scan_depth,
            ),
        )
    return diagnostics
