"""Tests for the Go syntax tree helpers."""
from __future__ import annotations

from pathlib import Path

from tree_sitter import Node

from nakedret.parser import ParseResult, parse_source
from nakedret.syntax import (
    NodeKind,
    SyntaxVisitor,
    end_line,
    node_kind,
    node_text,
    start_column,
    start_line,
)

_SOURCE: str = """\
package sample

// Run does work.
func (s *Server) Run() (err error) {
\tdone := func() {}
\tdone()
\treturn
}

func helper() int { return 1 }
"""


def _root() -> Node:
    result: ParseResult = parse_source(_SOURCE.encode(), file=Path("sample.go"))
    assert result.tree is not None
    return result.tree.root_node


class _KindCounter(SyntaxVisitor):
    def __init__(self) -> None:
        self.seen: list[NodeKind] = []

    def visit_method_declaration(self, node: Node) -> None:
        self.seen.append(NodeKind.METHOD_DECLARATION)
        self.generic_visit(node)

    def visit_function_declaration(self, node: Node) -> None:
        self.seen.append(NodeKind.FUNCTION_DECLARATION)
        self.generic_visit(node)

    def visit_func_literal(self, node: Node) -> None:
        self.seen.append(NodeKind.FUNCTION_LITERAL)
        self.generic_visit(node)

    def visit_return_statement(self, node: Node) -> None:
        self.seen.append(NodeKind.RETURN_STATEMENT)


class TestNodeKind:
    def test_root_is_source_file(self) -> None:
        assert node_kind(_root()) is NodeKind.SOURCE_FILE

    def test_unlisted_types_map_to_other(self) -> None:
        package_clause: Node = _root().named_children[0]
        assert package_clause.type == "package_clause"
        assert node_kind(package_clause) is NodeKind.OTHER


class TestSyntaxVisitor:
    def test_dispatches_in_document_order(self) -> None:
        counter: _KindCounter = _KindCounter()
        counter.visit(_root())
        assert counter.seen == [
            NodeKind.METHOD_DECLARATION,
            NodeKind.FUNCTION_LITERAL,
            NodeKind.RETURN_STATEMENT,
            NodeKind.FUNCTION_DECLARATION,
            NodeKind.RETURN_STATEMENT,
        ]


class TestPositions:
    def test_method_position(self) -> None:
        method: Node = next(
            child for child in _root().named_children
            if node_kind(child) is NodeKind.METHOD_DECLARATION
        )
        assert start_line(method) == 4
        assert end_line(method) == 8
        assert start_column(method) == 1
        name: Node | None = method.child_by_field_name("name")
        assert name is not None
        assert node_text(name) == "Run"
