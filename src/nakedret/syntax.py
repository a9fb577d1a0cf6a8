"""Go syntax tree access on top of tree-sitter."""
from __future__ import annotations

from enum import Enum
from typing import Final

import tree_sitter_go
from tree_sitter import Language, Node

GO_LANGUAGE: Final[Language] = Language(tree_sitter_go.language())


class NodeKind(Enum):
    """Grammar node types the analysis distinguishes; everything else is OTHER."""

    SOURCE_FILE = "source_file"
    FUNCTION_DECLARATION = "function_declaration"
    METHOD_DECLARATION = "method_declaration"
    FUNCTION_LITERAL = "func_literal"
    PARAMETER_LIST = "parameter_list"
    PARAMETER_DECLARATION = "parameter_declaration"
    VARIADIC_PARAMETER_DECLARATION = "variadic_parameter_declaration"
    BLOCK = "block"
    STATEMENT_LIST = "statement_list"
    RETURN_STATEMENT = "return_statement"
    EXPRESSION_LIST = "expression_list"
    COMMENT = "comment"
    OTHER = "other"


_KINDS_BY_TYPE: Final[dict[str, NodeKind]] = {
    kind.value: kind for kind in NodeKind if kind is not NodeKind.OTHER
}

FUNCTION_KINDS: Final[frozenset[NodeKind]] = frozenset({
    NodeKind.FUNCTION_DECLARATION,
    NodeKind.METHOD_DECLARATION,
    NodeKind.FUNCTION_LITERAL,
})


def node_kind(node: Node) -> NodeKind:
    return _KINDS_BY_TYPE.get(node.type, NodeKind.OTHER)


def start_line(node: Node) -> int:
    """1-based line of the node's first byte."""
    return node.start_point[0] + 1


def end_line(node: Node) -> int:
    """1-based line of the node's last byte."""
    return node.end_point[0] + 1


def start_column(node: Node) -> int:
    """1-based column of the node's first byte."""
    return node.start_point[1] + 1


def node_text(node: Node) -> str:
    text: bytes | None = node.text
    if text is None:
        return ""
    return text.decode("utf-8", errors="replace")


def code_children(node: Node) -> list[Node]:
    """Named children of a node, without comments."""
    return [
        child for child in node.named_children
        if node_kind(child) is not NodeKind.COMMENT
    ]


class SyntaxVisitor:
    """
    Walk a Go syntax tree, dispatching on NodeKind.

    Subclasses define ``visit_<kind value>`` methods (for example
    ``visit_function_declaration``); kinds without a method fall back to
    ``generic_visit``, which descends into named children.
    """

    def visit(self, node: Node) -> None:
        kind: NodeKind = node_kind(node)
        method = getattr(self, f"visit_{kind.value}", self.generic_visit)
        method(node)

    def generic_visit(self, node: Node) -> None:
        for child in node.named_children:
            self.visit(child)
