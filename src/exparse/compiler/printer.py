"""
Tree rendering for arena-backed ASTs.

Visitors that turn a parsed tree back into text: an s-expression form for
compact comparisons, an indented outline for debugging, and a fully
parenthesized infix form that makes operator grouping explicit.

A left-associative chain such as ``1 + 1 + ... + 1`` is as deep as it is
long, so the printers expand the tree with an explicit stack instead of
recursing once per level.
"""

from typing import Union

from exparse.compiler.arena import Arena, NodeId
from exparse.compiler.ast_nodes import (
    AstVisitor,
    BinaryNode,
    GroupingNode,
    PrimaryNode,
)

# A rendering step: literal text or a subtree still to expand
Piece = Union[str, NodeId]


class TemplatePrinter(AstVisitor):
    """
    Base class for printers that describe each node as a template.

    ``visit_*`` methods return a tuple of pieces, where ``str`` pieces are
    emitted as-is and ``NodeId`` pieces are expanded in place. ``visit``
    resolves the whole subtree and returns the joined text.
    """

    def visit(self, node_id: NodeId) -> str:
        output: list[str] = []
        stack: list[Piece] = [node_id]
        while stack:
            piece = stack.pop()
            if isinstance(piece, str):
                output.append(piece)
            else:
                stack.extend(reversed(self.arena.get_node(piece).accept(self)))
        return "".join(output)

    def _image(self, node: PrimaryNode) -> str:
        return self.arena.get_token(node.begin_token).image


class SExpressionPrinter(TemplatePrinter):
    """
    Render a tree as an s-expression.

    Example:
        1 + 2 * 3   ->  (+ 1 (* 2 3))
        (1 + 2)     ->  (group (+ 1 2))
    """

    def visit_primary(self, node: PrimaryNode) -> tuple[Piece, ...]:
        return (self._image(node),)

    def visit_binary(self, node: BinaryNode) -> tuple[Piece, ...]:
        return (f"({node.operator.symbol} ", node.left, " ", node.right, ")")

    def visit_grouping(self, node: GroupingNode) -> tuple[Piece, ...]:
        return ("(group ", node.inner, ")")


class FlatPrinter(TemplatePrinter):
    """Render a tree in infix form with every binary operation parenthesized."""

    def visit_primary(self, node: PrimaryNode) -> tuple[Piece, ...]:
        return (self._image(node),)

    def visit_binary(self, node: BinaryNode) -> tuple[Piece, ...]:
        return ("(", node.left, f" {node.operator.symbol} ", node.right, ")")

    def visit_grouping(self, node: GroupingNode) -> tuple[Piece, ...]:
        # Groupings only steer the parse; the binary parens already show it
        return (node.inner,)


class OutlinePrinter(AstVisitor):
    """Render a tree as an indented outline, one node per line."""

    def __init__(self, arena: Arena, indent: str = "  ") -> None:
        super().__init__(arena)
        self.indent = indent

    def render(self, node_id: NodeId) -> str:
        lines: list[str] = []
        stack: list[tuple[NodeId, int]] = [(node_id, 0)]
        while stack:
            current, depth = stack.pop()
            label, children = self.visit(current)
            lines.append(f"{self.indent * depth}{label}")
            stack.extend((child, depth + 1) for child in reversed(children))
        return "\n".join(lines)

    def visit_primary(self, node: PrimaryNode) -> tuple[str, tuple[NodeId, ...]]:
        return f"Primary({self.arena.get_token(node.begin_token).image})", ()

    def visit_binary(self, node: BinaryNode) -> tuple[str, tuple[NodeId, ...]]:
        return f"Binary({node.operator.symbol})", node.children()

    def visit_grouping(self, node: GroupingNode) -> tuple[str, tuple[NodeId, ...]]:
        return "Grouping", node.children()


def to_sexpr(arena: Arena, node_id: NodeId) -> str:
    """Render the tree rooted at node_id as an s-expression."""
    return SExpressionPrinter(arena).visit(node_id)


def flatten(arena: Arena, node_id: NodeId) -> str:
    """Render the tree rooted at node_id as fully parenthesized infix."""
    return FlatPrinter(arena).visit(node_id)


def to_outline(arena: Arena, node_id: NodeId) -> str:
    """Render the tree rooted at node_id as an indented outline."""
    return OutlinePrinter(arena).render(node_id)


def source_text(arena: Arena, node_id: NodeId, source: str) -> str:
    """Slice the source text covered by a node's token span."""
    node = arena.get_node(node_id)
    begin = arena.get_token(node.begin_token).begin
    end = arena.get_token(node.end_token).end
    return source[begin:end]
