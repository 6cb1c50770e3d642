"""
Abstract Syntax Tree (AST) node definitions for arithmetic expressions.

Nodes are immutable and never reference each other directly: children are
``NodeId`` handles and source spans are pairs of ``TokenId`` handles, all
resolved through the owning Arena.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from exparse.compiler.arena import Arena, NodeId, TokenId
from exparse.compiler.tokens import TokenType


class AstNode(ABC):
    """Base class for all AST nodes."""

    begin_token: TokenId
    end_token: TokenId

    @abstractmethod
    def accept(self, visitor: "AstVisitor") -> Any:
        """Accept a visitor for tree traversal."""
        pass

    def children(self) -> tuple[NodeId, ...]:
        """Child node ids, left to right."""
        return ()

    def token_ids(self) -> tuple[TokenId, ...]:
        return (self.begin_token, self.end_token)


class AstVisitor(ABC):
    """
    Visitor pattern base class for AST traversal.

    Visitors walk the tree through an Arena because nodes only hold ids.
    """

    def __init__(self, arena: Arena) -> None:
        self.arena = arena

    def visit(self, node_id: NodeId) -> Any:
        """Resolve node_id and dispatch to the matching visit method."""
        return self.arena.get_node(node_id).accept(self)

    @abstractmethod
    def visit_primary(self, node: "PrimaryNode") -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: "BinaryNode") -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, node: "GroupingNode") -> Any:
        pass


class BinaryOperator(Enum):
    """Binary operator types."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> "BinaryOperator":
        return _TOKEN_OPERATORS[token_type]


_TOKEN_OPERATORS: dict[TokenType, BinaryOperator] = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}


@dataclass(frozen=True, slots=True)
class PrimaryNode(AstNode):
    """
    An integer literal.

    A primary spans exactly one token, so begin_token == end_token.
    """

    begin_token: TokenId
    end_token: TokenId

    def accept(self, visitor: AstVisitor) -> Any:
        return visitor.visit_primary(self)


@dataclass(frozen=True, slots=True)
class BinaryNode(AstNode):
    """
    A binary operation.

    Example:
        1 + 2, (1 + 2) * 3

    The span runs from the first token of the left operand to the last
    token of the right operand.
    """

    operator: BinaryOperator
    left: NodeId
    right: NodeId
    begin_token: TokenId
    end_token: TokenId

    def accept(self, visitor: AstVisitor) -> Any:
        return visitor.visit_binary(self)

    def children(self) -> tuple[NodeId, ...]:
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class GroupingNode(AstNode):
    """A parenthesized expression; the span includes both parentheses."""

    inner: NodeId
    begin_token: TokenId
    end_token: TokenId

    def accept(self, visitor: AstVisitor) -> Any:
        return visitor.visit_grouping(self)

    def children(self) -> tuple[NodeId, ...]:
        return (self.inner,)
