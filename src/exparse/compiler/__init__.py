"""
exparse Compiler Package.

This package contains the front end components:
- Arena: Owns tokens and AST nodes, hands out typed ids
- Lexer: Tokenizes arithmetic expressions on demand
- Parser: Builds an arena-backed AST honoring operator precedence
- Printer: Renders trees back to text
"""

from __future__ import annotations

from typing import Optional

from exparse.compiler.arena import Arena, NodeId, TokenId
from exparse.compiler.ast_nodes import (
    AstNode,
    AstVisitor,
    BinaryNode,
    BinaryOperator,
    GroupingNode,
    PrimaryNode,
)
from exparse.compiler.lexer import Lexer, tokenize
from exparse.compiler.parser import Parser, parse
from exparse.compiler.printer import (
    FlatPrinter,
    OutlinePrinter,
    SExpressionPrinter,
    flatten,
    source_text,
    to_outline,
    to_sexpr,
)
from exparse.compiler.tokens import Token, TokenType


def parse_source(source: str, filename: Optional[str] = None) -> str:
    """
    Parse source and return its tree as an s-expression.

    Args:
        source: Expression source
        filename: Optional filename for error reporting

    Returns:
        The s-expression rendering of the parsed tree
    """
    arena, root = parse(source, filename)
    return to_sexpr(arena, root)


__all__ = [
    "Arena",
    "TokenId",
    "NodeId",
    "Token",
    "TokenType",
    "AstNode",
    "AstVisitor",
    "BinaryNode",
    "BinaryOperator",
    "GroupingNode",
    "PrimaryNode",
    "Lexer",
    "tokenize",
    "Parser",
    "parse",
    "parse_source",
    "SExpressionPrinter",
    "FlatPrinter",
    "OutlinePrinter",
    "to_sexpr",
    "flatten",
    "to_outline",
    "source_text",
]
