"""
exparse - A compiler front end for integer arithmetic expressions.

A pull-based lexer and a recursive descent parser that builds the syntax
tree inside an arena, addressing tokens and nodes by typed ids.
"""

from exparse.compiler import parse_source
from exparse.compiler.arena import Arena, NodeId, TokenId
from exparse.compiler.ast_nodes import BinaryNode, BinaryOperator, GroupingNode, PrimaryNode
from exparse.compiler.lexer import Lexer
from exparse.compiler.parser import Parser
from exparse.compiler.tokens import Token, TokenType
from exparse.utils.errors import (
    ExparseError,
    InitError,
    LexicalError,
    OutOfBounds,
    ParseError,
    TrailingInput,
    UnexpectedToken,
    UnterminatedGroup,
)

__version__ = "0.1.0"
__all__ = [
    "parse_source",
    "Arena",
    "TokenId",
    "NodeId",
    "Token",
    "TokenType",
    "PrimaryNode",
    "BinaryNode",
    "GroupingNode",
    "BinaryOperator",
    "Lexer",
    "Parser",
    "ExparseError",
    "InitError",
    "ParseError",
    "LexicalError",
    "UnexpectedToken",
    "UnterminatedGroup",
    "TrailingInput",
    "OutOfBounds",
]
