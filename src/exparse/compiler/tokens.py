"""
Token definitions for the exparse lexer.

This module defines the token types recognized in arithmetic expressions:
integer literals, the four binary operators, parentheses and end of input.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types."""

    # End of input
    EOF = auto()

    # Literals
    INTEGER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()


# Single-character operator and delimiter tokens
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" \t\n\r")


@dataclass(frozen=True, slots=True)
class Token:
    """
    Represents a single token from the source code.

    Attributes:
        type: The type of this token
        image: The literal text of the token ("" for EOF)
        begin: Offset of the first character of the token
        end: Offset one past the last character (half-open range)
    """

    type: TokenType
    image: str
    begin: int
    end: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.image!r}, {self.begin}..{self.end})"

    @property
    def span(self) -> tuple[int, int]:
        """The half-open (begin, end) offset range."""
        return (self.begin, self.end)

    @property
    def is_operator(self) -> bool:
        """Check if this token represents a binary operator."""
        return self.type in {
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.STAR,
            TokenType.SLASH,
        }

    def describe(self) -> str:
        """Human-readable description used in error messages."""
        if self.type == TokenType.EOF:
            return "end of input"
        return repr(self.image)
