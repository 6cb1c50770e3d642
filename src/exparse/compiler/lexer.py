"""
exparse Lexer (Tokenizer).

Transforms an arithmetic expression into tokens, one token per call to
``next_token()``. The lexer knows nothing about the grammar; its only state
is the cursor offset.
"""

import logging
from typing import Iterator, Optional

from exparse.compiler.tokens import (
    DIGITS,
    SINGLE_CHAR_TOKENS,
    WHITESPACE,
    Token,
    TokenType,
)
from exparse.utils.errors import LexicalError, SourceLocation, line_at

logger = logging.getLogger(__name__)


class Lexer:
    """
    Pull-based tokenizer for arithmetic expressions.

    The lexer supports:
    - Integer literals (runs of decimal digits)
    - The operators + - * /
    - Parentheses
    - Whitespace (space, tab, newline, carriage return) between tokens

    Usage:
        lexer = Lexer("1 + 2")
        token = lexer.next_token()
        # or iterate: for token in lexer: ...
    """

    def __init__(self, source: str, filename: Optional[str] = None) -> None:
        """
        Initialize the lexer with source code.

        Args:
            source: The expression to tokenize
            filename: Optional filename for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0

    @property
    def _current_char(self) -> Optional[str]:
        """Return the current character or None if at end."""
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def _skip_whitespace(self) -> None:
        while self._current_char is not None and self._current_char in WHITESPACE:
            self.pos += 1

    def _read_integer(self) -> Token:
        start = self.pos
        while self._current_char is not None and self._current_char in DIGITS:
            self.pos += 1
        return Token(TokenType.INTEGER, self.source[start:self.pos], start, self.pos)

    def _error(self, char: str) -> LexicalError:
        """Create a lexical error for the character at the cursor."""
        logger.debug("unexpected character %r at offset %d", char, self.pos)
        return LexicalError(
            self.pos,
            char,
            SourceLocation.from_offset(self.source, self.pos, self.filename),
            line_at(self.source, self.pos),
        )

    def next_token(self) -> Token:
        """
        Extract the next token from the source.

        At end of input an EOF token is returned, and keeps being returned
        on every further call without moving the cursor.

        Raises:
            LexicalError: If the next character starts no token.
        """
        self._skip_whitespace()

        char = self._current_char
        if char is None:
            end = len(self.source)
            return Token(TokenType.EOF, "", end, end)

        if char in DIGITS:
            return self._read_integer()

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            start = self.pos
            self.pos += 1
            return Token(token_type, char, start, self.pos)

        raise self._error(char)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source from the beginning.

        Returns:
            A list of all tokens including the final EOF token.
        """
        self.pos = 0
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return


def tokenize(source: str, filename: Optional[str] = None) -> list[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: Expression source
        filename: Optional filename for error reporting

    Returns:
        List of tokens
    """
    return Lexer(source, filename).tokenize()
