"""
Pytest configuration and shared fixtures for exparse tests.
"""

import pytest

from exparse.compiler.arena import Arena, NodeId
from exparse.compiler.lexer import Lexer
from exparse.compiler.parser import Parser
from exparse.compiler.tokens import Token


@pytest.fixture
def lexer_factory():
    """Factory fixture for creating lexers."""

    def _create_lexer(source: str, filename: str = "test.expr") -> Lexer:
        return Lexer(source, filename)

    return _create_lexer


@pytest.fixture
def parser_factory():
    """Factory fixture for creating parsers from source."""

    def _create_parser(source: str) -> Parser:
        return Parser(source)

    return _create_parser


@pytest.fixture
def tokenize(lexer_factory):
    """Fixture to tokenize source code."""

    def _tokenize(source: str) -> list[Token]:
        lexer = lexer_factory(source)
        return lexer.tokenize()

    return _tokenize


@pytest.fixture
def parse(parser_factory):
    """Fixture to parse source code into an arena and root id."""

    def _parse(source: str) -> tuple[Arena, NodeId]:
        parser = parser_factory(source)
        root = parser.parse()
        return parser.arena, root

    return _parse
