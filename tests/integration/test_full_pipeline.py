"""
End-to-end tests: lex, parse and inspect through the public API.
"""

import pytest

import exparse
from exparse import (
    BinaryNode,
    GroupingNode,
    Lexer,
    Parser,
    PrimaryNode,
    TokenType,
    parse_source,
)
from exparse.compiler.printer import flatten, source_text


VALID_PROGRAMS = [
    "1",
    "1 + 2",
    "1 + 2 * 3",
    "(1 + 2) * 3",
    "1 + 2 * (3 - 4) / 5",
    "((1 + 2) * (3 - 4)) / 5",
    "(1 + 2) * 3 - 4 / 5",
    "((1 + 2) * (3 - 4))",
    "  10\n*\t(20 - 30)  ",
]


class TestValidPrograms:
    """Programs that must parse."""

    @pytest.mark.parametrize("source", VALID_PROGRAMS)
    def test_parses(self, source):
        parser = Parser(source)
        root = parser.parse()
        assert source_text(parser.arena, root, source) == source.strip()

    @pytest.mark.parametrize("source", VALID_PROGRAMS)
    def test_tokens_match_lexer(self, source):
        """The arena holds exactly the lexer's tokens minus EOF."""
        parser = Parser(source)
        parser.parse()
        lexed = [t for t in Lexer(source) if t.type != TokenType.EOF]
        assert [tok for _, tok in parser.arena.tokens()] == lexed

    @pytest.mark.parametrize("source", VALID_PROGRAMS)
    def test_node_kinds(self, source):
        """Only the three node kinds appear, one Primary per integer."""
        parser = Parser(source)
        parser.parse()
        nodes = [node for _, node in parser.arena.nodes()]
        assert all(isinstance(n, (PrimaryNode, BinaryNode, GroupingNode)) for n in nodes)
        integers = [t for t in Lexer(source) if t.type == TokenType.INTEGER]
        assert sum(isinstance(n, PrimaryNode) for n in nodes) == len(integers)

    def test_flatten_reparses_to_same_shape(self):
        """The parenthesized rendering parses back to the same grouping."""
        parser = Parser("1 - 2 * 3 + 4 / 2")
        flat = flatten(parser.arena, parser.parse())
        reparsed = Parser(flat)
        assert flatten(reparsed.arena, reparsed.parse()) == flat


class TestIndependentParses:
    """Parsers share no state."""

    def test_separate_arenas(self):
        first, second = Parser("1 + 2"), Parser("3")
        first.parse()
        second.parse()
        assert first.arena is not second.arena
        assert second.arena.token_count == 1

    def test_parse_source(self):
        assert parse_source("2 * (3 + 4)") == "(* 2 (group (+ 3 4)))"

    def test_public_exports(self):
        for name in exparse.__all__:
            assert hasattr(exparse, name)
