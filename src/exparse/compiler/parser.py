"""
exparse Parser.

A predictive LL(1) parser that pulls tokens from the Lexer and builds the
AST inside an Arena. Each grammar rule handles one precedence tier:

    expression := term ( ('+'|'-') term )*
    term       := factor ( ('*'|'/') factor )*
    factor     := INTEGER | '(' expression ')'

Binary operators are left-associative. The first error aborts the parse.
Nested groups are tracked on an explicit stack, so arbitrarily deep
parenthesization parses without hitting the recursion limit.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from exparse.compiler.arena import Arena, NodeId, TokenId
from exparse.compiler.ast_nodes import (
    BinaryNode,
    BinaryOperator,
    GroupingNode,
    PrimaryNode,
)
from exparse.compiler.lexer import Lexer
from exparse.compiler.tokens import Token, TokenType
from exparse.utils.errors import (
    InitError,
    LexicalError,
    SourceLocation,
    TrailingInput,
    UnexpectedToken,
    UnterminatedGroup,
    line_at,
)

logger = logging.getLogger(__name__)


ADDITIVE_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
MULTIPLICATIVE_OPERATORS = (TokenType.STAR, TokenType.SLASH)


@dataclass
class _Group:
    """Partial state of the top level or of one open '('."""

    open_id: Optional[TokenId] = None
    open_offset: int = 0
    expression: Optional[NodeId] = None
    additive: Optional[BinaryOperator] = None
    term: Optional[NodeId] = None
    multiplicative: Optional[BinaryOperator] = None


class Parser:
    """
    LL(1) parser for arithmetic expressions.

    The parser owns its Lexer and Arena and keeps one token of lookahead.

    Usage:
        parser = Parser("1 + 2 * 3")
        root = parser.parse()
        node = parser.arena.get_node(root)
    """

    def __init__(self, source: str, filename: Optional[str] = None) -> None:
        """
        Initialize the parser and prime the lookahead.

        Args:
            source: The expression to parse
            filename: Optional filename for error reporting

        Raises:
            InitError: If the lexer cannot produce the first token.
        """
        self.source = source
        self.filename = filename
        self.lexer = Lexer(source, filename)
        self.arena = Arena()
        self.root: Optional[NodeId] = None
        try:
            self._lookahead = self.lexer.next_token()
        except LexicalError as e:
            raise InitError(
                f"Cannot start parsing: {e.message}",
                e.offset,
                e.location,
                e.source_line,
            ) from e

    @property
    def _current(self) -> Token:
        """Get the lookahead token."""
        return self._lookahead

    def _check(self, *types: TokenType) -> bool:
        """Check if the lookahead is one of the given types."""
        return self._lookahead.type in types

    def _advance(self) -> TokenId:
        """Store the lookahead in the arena and pull the next token."""
        token_id = self.arena.alloc_token(self._lookahead)
        self._lookahead = self.lexer.next_token()
        return token_id

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation.from_offset(self.source, offset, self.filename)

    def _error_unexpected(self) -> UnexpectedToken:
        """Create an error for a lookahead that cannot start an operand."""
        token = self._current
        return UnexpectedToken(
            token.begin,
            token.describe(),
            self._location(token.begin),
            line_at(self.source, token.begin),
        )

    def _error_unclosed(self, open_offset: int) -> UnterminatedGroup:
        """Create an error for a '(' whose ')' is missing."""
        token = self._current
        return UnterminatedGroup(
            open_offset,
            token.begin,
            token.describe(),
            self._location(open_offset),
            line_at(self.source, open_offset),
        )

    # -------------------------------------------------------------------------
    # Entry Point
    # -------------------------------------------------------------------------

    def parse(self) -> NodeId:
        """
        Parse the whole input as one expression.

        Returns:
            The id of the root node in ``self.arena``.

        Raises:
            ParseError: On the first malformed construct, or when input
                remains after a complete expression.
        """
        if self.root is not None:
            return self.root

        logger.debug("parsing %r", self.source)
        root = self._parse_expression()

        if not self._check(TokenType.EOF):
            token = self._current
            raise TrailingInput(
                token.begin,
                token.describe(),
                self._location(token.begin),
                line_at(self.source, token.begin),
            )

        self.root = root
        logger.debug(
            "parsed root %r (%d tokens, %d nodes)",
            root,
            self.arena.token_count,
            self.arena.node_count,
        )
        return root

    # -------------------------------------------------------------------------
    # Expression Parsing
    # -------------------------------------------------------------------------

    def _parse_expression(self) -> NodeId:
        """
        Parse one expression up to the first token that cannot continue it.

        Each '(' pushes a _Group holding the pending operands of that level
        and the matching ')' pops it, so nesting depth is bounded by memory
        and not by the interpreter's recursion limit. Nodes are allocated in
        the same order a recursive descent over the grammar would use.
        """
        groups = [_Group()]

        while True:
            operand = self._parse_factor(groups)
            if operand is None:
                continue

            while True:
                group = groups[-1]
                group.term = self._fold(group.term, group.multiplicative, operand)
                group.multiplicative = None
                if self._check(*MULTIPLICATIVE_OPERATORS):
                    group.multiplicative = self._take_operator()
                    break

                group.expression = self._fold(group.expression, group.additive, group.term)
                group.additive = None
                group.term = None
                if self._check(*ADDITIVE_OPERATORS):
                    group.additive = self._take_operator()
                    break

                if group.open_id is None:
                    return group.expression
                if not self._check(TokenType.RPAREN):
                    raise self._error_unclosed(group.open_offset)
                close_id = self._advance()
                groups.pop()
                operand = self.arena.alloc_node(
                    GroupingNode(group.expression, group.open_id, close_id)
                )

    def _parse_factor(self, groups: list[_Group]) -> Optional[NodeId]:
        """
        Parse an integer literal, or open a parenthesized group.

        Returns the Primary node id, or None after pushing a new group.
        """
        if self._check(TokenType.INTEGER):
            token_id = self._advance()
            return self.arena.alloc_node(PrimaryNode(token_id, token_id))

        if self._check(TokenType.LPAREN):
            open_offset = self._current.begin
            groups.append(_Group(self._advance(), open_offset))
            return None

        raise self._error_unexpected()

    def _take_operator(self) -> BinaryOperator:
        """Consume the lookahead as a binary operator."""
        operator = BinaryOperator.from_token_type(self._current.type)
        self._advance()
        return operator

    def _fold(
        self,
        left: Optional[NodeId],
        operator: Optional[BinaryOperator],
        right: NodeId,
    ) -> NodeId:
        """Join a pending left operand to right, or return right alone."""
        if operator is None:
            return right
        return self.arena.alloc_node(
            BinaryNode(
                operator=operator,
                left=left,
                right=right,
                begin_token=self.arena.get_node(left).begin_token,
                end_token=self.arena.get_node(right).end_token,
            )
        )


def parse(source: str, filename: Optional[str] = None) -> tuple[Arena, NodeId]:
    """
    Convenience function to parse source into an arena-backed AST.

    Args:
        source: Expression source
        filename: Optional filename for error reporting

    Returns:
        The arena holding the tree and the root node id
    """
    parser = Parser(source, filename)
    root = parser.parse()
    return parser.arena, root
