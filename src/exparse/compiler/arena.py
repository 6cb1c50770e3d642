"""
Arena storage for tokens and AST nodes.

The arena owns every token and node produced during a parse and hands out
small typed handles instead of references. Tree edges are expressed as
``NodeId`` values stored inside nodes, so the whole tree lives in two flat
lists and there are no reference cycles to manage.

Ids are only meaningful for the arena that minted them. Passing an id to a
different arena is a programming error and raises ``OutOfBounds``.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

from exparse.compiler.tokens import Token
from exparse.utils.errors import OutOfBounds

if TYPE_CHECKING:
    from exparse.compiler.ast_nodes import AstNode


_arena_keys = itertools.count(1)


@dataclass(frozen=True, slots=True)
class TokenId:
    """
    Handle to a token slot in an Arena.

    Attributes:
        index: Slot index in the arena's token list
        arena_key: Key of the minting arena (None for hand-built ids)

    Ids compare and hash by index alone, so a hand-built id equals the
    minted id for the same slot. The key is only consulted by lookups.
    """

    index: int
    arena_key: Optional[int] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"TokenId({self.index})"


@dataclass(frozen=True, slots=True)
class NodeId:
    """
    Handle to a node slot in an Arena.

    Attributes:
        index: Slot index in the arena's node list
        arena_key: Key of the minting arena (None for hand-built ids)

    Ids compare and hash by index alone, so a hand-built id equals the
    minted id for the same slot. The key is only consulted by lookups.
    """

    index: int
    arena_key: Optional[int] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"NodeId({self.index})"


class Arena:
    """
    Append-only owner of tokens and AST nodes.

    Usage:
        arena = Arena()
        tok = arena.alloc_token(Token(TokenType.INTEGER, "42", 0, 2))
        node = arena.alloc_node(PrimaryNode(tok, tok))
        arena.get_node(node)
    """

    def __init__(self) -> None:
        self._key = next(_arena_keys)
        self._tokens: list[Token] = []
        self._nodes: list[AstNode] = []

    def __repr__(self) -> str:
        return f"Arena(tokens={len(self._tokens)}, nodes={len(self._nodes)})"

    @property
    def token_count(self) -> int:
        return len(self._tokens)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    # -------------------------------------------------------------------------
    # Allocation
    # -------------------------------------------------------------------------

    def alloc_token(self, token: Token) -> TokenId:
        """Append a token and return its stable id."""
        if not isinstance(token, Token):
            raise TypeError(f"expected Token, got {type(token).__name__}")
        self._tokens.append(token)
        return TokenId(len(self._tokens) - 1, self._key)

    def alloc_node(self, node: AstNode) -> NodeId:
        """
        Append a node and return its stable id.

        Every child id and token id held by the node must already resolve
        in this arena, so children always precede their parents.
        """
        for child in node.children():
            self._check_node_id(child)
        for token_id in node.token_ids():
            self._check_token_id(token_id)
        self._nodes.append(node)
        return NodeId(len(self._nodes) - 1, self._key)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_token(self, token_id: TokenId) -> Token:
        """Resolve a TokenId to its token."""
        self._check_token_id(token_id)
        return self._tokens[token_id.index]

    def get_node(self, node_id: NodeId) -> AstNode:
        """Resolve a NodeId to its node."""
        self._check_node_id(node_id)
        return self._nodes[node_id.index]

    def tokens(self) -> Iterator[tuple[TokenId, Token]]:
        """Iterate over (id, token) pairs in allocation order."""
        for index, token in enumerate(self._tokens):
            yield TokenId(index, self._key), token

    def nodes(self) -> Iterator[tuple[NodeId, AstNode]]:
        """Iterate over (id, node) pairs in allocation order."""
        for index, node in enumerate(self._nodes):
            yield NodeId(index, self._key), node

    def _check_token_id(self, token_id: TokenId) -> None:
        if not isinstance(token_id, TokenId):
            raise TypeError(f"expected TokenId, got {type(token_id).__name__}")
        self._check_index(token_id.index, token_id.arena_key, len(self._tokens), token_id)

    def _check_node_id(self, node_id: NodeId) -> None:
        if not isinstance(node_id, NodeId):
            raise TypeError(f"expected NodeId, got {type(node_id).__name__}")
        self._check_index(node_id.index, node_id.arena_key, len(self._nodes), node_id)

    def _check_index(
        self, index: int, arena_key: Optional[int], size: int, handle: object
    ) -> None:
        if arena_key is not None and arena_key != self._key:
            raise OutOfBounds(f"{handle!r} belongs to a different arena")
        if not 0 <= index < size:
            raise OutOfBounds(f"{handle!r} is out of bounds for arena of size {size}")
