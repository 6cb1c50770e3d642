"""
Error types and source location tracking for the exparse front end.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed offset from start of source
        filename: Optional filename for error reporting
    """

    line: int
    column: int
    offset: int = 0
    filename: Optional[str] = None

    @classmethod
    def from_offset(
        cls, source: str, offset: int, filename: Optional[str] = None
    ) -> "SourceLocation":
        """Compute line and column for an offset into source."""
        offset = max(0, min(offset, len(source)))
        line = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(line=line, column=offset - line_start + 1, offset=offset, filename=filename)

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


def line_at(source: str, offset: int) -> str:
    """Return the text of the source line containing offset."""
    start = source.rfind("\n", 0, offset) + 1
    end = source.find("\n", offset)
    if end == -1:
        end = len(source)
    return source[start:end]


class ExparseError(Exception):
    """Base exception for all exparse errors."""

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.location:
            parts.append(f"[{self.location}]")

        parts.append(self.message)

        if self.source_line is not None and self.location:
            parts.append(f"\n    {self.source_line}")
            # Caret under the error column
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"\n{padding}^")

        if self.source_line is None or not self.location:
            return " ".join(parts)
        return parts[0] + " " + "".join(parts[1:])


class InitError(ExparseError):
    """
    Raised when a Parser cannot be constructed.

    The lexer failed to produce the first token; the underlying
    LexicalError is chained as ``__cause__``.
    """

    pass


class ParseError(ExparseError):
    """Base class for errors detected while lexing or parsing input."""

    pass


class LexicalError(ParseError):
    """Raised when the lexer meets a character that starts no token."""

    code = "E0208"

    def __init__(
        self,
        offset: int,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.char = char
        super().__init__(
            f"Unexpected character {char!r} at position {offset}",
            offset,
            location,
            source_line,
        )


class UnexpectedToken(ParseError):
    """Raised when a token cannot start or continue an operand."""

    code = "E0201"

    def __init__(
        self,
        offset: int,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.found = found
        super().__init__(
            f"Unexpected token {found} at position {offset}",
            offset,
            location,
            source_line,
        )


class UnterminatedGroup(ParseError):
    """
    Raised when a '(' has no matching ')'.

    ``offset`` is the position of the unmatched '(' and ``found_offset``
    the position where ')' was expected.
    """

    code = "E0202"

    def __init__(
        self,
        open_offset: int,
        found_offset: int,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.found_offset = found_offset
        self.found = found
        super().__init__(
            f"Unclosed '(' at position {open_offset}: "
            f"expected ')' but found {found} at position {found_offset}",
            open_offset,
            location,
            source_line,
        )

    @property
    def open_offset(self) -> int:
        return self.offset


class TrailingInput(ParseError):
    """Raised when input remains after a complete expression."""

    code = "E0209"

    def __init__(
        self,
        offset: int,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.found = found
        super().__init__(
            f"Unexpected trailing input {found} at position {offset}",
            offset,
            location,
            source_line,
        )


class OutOfBounds(ExparseError, IndexError):
    """
    Raised when an id does not resolve in the arena it is given to.

    This covers ids minted by a different arena. Presenting such an id is a
    programming error, not a problem with the parsed input.
    """

    pass
