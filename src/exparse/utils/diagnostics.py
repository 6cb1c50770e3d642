"""
Rust-like error diagnostics for exparse.

Turns an ExparseError into a diagnostic with source context.

Example output:
    error[E0201]: Unexpected token '*' at position 0
      --> <input>:1:1
       |
     1 | * 1
       | ^ expected an integer or '('
       |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from exparse.utils.errors import (
    ExparseError,
    LexicalError,
    SourceLocation,
    TrailingInput,
    UnexpectedToken,
    UnterminatedGroup,
)


# =============================================================================
# Error Codes Catalog
# =============================================================================


class ErrorCode:
    """Catalog of syntax error codes (E02xx)."""

    E0201 = "E0201"  # unexpected token
    E0202 = "E0202"  # unclosed delimiter
    E0208 = "E0208"  # unexpected character
    E0209 = "E0209"  # trailing input


ERROR_DESCRIPTIONS: dict[str, str] = {
    ErrorCode.E0201: "unexpected token",
    ErrorCode.E0202: "unclosed delimiter",
    ErrorCode.E0208: "unexpected character",
    ErrorCode.E0209: "trailing input",
}


# =============================================================================
# Diagnostic Types
# =============================================================================


class DiagnosticLevel(Enum):
    """Severity level of a diagnostic message."""

    ERROR = "error"
    NOTE = "note"
    HELP = "help"

    def color_code(self) -> str:
        """Get ANSI color code for this level."""
        colors = {
            DiagnosticLevel.ERROR: "\033[91m",  # Red
            DiagnosticLevel.NOTE: "\033[96m",  # Cyan
            DiagnosticLevel.HELP: "\033[92m",  # Green
        }
        return colors.get(self, "")


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """
    A single-line span of source code.

    Attributes:
        line: 1-indexed line number
        start_col: 1-indexed starting column
        end_col: 1-indexed ending column (exclusive)
        filename: Filename for display
    """

    line: int
    start_col: int
    end_col: int
    filename: str = "<input>"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, length: int = 1, filename: Optional[str] = None
    ) -> "SourceSpan":
        """Create a span starting at an offset into source."""
        loc = SourceLocation.from_offset(source, offset)
        return cls(loc.line, loc.column, loc.column + length, filename or "<input>")

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.start_col}"

    @property
    def length(self) -> int:
        return max(1, self.end_col - self.start_col)


@dataclass(slots=True)
class DiagnosticLabel:
    """
    A label pointing to a span of source code.

    Attributes:
        span: The source span this label points to
        message: Optional message to display with the label
        is_primary: Whether this is the primary label (shown with ^^^)
    """

    span: SourceSpan
    message: str = ""
    is_primary: bool = True


@dataclass
class Diagnostic:
    """
    A diagnostic message with source context.

    Attributes:
        code: Error code (e.g., "E0201")
        level: Severity level
        message: The main diagnostic message
        labels: Source code labels
        helps: Help messages
    """

    code: Optional[str]
    level: DiagnosticLevel
    message: str
    labels: list[DiagnosticLabel] = field(default_factory=list)
    helps: list[str] = field(default_factory=list)

    @classmethod
    def from_error(cls, error: ExparseError, source: str) -> "Diagnostic":
        """
        Build a diagnostic for an error raised while lexing or parsing.

        An InitError is described by the lexical error that caused it.
        """
        if error.code is None and isinstance(error.__cause__, ExparseError):
            error = error.__cause__

        filename = error.location.filename if error.location else None

        def span(offset: int) -> SourceSpan:
            return SourceSpan.from_offset(source, offset, 1, filename)

        diagnostic = cls(error.code, DiagnosticLevel.ERROR, error.message)
        if error.offset is None:
            return diagnostic

        if isinstance(error, UnterminatedGroup):
            diagnostic.labels.append(
                DiagnosticLabel(span(error.found_offset), "expected ')'")
            )
            diagnostic.labels.append(
                DiagnosticLabel(span(error.open_offset), "unclosed '(' starts here", False)
            )
            diagnostic.helps.append("add matching closing ')'")
        elif isinstance(error, UnexpectedToken):
            diagnostic.labels.append(
                DiagnosticLabel(span(error.offset), "expected an integer or '('")
            )
        elif isinstance(error, TrailingInput):
            diagnostic.labels.append(
                DiagnosticLabel(span(error.offset), "expected end of input")
            )
            diagnostic.helps.append("join the trailing input with an operator or remove it")
        elif isinstance(error, LexicalError):
            diagnostic.labels.append(
                DiagnosticLabel(span(error.offset), "not a number, operator or parenthesis")
            )
        else:
            diagnostic.labels.append(DiagnosticLabel(span(error.offset)))

        return diagnostic

    def render(self, source_code: str, use_color: bool = True) -> str:
        """
        Render this diagnostic as a formatted string.

        Args:
            source_code: The source text the diagnostic points into
            use_color: Whether to use ANSI color codes

        Returns:
            A formatted multi-line string representation
        """
        lines: list[str] = []
        source_lines = [line.rstrip("\r") for line in source_code.split("\n")]

        reset = "\033[0m" if use_color else ""
        bold = "\033[1m" if use_color else ""
        level_color = self.level.color_code() if use_color else ""
        blue = "\033[94m" if use_color else ""

        # Header line: error[E0201]: Unexpected token '*' at position 0
        level_str = self.level.value
        if self.code in ERROR_DESCRIPTIONS:
            header = (
                f"{level_color}{bold}{level_str}[{self.code}]{reset}: {bold}{self.message}{reset}"
            )
        else:
            header = f"{level_color}{bold}{level_str}{reset}: {bold}{self.message}{reset}"
        lines.append(header)

        if self.labels:
            primary_label = next((l for l in self.labels if l.is_primary), self.labels[0])
            lines.append(f"  {blue}-->{reset} {primary_label.span}")
            lines.append(f"   {blue}|{reset}")

            labels_by_line: dict[int, list[DiagnosticLabel]] = {}
            for label in self.labels:
                labels_by_line.setdefault(label.span.line, []).append(label)

            for line_num in sorted(labels_by_line):
                if not 1 <= line_num <= len(source_lines):
                    continue
                lines.append(f"{blue}{line_num:3} |{reset} {source_lines[line_num - 1]}")

                for label in labels_by_line[line_num]:
                    underline_char = "^" if label.is_primary else "-"
                    underline_color = level_color if label.is_primary else blue

                    padding = " " * (label.span.start_col - 1)
                    underline = underline_char * label.span.length

                    underline_line = (
                        f"   {blue}|{reset} {padding}{underline_color}{underline}{reset}"
                    )
                    if label.message:
                        underline_line += f" {underline_color}{label.message}{reset}"
                    lines.append(underline_line)

            lines.append(f"   {blue}|{reset}")

        for help_msg in self.helps:
            green = DiagnosticLevel.HELP.color_code() if use_color else ""
            lines.append(f"   {blue}={reset} {green}help:{reset} {help_msg}")

        return "\n".join(lines)

    def to_simple_message(self) -> str:
        """Get a simple one-line error message."""
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


__all__ = [
    "ErrorCode",
    "ERROR_DESCRIPTIONS",
    "DiagnosticLevel",
    "SourceSpan",
    "DiagnosticLabel",
    "Diagnostic",
]
