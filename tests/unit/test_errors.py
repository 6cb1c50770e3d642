"""
Unit tests for error formatting and diagnostics.
"""

import pytest

from exparse.compiler.parser import Parser
from exparse.utils.diagnostics import Diagnostic, ErrorCode
from exparse.utils.errors import (
    ExparseError,
    InitError,
    OutOfBounds,
    SourceLocation,
    UnexpectedToken,
)


def _parse_error(source: str) -> ExparseError:
    try:
        Parser(source).parse()
    except ExparseError as e:
        return e
    pytest.fail(f"{source!r} parsed without error")


class TestSourceLocation:
    """Offset to line/column conversion."""

    def test_first_line(self):
        assert SourceLocation.from_offset("1 + 2", 4) == SourceLocation(1, 5, 4)

    def test_later_line(self):
        loc = SourceLocation.from_offset("1 +\n\n 2", 6, "a.expr")
        assert (loc.line, loc.column) == (3, 2)
        assert str(loc) == "a.expr:3:2"

    def test_offset_at_end(self):
        loc = SourceLocation.from_offset("1 +", 3)
        assert (loc.line, loc.column) == (1, 4)


class TestErrorMessages:
    """Rendered error text."""

    def test_message_has_location_and_caret(self):
        """str() shows the location, message, source line and a caret."""
        error = _parse_error("1 + *")
        text = str(error)
        assert text.startswith("[1:5] Unexpected token '*' at position 4")
        assert text.endswith("\n    1 + *\n        ^")

    def test_plain_error_without_location(self):
        error = UnexpectedToken(3, "end of input")
        assert str(error) == "Unexpected token end of input at position 3"

    def test_out_of_bounds_is_index_error(self):
        assert issubclass(OutOfBounds, IndexError)
        assert issubclass(OutOfBounds, ExparseError)


class TestDiagnostics:
    """rustc-style diagnostic rendering."""

    def test_unexpected_token(self):
        source = "* 1"
        diagnostic = Diagnostic.from_error(_parse_error(source), source)
        assert diagnostic.code == ErrorCode.E0201
        assert diagnostic.render(source, use_color=False) == "\n".join(
            [
                "error[E0201]: Unexpected token '*' at position 0",
                "  --> <input>:1:1",
                "   |",
                "  1 | * 1",
                "   | ^ expected an integer or '('",
                "   |",
            ]
        )

    def test_unclosed_group(self):
        source = "(1 + 2"
        diagnostic = Diagnostic.from_error(_parse_error(source), source)
        assert diagnostic.code == ErrorCode.E0202
        rendered = diagnostic.render(source, use_color=False)
        assert "  --> <input>:1:7" in rendered
        assert "   | - unclosed '(' starts here" in rendered
        assert "help: add matching closing ')'" in rendered

    def test_trailing_input(self):
        source = "1 2"
        diagnostic = Diagnostic.from_error(_parse_error(source), source)
        assert diagnostic.code == ErrorCode.E0209
        assert diagnostic.to_simple_message().startswith("[E0209] ")

    def test_lone_carriage_return_stays_on_line(self):
        """Only newlines start a new source line in rendered output."""
        source = "1 +\r*\n2"
        rendered = Diagnostic.from_error(_parse_error(source), source).render(
            source, use_color=False
        )
        assert "  --> <input>:1:5" in rendered
        assert "  1 | 1 +\r*\n" in rendered
        assert "   |     ^ expected an integer or '('" in rendered

    def test_crlf_line_endings(self):
        source = "1 +\r\n* 2"
        rendered = Diagnostic.from_error(_parse_error(source), source).render(
            source, use_color=False
        )
        assert "  --> <input>:2:1" in rendered
        assert "  2 | * 2\n" in rendered

    def test_init_error_uses_lexical_cause(self):
        source = "abc"
        with pytest.raises(InitError) as exc_info:
            Parser(source)
        diagnostic = Diagnostic.from_error(exc_info.value, source)
        assert diagnostic.code == ErrorCode.E0208
        assert "'a'" in diagnostic.message

    def test_color_codes(self):
        source = "1 +"
        rendered = Diagnostic.from_error(_parse_error(source), source).render(source)
        assert "\033[91m" in rendered
