"""
Integration tests for the exparse command-line interface.
"""

import io
import logging
import sys

import pytest

from exparse import __version__
from exparse.cli import Colors, _init_colors, main


class TestTokensCommand:
    """exparse tokens"""

    def test_lists_tokens(self, capsys):
        assert main(["--no-color", "tokens", "1 + 2"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "INTEGER '1' [0, 1)",
            "PLUS '+' [2, 3)",
            "INTEGER '2' [4, 5)",
            "EOF '' [5, 5)",
        ]

    def test_lexical_error(self, capsys):
        assert main(["--no-color", "tokens", "1 # 2"]) == 1
        err = capsys.readouterr().err
        assert "error[E0208]" in err
        assert "position 2" in err


class TestParseCommand:
    """exparse parse"""

    @pytest.mark.parametrize(
        "fmt,expected",
        [
            ("sexpr", "(+ 1 (* 2 3))"),
            ("flat", "(1 + (2 * 3))"),
        ],
    )
    def test_formats(self, capsys, fmt, expected):
        assert main(["--no-color", "parse", "1 + 2 * 3", "--format", fmt]) == 0
        assert capsys.readouterr().out.strip() == expected

    def test_outline(self, capsys):
        assert main(["parse", "(4)", "--format", "outline"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Grouping", "  Primary(4)"]

    def test_from_file(self, capsys, tmp_path):
        path = tmp_path / "expr.txt"
        path.write_text("(1 + 2)\n* 3\n", encoding="utf-8")
        assert main(["parse", "-f", str(path)]) == 0
        assert capsys.readouterr().out.strip() == "(* (group (+ 1 2)) 3)"

    def test_missing_file(self, capsys, tmp_path):
        assert main(["parse", "-f", str(tmp_path / "nope.txt")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_syntax_error(self, capsys):
        assert main(["--no-color", "parse", "(1 + 2"]) == 1
        err = capsys.readouterr().err
        assert "error[E0202]" in err
        assert "position 0" in err


class TestCheckCommand:
    """exparse check"""

    def test_ok(self, capsys):
        assert main(["--no-color", "check", "((1 + 2) * (3 - 4)) / 5"]) == 0
        assert capsys.readouterr().out.strip() == "OK"

    @pytest.mark.parametrize("source", ["1 +", "(1 + 2", "* 1", "1 2", "x"])
    def test_rejects(self, capsys, source):
        assert main(["--no-color", "check", source]) == 1
        assert "position" in capsys.readouterr().err

    def test_no_expression(self, capsys):
        assert main(["check"]) == 1
        assert "no expression given" in capsys.readouterr().err


class TestGlobalOptions:
    """Options shared by all commands."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="exparse"):
            assert main(["--log-level", "debug", "check", "1 + 2"]) == 0
        assert any("parsed root" in record.getMessage() for record in caplog.records)


class TestInputFiles:
    """Unreadable input is reported, never raised."""

    def test_non_utf8_file(self, capsys, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"1 + \xff")
        assert main(["check", "-f", str(path)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Cannot read")
        assert "utf-8" in err

    def test_directory(self, capsys, tmp_path):
        assert main(["parse", "-f", str(tmp_path)]) == 1
        assert capsys.readouterr().err.startswith("Error: Cannot read")


class TestLargeInputs:
    """Deep expressions go through every command."""

    def test_deeply_nested_check(self, capsys):
        source = "(" * 3000 + "1" + ")" * 3000
        assert main(["--no-color", "check", source]) == 0
        assert capsys.readouterr().out.strip() == "OK"

    def test_long_chain_parse(self, capsys):
        source = " + ".join(["1"] * 3000)
        assert main(["parse", source, "--format", "flat"]) == 0
        assert capsys.readouterr().out.strip().endswith(" + 1)")


class TestColors:
    """Color state follows each invocation."""

    def test_colors_restored_after_no_color(self, monkeypatch):
        class _Terminal(io.StringIO):
            def isatty(self):
                return True

        monkeypatch.delenv("NO_COLOR", raising=False)
        _init_colors(force_off=True)
        assert not Colors.enabled
        assert Colors.GREEN == ""

        monkeypatch.setattr(sys, "stdout", _Terminal())
        _init_colors()
        assert Colors.enabled
        assert Colors.GREEN == "\033[92m"
        Colors.disable()
