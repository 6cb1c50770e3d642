"""
exparse Command-Line Interface.

Thin wrapper around the lexer and parser for inspecting expressions.

Usage:
    exparse tokens "1 + 2"              # Show tokens
    exparse parse "1 + 2 * 3"           # Show the tree as an s-expression
    exparse parse -f expr.txt --format outline
    exparse check "(1 + 2"              # Report syntax errors only
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from exparse import __version__
from exparse.compiler.lexer import Lexer
from exparse.compiler.parser import Parser
from exparse.compiler.printer import flatten, to_outline, to_sexpr
from exparse.utils.diagnostics import Diagnostic
from exparse.utils.errors import ExparseError

logger = logging.getLogger("exparse")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    GREEN = "\033[92m"
    RESET = "\033[0m"
    enabled = True

    @classmethod
    def enable(cls) -> None:
        """Restore the default color codes."""
        cls.GREEN = "\033[92m"
        cls.RESET = "\033[0m"
        cls.enabled = True

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.GREEN = ""
        cls.RESET = ""
        cls.enabled = False


def _init_colors(force_off: bool = False) -> None:
    """Initialize colors based on terminal capabilities."""
    if force_off or not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()
    else:
        Colors.enable()


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to process",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Read the expression from a file instead",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="exparse",
        description="exparse - tokenize and parse integer arithmetic expressions",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Show the tokens of an expression",
    )
    _add_input_arguments(tokens_parser)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse an expression and print its tree",
    )
    _add_input_arguments(parse_parser)
    parse_parser.add_argument(
        "--format",
        choices=["sexpr", "outline", "flat"],
        default="sexpr",
        help="Tree output format (default: sexpr)",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Check an expression for syntax errors",
    )
    _add_input_arguments(check_parser)

    return parser


def _read_source(args: argparse.Namespace) -> Optional[str]:
    """Return the expression to process, or None after reporting a problem."""
    if args.file is not None:
        try:
            return args.file.read_text(encoding="utf-8")
        except FileNotFoundError:
            print(f"Error: File not found: {args.file}", file=sys.stderr)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: Cannot read {args.file}: {e}", file=sys.stderr)
        return None
    if args.expression is None:
        print("Error: no expression given (pass EXPRESSION or --file)", file=sys.stderr)
        return None
    return args.expression


def _filename(args: argparse.Namespace) -> Optional[str]:
    return str(args.file) if args.file is not None else None


def _print_error(error: ExparseError, source: str) -> None:
    diagnostic = Diagnostic.from_error(error, source)
    print(diagnostic.render(source, use_color=Colors.enabled), file=sys.stderr)


def cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens command."""
    source = _read_source(args)
    if source is None:
        return 1

    try:
        for token in Lexer(source, _filename(args)):
            print(f"{token.type.name} {token.image!r} [{token.begin}, {token.end})")
        return 0

    except ExparseError as e:
        _print_error(e, source)
        return 1


def cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse command."""
    source = _read_source(args)
    if source is None:
        return 1

    try:
        parser = Parser(source, _filename(args))
        root = parser.parse()

        renderers = {
            "sexpr": to_sexpr,
            "outline": to_outline,
            "flat": flatten,
        }
        print(renderers[args.format](parser.arena, root))
        return 0

    except ExparseError as e:
        _print_error(e, source)
        return 1


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    source = _read_source(args)
    if source is None:
        return 1

    try:
        Parser(source, _filename(args)).parse()
        print(f"{Colors.GREEN}OK{Colors.RESET}")
        return 0

    except ExparseError as e:
        _print_error(e, source)
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    _init_colors(force_off=args.no_color)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "tokens": cmd_tokens,
        "parse": cmd_parse,
        "check": cmd_check,
    }

    handler = command_handlers.get(args.command)
    if handler:
        logger.debug("running %s command", args.command)
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
