"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from period_formatter import __version__
from period_formatter.config import get_settings
from period_formatter.core import list_occurrences, render_period
from period_formatter.schemas import Result


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="period-formatter",
        description="Render date ranges as short, human-readable strings",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'format' command - drop redundant fields from the end
    format_parser = subparsers.add_parser("format", help="Format a range")
    _add_range_arguments(format_parser)

    # 'reduce' command - format, then shorten to fit
    reduce_parser = subparsers.add_parser("reduce", help="Format a range as short as needed")
    _add_range_arguments(reduce_parser)
    reduce_parser.add_argument(
        "--max",
        type=int,
        default=None,
        dest="max_length",
        help="Maximum length in characters (default: reduce as much as possible)",
    )

    # 'occurrences' command - list each step of the range
    occurrences_parser = subparsers.add_parser("occurrences", help="List the recurrences of a range")
    occurrences_parser.add_argument("start", help="Start instant (ISO-8601)")
    occurrences_parser.add_argument("end", help="End instant (ISO-8601)")
    occurrences_parser.add_argument(
        "--every",
        default="1d",
        help="Step between occurrences, e.g. 30m, 2h, 1d, 1w (default: 1d)",
    )
    occurrences_parser.add_argument(
        "--format",
        default="Y-m-d H:i",
        dest="fmt",
        help="Format for each occurrence (default: Y-m-d H:i)",
    )
    occurrences_parser.add_argument("--limit", type=int, default=None, help="Maximum number of occurrences")
    occurrences_parser.add_argument("--include-end", action="store_true", help="Include the end instant")

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def _add_range_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("start", help="Start instant (ISO-8601)")
    parser.add_argument("end", help="End instant (ISO-8601)")
    parser.add_argument("fmt", metavar="FORMAT", help="Format tokens, e.g. 'l, F jS g:ia'")
    parser.add_argument(
        "--sep",
        default=None,
        help="Separator between start and end (default: default_separator from settings)",
    )


def configure_logging(debug: bool) -> None:
    """Send package logs to stderr at DEBUG, or at the configured level."""
    level = "DEBUG" if debug else get_settings().log_level
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.enable("period_formatter")


def _report(result: Result) -> int:
    if result.success:
        print(result.message)
        return 0
    print(f"Error: {result.error}", file=sys.stderr)
    return 1


def cmd_format(args: argparse.Namespace) -> int:
    """Handle the 'format' command."""
    sep = args.sep if args.sep is not None else get_settings().default_separator
    return _report(render_period(args.start, args.end, args.fmt, sep))


def cmd_reduce(args: argparse.Namespace) -> int:
    """Handle the 'reduce' command."""
    settings = get_settings()
    sep = args.sep if args.sep is not None else settings.default_separator
    max_length = args.max_length if args.max_length is not None else settings.default_max_length
    return _report(render_period(args.start, args.end, args.fmt, sep, max_length, reduce=True))


def cmd_occurrences(args: argparse.Namespace) -> int:
    """Handle the 'occurrences' command."""
    result = list_occurrences(
        args.start,
        args.end,
        every=args.every,
        fmt=args.fmt,
        limit=args.limit,
        include_end=args.include_end,
    )
    return _report(result)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)
    logger.debug("Settings: {}", get_settings())

    commands = {
        "format": cmd_format,
        "reduce": cmd_reduce,
        "occurrences": cmd_occurrences,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
