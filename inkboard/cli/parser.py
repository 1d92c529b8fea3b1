"""Command-line argument parsing for InkBoard."""

import argparse
import datetime
from pathlib import Path

from inkboard import __version__

LOG_LEVELS = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_date(date_str: str) -> datetime.date:
    """Parse date string in YYYY-MM-DD format for command-line arguments.

    Raises:
        argparse.ArgumentTypeError: If date format is invalid or date is not parseable

    Example:
        >>> parse_date("2024-01-15")
        datetime.date(2024, 1, 15)
    """
    try:
        return datetime.datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            f"Invalid date format: {date_str}. Use YYYY-MM-DD"
        ) from err


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--layout", type=Path, help="Layout JSON document")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--width", type=int, help="Canvas width in pixels (default: 1200)")
    parser.add_argument("--height", type=int, help="Canvas height in pixels (default: 825)")

    logging_group = parser.add_argument_group("logging", "Logging configuration options")
    logging_group.add_argument("--log-level", choices=LOG_LEVELS, help="Set the log level")
    logging_group.add_argument("--log-file", type=Path, help="Also write logs to this file")
    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging (VERBOSE level)"
    )
    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored console output"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser.

    Returns:
        argparse.ArgumentParser with ``render`` and ``validate`` subcommands

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["validate", "--layout", "layout.json"])
        >>> args.command
        'validate'
    """
    parser = argparse.ArgumentParser(
        prog="inkboard",
        description="InkBoard - family dashboard renderer for tri-color e-paper displays",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s render --layout layout.json --data-dir data --output board.png
  %(prog)s render --layout layout.json --data-dir data --output board.png --channels board.inkb
  %(prog)s render --config config/config.yaml --outlines
  %(prog)s validate --layout layout.json
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show version"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    render_parser = subparsers.add_parser(
        "render", help="Render a layout with data feeds to a PNG and optional channel file"
    )
    _add_common_arguments(render_parser)
    render_parser.add_argument("--data-dir", type=Path, help="Directory of JSON data feeds")
    render_parser.add_argument("--output", type=Path, help="PNG output path")
    render_parser.add_argument("--channels", type=Path, help="E-paper channel file output path")
    render_parser.add_argument("--title", help="Dashboard title shown by the header widget")
    render_parser.add_argument(
        "--date", type=parse_date, help="Render for this date (YYYY-MM-DD, default: today)"
    )
    render_parser.add_argument(
        "--outlines", action="store_true", help="Draw a debug outline around every widget"
    )
    render_parser.add_argument(
        "--no-red", action="store_true", help="Target a black/white panel (no red channel)"
    )

    validate_parser = subparsers.add_parser(
        "validate", help="Parse a layout and print the region of every widget"
    )
    _add_common_arguments(validate_parser)

    return parser


__all__ = [
    "create_parser",
    "parse_date",
]
