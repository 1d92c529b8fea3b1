"""CLI module for InkBoard.

This module provides the command-line interface: argument parsing,
settings resolution and dispatch to the ``render`` and ``validate``
commands.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from inkboard.utils.exceptions import InkBoardError, OutputError
from inkboard.utils.logging import setup_logging

from .commands import COMMANDS, run_render, run_validate, settings_from_args
from .parser import create_parser, parse_date

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code: 0 on success, 2 on layout, data or configuration errors,
        1 on anything else
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Console logging first so settings problems are reported
    setup_logging(args.log_level or ("VERBOSE" if args.verbose else "INFO"))
    logger = logging.getLogger("inkboard.cli")

    try:
        settings = settings_from_args(args)
        setup_logging(
            settings.logging.level,
            log_file=settings.logging.file,
            console_colors=settings.logging.console_colors,
            third_party_level=settings.logging.third_party_level,
        )
        return COMMANDS[args.command](args, settings)
    except ValidationError as e:
        logger.error("Invalid settings: %s", e)
        return EXIT_CONFIG_ERROR
    except OutputError as e:
        logger.error("%s", e)
        return EXIT_FAILURE
    except InkBoardError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR
    except Exception:
        logger.exception("Unexpected error running %s", args.command)
        return EXIT_FAILURE


__all__ = [
    "EXIT_CONFIG_ERROR",
    "EXIT_FAILURE",
    "EXIT_OK",
    "create_parser",
    "main",
    "parse_date",
    "run_render",
    "run_validate",
    "settings_from_args",
]
