"""Shared utilities: exceptions and logging setup."""

from .exceptions import ConfigError, DataFeedError, InkBoardError, OutputError
from .logging import VERBOSE, get_log_level, get_logger, setup_logging

__all__ = [
    "VERBOSE",
    "ConfigError",
    "DataFeedError",
    "InkBoardError",
    "OutputError",
    "get_log_level",
    "get_logger",
    "setup_logging",
]
