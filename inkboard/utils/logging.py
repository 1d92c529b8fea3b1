"""Logging configuration and setup utilities."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Optional, Union

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


def get_log_level(level_name: Union[str, int]) -> int:
    """Get numeric log level from a name, including the custom VERBOSE level.

    Args:
        level_name: Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
            or an already numeric level

    Returns:
        Numeric log level value

    Raises:
        ValueError: If the level name is not recognized
    """
    if isinstance(level_name, int):
        return level_name

    name = level_name.strip().upper()
    if name == "VERBOSE":
        return VERBOSE

    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities."""
        if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb":
            return "none"

        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"

        if term and "color" in term:
            return "basic"

        return "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color_start}{level_name}{color_end}", 1)

        return formatted


def setup_logging(
    log_level: Union[str, int] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console_colors: bool = True,
    third_party_level: Union[str, int] = "WARNING",
) -> logging.Logger:
    """Set up application logging with console and optional file output.

    Args:
        log_level: Logging level (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path; parent directories are created
        console_colors: Whether to colorize the level name on a TTY
        third_party_level: Level applied to noisy third-party loggers (PIL)

    Returns:
        The configured ``inkboard`` package logger
    """
    numeric_level = get_log_level(log_level)

    logger = logging.getLogger("inkboard")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    console_formatter = AutoColoredFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        enable_colors=console_colors,
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5MB
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        logger.info("Logging to file: %s", log_path)

    logging.getLogger("PIL").setLevel(get_log_level(third_party_level))

    logger.debug("Logging initialized at %s level", logging.getLevelName(numeric_level))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the ``inkboard`` namespace.

    Args:
        name: Logger name relative to the package, e.g. ``"layout.dispatch"``

    Returns:
        Logger instance named ``inkboard.<name>``
    """
    if name.startswith("inkboard"):
        return logging.getLogger(name)
    return logging.getLogger(f"inkboard.{name}")
