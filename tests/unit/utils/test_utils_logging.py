"""Tests for inkboard.utils.logging module."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from inkboard.utils.logging import (
    VERBOSE,
    AutoColoredFormatter,
    get_log_level,
    get_logger,
    setup_logging,
)


@pytest.fixture
def package_logger():
    """The inkboard logger, restored to test defaults afterwards."""
    logger = logging.getLogger("inkboard")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.CRITICAL)
    logging.getLogger("PIL").setLevel(logging.NOTSET)


class TestVerboseLogging:
    """Test VERBOSE custom log level functionality."""

    def test_verbose_level_value(self) -> None:
        """Test VERBOSE level sits between DEBUG and INFO."""
        assert VERBOSE == 15
        assert logging.DEBUG < VERBOSE < logging.INFO

    def test_verbose_level_name(self) -> None:
        """Test VERBOSE level name is registered."""
        assert logging.getLevelName(VERBOSE) == "VERBOSE"

    def test_verbose_records_use_verbose_level_name(self, caplog) -> None:
        """Test records logged at VERBOSE carry the registered name."""
        logger = logging.getLogger("test_verbose_records")

        with caplog.at_level(VERBOSE, logger="test_verbose_records"):
            logger.log(VERBOSE, "placed %s", "todo")

        assert [record.levelname for record in caplog.records] == ["VERBOSE"]


class TestGetLogLevel:
    """Test get_log_level function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("verbose", VERBOSE),
            (" info ", logging.INFO),
            ("Warning", logging.WARNING),
            ("CRITICAL", logging.CRITICAL),
            (logging.ERROR, logging.ERROR),
        ],
    )
    def test_known_levels(self, name, expected) -> None:
        assert get_log_level(name) == expected

    def test_unknown_level_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            get_log_level("LOUD")


class TestAutoColoredFormatter:
    """Test AutoColoredFormatter class."""

    def _record(self, level: int = logging.INFO) -> logging.LogRecord:
        return logging.LogRecord("inkboard", level, __file__, 1, "hello", None, None)

    def test_colors_disabled_leaves_output_plain(self) -> None:
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", enable_colors=False)

        assert formatter.color_mode == "none"
        assert formatter.format(self._record()) == "INFO hello"

    def test_basic_colors_wrap_level_name(self) -> None:
        formatter = AutoColoredFormatter("%(levelname)s %(message)s", enable_colors=False)
        formatter.color_mode = "basic"

        assert formatter.format(self._record(logging.ERROR)) == "\033[31mERROR\033[0m hello"

    def test_non_tty_disables_colors(self) -> None:
        with patch("sys.stderr.isatty", return_value=False):
            formatter = AutoColoredFormatter("%(message)s")

        assert formatter.color_mode == "none"


class TestSetupLogging:
    """Test setup_logging function."""

    def test_setup_logging_sets_level_and_console_handler(self, package_logger) -> None:
        logger = setup_logging("VERBOSE", console_colors=False)

        assert logger is package_logger
        assert logger.level == VERBOSE
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_logging_replaces_previous_handlers(self, package_logger) -> None:
        setup_logging("INFO")
        setup_logging("DEBUG")

        assert len(package_logger.handlers) == 1

    def test_setup_logging_with_file_writes_log(self, package_logger, tmp_path: Path) -> None:
        # Arrange
        log_file = tmp_path / "logs" / "inkboard.log"

        # Act
        setup_logging("INFO", log_file=log_file, console_colors=False)
        get_logger("layout").info("solver ready")
        for handler in package_logger.handlers:
            handler.flush()

        # Assert
        assert len(package_logger.handlers) == 2
        assert "solver ready" in log_file.read_text(encoding="utf-8")

    def test_setup_logging_sets_third_party_level(self, package_logger) -> None:
        setup_logging("DEBUG", third_party_level="ERROR")

        assert logging.getLogger("PIL").level == logging.ERROR

    def test_setup_logging_with_unknown_level_raises(self, package_logger) -> None:
        with pytest.raises(ValueError):
            setup_logging("LOUD")


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_prefixes_package_name(self) -> None:
        assert get_logger("render").name == "inkboard.render"

    def test_get_logger_keeps_qualified_names(self) -> None:
        assert get_logger("inkboard.cli").name == "inkboard.cli"
