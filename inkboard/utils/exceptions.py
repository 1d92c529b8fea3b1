"""Base exceptions shared across InkBoard packages."""

from typing import Any, Optional


class InkBoardError(Exception):
    """Base exception for all InkBoard errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context

    Example:
        >>> raise InkBoardError("Render failed", {"stage": "output"})
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DataFeedError(InkBoardError):
    """Raised when a data feed file exists but cannot be read or validated."""

    def __init__(
        self,
        message: str,
        feed_name: Optional[str] = None,
        file_path: Optional[str] = None,
        validation_errors: Optional[list[str]] = None,
    ) -> None:
        self.feed_name = feed_name
        self.file_path = file_path
        self.validation_errors = validation_errors or []

        error_details: dict[str, Any] = {}
        if feed_name:
            error_details["feed"] = feed_name
        if file_path:
            error_details["file_path"] = file_path
        if self.validation_errors:
            error_details["validation_errors"] = self.validation_errors

        super().__init__(message, error_details)


class OutputError(InkBoardError):
    """Raised when a rendered image cannot be written or read back."""


class ConfigError(InkBoardError):
    """Raised when an explicitly requested configuration file cannot be used."""

    def __init__(self, message: str, config_file: Optional[str] = None) -> None:
        self.config_file = config_file
        super().__init__(message, {"config_file": config_file} if config_file else None)
