"""Layout system exceptions."""

from typing import Any, Optional

from inkboard.utils.exceptions import InkBoardError


class LayoutError(InkBoardError):
    """Base exception for layout system errors."""


class LayoutNotFoundError(LayoutError):
    """Raised when the layout document cannot be read."""


class FormatError(LayoutError):
    """Raised when a size or split literal does not match its grammar.

    Args:
        message: Human-readable error description
        value: The offending literal
        expected: Description of the accepted forms
        path: Location of the node in the document, e.g. ``root.entries[1]``
    """

    def __init__(
        self,
        message: str,
        value: Optional[Any] = None,
        expected: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        self.value = value
        self.expected = expected
        self.path = path

        error_details: dict[str, Any] = {}
        if value is not None:
            error_details["value"] = repr(value)
        if expected:
            error_details["expected"] = expected
        if path:
            error_details["path"] = path

        super().__init__(message, error_details)


class SchemaError(LayoutError):
    """Raised when a layout node has an unknown tag or a missing/invalid field."""

    def __init__(
        self, message: str, path: Optional[str] = None, field_name: Optional[str] = None
    ) -> None:
        self.path = path
        self.field_name = field_name

        error_details: dict[str, Any] = {}
        if path:
            error_details["path"] = path
        if field_name:
            error_details["field"] = field_name

        super().__init__(message, error_details)


class StructuralError(LayoutError):
    """Raised when the document root is not a container."""
