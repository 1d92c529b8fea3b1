"""Size values for layout nodes.

A size is either an absolute pixel count (``"200px"``) or a proportional
unit weight (``"1.5u"``). Pixel sizes are reserved first; unit sizes share
whatever is left of the split axis.
"""

import math
import re
from dataclasses import dataclass
from typing import NoReturn, Union

from .exceptions import FormatError, SchemaError

PIXEL_SUFFIX = "px"
UNIT_SUFFIX = "u"
EXPECTED_FORMS = r"'<integer>px' (e.g. '200px') or '<number>u' (e.g. '1.5u')"

_INTEGER_RE = re.compile(r"^\+?[0-9]+$")
_REAL_RE = re.compile(r"^\+?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


@dataclass(frozen=True)
class Pixels:
    """Absolute size in pixels."""

    value: int

    def to_text(self) -> str:
        return f"{self.value}{PIXEL_SUFFIX}"


@dataclass(frozen=True)
class Units:
    """Proportional weight competing for leftover space."""

    value: float

    def to_text(self) -> str:
        # 2.0 -> "2u", 12.5 -> "12.5u"
        return f"{self.value:g}{UNIT_SUFFIX}"


Size = Union[Pixels, Units]


def fixed_pixels(size: Size) -> int:
    """Pixel share reserved before distribution (0 for unit sizes)."""
    return size.value if isinstance(size, Pixels) else 0


def unit_weight(size: Size) -> float:
    """Unit weight used for distribution (0.0 for pixel sizes)."""
    return size.value if isinstance(size, Units) else 0.0


def is_scaled(size: Size) -> bool:
    """Whether the size takes part in leftover distribution.

    Unit sizes always do. A zero pixel size is treated the same way, which
    with a weight of 0.0 always resolves to an extent of 0.
    """
    return not (isinstance(size, Pixels) and size.value > 0)


def parse_size(text: object, path: str = "") -> Size:
    """Parse a size literal.

    Args:
        text: Literal such as ``"42px"`` or ``"12.5u"``
        path: Optional node path used in error messages

    Returns:
        Pixels or Units instance

    Raises:
        SchemaError: If the value is not a string
        FormatError: If the string matches neither accepted form
    """
    if not isinstance(text, str):
        raise SchemaError(
            f"Size must be a string like '200px' or '1u', got {type(text).__name__}",
            path=path or None,
            field_name="size",
        )

    if text.endswith(PIXEL_SUFFIX):
        prefix = text[: -len(PIXEL_SUFFIX)].strip()
        if not _INTEGER_RE.match(prefix):
            _raise_format_error(text, path)
        return Pixels(int(prefix))

    if text.endswith(UNIT_SUFFIX):
        prefix = text[: -len(UNIT_SUFFIX)].strip()
        if not _REAL_RE.match(prefix):
            _raise_format_error(text, path)
        value = float(prefix)
        if not math.isfinite(value):
            _raise_format_error(text, path)
        return Units(value)

    _raise_format_error(text, path)


def _raise_format_error(text: str, path: str) -> NoReturn:
    raise FormatError(
        f"Invalid size format '{text}', expected {EXPECTED_FORMS}",
        value=text,
        expected=EXPECTED_FORMS,
        path=path or None,
    )
