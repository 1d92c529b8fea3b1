"""Layout tree nodes and layout document parsing.

A layout document is a JSON tree. Every node has a ``type`` tag and a
``size``; containers add a ``split`` direction and ordered ``entries``::

    {
        "type": "container",
        "size": "1u",
        "split": "vertical",
        "entries": [
            {"type": "date", "size": "120px"},
            {"type": "weather", "size": "1u"}
        ]
    }
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, NoReturn, Union

from .exceptions import FormatError, LayoutNotFoundError, SchemaError
from .size import Size, parse_size

logger = logging.getLogger(__name__)

CONTAINER_TYPE = "container"


class SplitDirection(str, Enum):
    """Axis along which a container lays out its entries."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class WidgetKind(str, Enum):
    """Closed set of leaf widget tags."""

    HEADER = "header"
    DATE = "date"
    WEATHER = "weather"
    TODO = "todo"
    ALLOWANCE = "allowance"
    COUNTDOWN = "countdown"
    BATTERY = "battery"
    VERSE = "verse"
    HORIZONTAL_RULE = "horizontal-rule"
    VERTICAL_RULE = "vertical-rule"


@dataclass(frozen=True)
class Leaf:
    """A widget slot carrying only a size."""

    kind: WidgetKind
    size: Size


@dataclass(frozen=True)
class Container:
    """A node that splits its region among its entries."""

    size: Size
    split: SplitDirection
    entries: tuple["LayoutNode", ...] = ()


LayoutNode = Union[Container, Leaf]


def _raise_schema_error(message: str, path: str, field_name: str = "") -> NoReturn:
    raise SchemaError(f"{message} at {path}", path=path, field_name=field_name or None)


def parse_split(value: object, path: str = "") -> SplitDirection:
    """Parse a split literal (``"horizontal"`` or ``"vertical"``).

    Raises:
        SchemaError: If the value is not a string
        FormatError: If the string is not one of the two lowercase literals
    """
    if not isinstance(value, str):
        _raise_schema_error(
            f"Split must be a string, got {type(value).__name__}", path, "split"
        )
    try:
        return SplitDirection(value)
    except ValueError:
        raise FormatError(
            f"Invalid split direction '{value}', expected 'horizontal' or 'vertical'",
            value=value,
            expected="'horizontal' or 'vertical'",
            path=path or None,
        ) from None


def node_from_dict(data: Any, path: str = "root") -> LayoutNode:
    """Build a layout node (recursively) from parsed JSON.

    Args:
        data: Decoded JSON object for the node
        path: Location of the node, used in error messages

    Returns:
        Container or Leaf

    Raises:
        SchemaError: Unknown tag, missing field or wrong field type
        FormatError: Malformed size or split literal
    """
    if not isinstance(data, dict):
        _raise_schema_error(f"Layout node must be an object, got {type(data).__name__}", path)

    if "type" not in data:
        _raise_schema_error("Missing required field: type", path, "type")
    node_type = data["type"]

    if "size" not in data:
        _raise_schema_error("Missing required field: size", path, "size")
    size = parse_size(data["size"], path)

    if node_type == CONTAINER_TYPE:
        for field in ("split", "entries"):
            if field not in data:
                _raise_schema_error(f"Missing required field: {field}", path, field)

        split = parse_split(data["split"], path)

        entries = data["entries"]
        if not isinstance(entries, list):
            _raise_schema_error(
                f"Field 'entries' must be a list, got {type(entries).__name__}", path, "entries"
            )

        children = tuple(
            node_from_dict(entry, f"{path}.entries[{index}]")
            for index, entry in enumerate(entries)
        )
        return Container(size=size, split=split, entries=children)

    try:
        kind = WidgetKind(node_type)
    except ValueError:
        known = ", ".join([CONTAINER_TYPE] + [member.value for member in WidgetKind])
        _raise_schema_error(f"Unknown node type {node_type!r} (known types: {known})", path, "type")

    return Leaf(kind=kind, size=size)


def node_to_dict(node: LayoutNode) -> dict[str, Any]:
    """Serialize a node back to its JSON form."""
    if isinstance(node, Container):
        return {
            "type": CONTAINER_TYPE,
            "size": node.size.to_text(),
            "split": node.split.value,
            "entries": [node_to_dict(entry) for entry in node.entries],
        }
    return {"type": node.kind.value, "size": node.size.to_text()}


def parse_layout(text: str) -> LayoutNode:
    """Parse a layout document from a JSON string.

    Raises:
        SchemaError: If the text is not valid JSON or the tree is malformed
        FormatError: If a size or split literal is malformed
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON in layout document: {e}") from e
    return node_from_dict(data)


def load_layout(path: Union[str, Path]) -> LayoutNode:
    """Load and parse a layout document from disk.

    Args:
        path: Path to the layout JSON file

    Returns:
        Root layout node

    Raises:
        LayoutNotFoundError: If the file cannot be read
        SchemaError: If the document is malformed
        FormatError: If a size or split literal is malformed
    """
    layout_path = Path(path)
    try:
        text = layout_path.read_text(encoding="utf-8")
    except OSError as e:
        raise LayoutNotFoundError(
            f"Cannot read layout file {layout_path}", {"error": str(e)}
        ) from e

    root = parse_layout(text)
    logger.debug("Loaded layout from %s (%d nodes)", layout_path, count_nodes(root))
    return root


def count_nodes(node: LayoutNode) -> int:
    """Number of nodes in the subtree rooted at ``node``."""
    if isinstance(node, Container):
        return 1 + sum(count_nodes(entry) for entry in node.entries)
    return 1
