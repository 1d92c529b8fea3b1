"""Layout engine: sizes, layout trees, the space-splitting solver and the tree walk."""

from .dispatch import LayoutDispatcher, Placement, RenderCallback, resolve_layout
from .exceptions import (
    FormatError,
    LayoutError,
    LayoutNotFoundError,
    SchemaError,
    StructuralError,
)
from .nodes import (
    Container,
    LayoutNode,
    Leaf,
    SplitDirection,
    WidgetKind,
    load_layout,
    node_from_dict,
    node_to_dict,
    parse_layout,
)
from .region import Region
from .size import Pixels, Size, Units, parse_size
from .solver import solve_container, split_extents

__all__ = [
    "Container",
    "FormatError",
    "LayoutDispatcher",
    "LayoutError",
    "LayoutNode",
    "LayoutNotFoundError",
    "Leaf",
    "Pixels",
    "Placement",
    "Region",
    "RenderCallback",
    "SchemaError",
    "Size",
    "SplitDirection",
    "StructuralError",
    "Units",
    "WidgetKind",
    "load_layout",
    "node_from_dict",
    "node_to_dict",
    "parse_layout",
    "parse_size",
    "resolve_layout",
    "solve_container",
    "split_extents",
]
