"""Layout tree walk that hands each leaf region to a widget renderer."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional, Union

from inkboard.utils.logging import VERBOSE

from .exceptions import StructuralError
from .nodes import Container, LayoutNode, Leaf, WidgetKind
from .region import Region
from .solver import solve_container

# Called once per leaf with (kind, region, application data); return value is ignored.
RenderCallback = Callable[[WidgetKind, Region, Any], Any]

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


@dataclass(frozen=True)
class Placement:
    """A leaf together with the region it was given."""

    leaf: Leaf
    region: Region
    path: str

    @property
    def kind(self) -> WidgetKind:
        return self.leaf.kind


def _ignore_widget(_kind: WidgetKind, _region: Region, _data: Any) -> None:
    return None


class LayoutDispatcher:
    """Depth-first, pre-order walk of a layout tree.

    Containers are split with :func:`solve_container`; every leaf is passed
    to ``render_widget`` with its resolved region and the application data.
    The dispatcher keeps no state between calls.
    """

    def __init__(
        self, render_widget: RenderCallback, logger: Optional[LoggerLike] = None
    ) -> None:
        """Initialize the dispatcher.

        Args:
            render_widget: Callback invoked as ``render_widget(kind, region, data)``
            logger: Logger used to trace the walk (defaults to this module's logger)
        """
        self.render_widget = render_widget
        self.logger = logger or logging.getLogger(__name__)

    def dispatch(self, root: LayoutNode, region: Region, data: Any = None) -> list[Placement]:
        """Lay out ``root`` inside ``region`` and render every leaf.

        Args:
            root: Document root; must be a container
            region: Full canvas region
            data: Application data forwarded to every widget call

        Returns:
            Leaf placements in rendering order

        Raises:
            StructuralError: If the root is not a container
        """
        if not isinstance(root, Container):
            raise StructuralError(
                "Layout root must be a container",
                {"root_type": root.kind.value if isinstance(root, Leaf) else type(root).__name__},
            )

        placements: list[Placement] = []
        self._walk_container(root, region, data, "root", placements)
        self.logger.debug("Dispatched %d widgets into %r", len(placements), region)
        return placements

    def _walk_container(
        self,
        container: Container,
        region: Region,
        data: Any,
        path: str,
        placements: list[Placement],
    ) -> None:
        child_regions = solve_container(container, region)
        self.logger.debug(
            "Container %s split %s over %r into %d entries",
            path,
            container.split.value,
            region,
            len(child_regions),
        )

        for index, (entry, child_region) in enumerate(zip(container.entries, child_regions)):
            child_path = f"{path}.entries[{index}]"
            if isinstance(entry, Container):
                self._walk_container(entry, child_region, data, child_path, placements)
            else:
                self.logger.log(
                    VERBOSE, "Widget %s at %s -> %r", entry.kind.value, child_path, child_region
                )
                self.render_widget(entry.kind, child_region, data)
                placements.append(Placement(leaf=entry, region=child_region, path=child_path))


def resolve_layout(
    root: LayoutNode, region: Region, logger: Optional[LoggerLike] = None
) -> list[Placement]:
    """Resolve leaf regions without rendering anything."""
    return LayoutDispatcher(_ignore_widget, logger=logger).dispatch(root, region)
