"""Widget registry and the callback that paints leaves as the layout is walked."""

import logging
from collections.abc import Callable
from typing import Optional

from inkboard.data.models import DashboardData
from inkboard.layout.dispatch import LoggerLike
from inkboard.layout.nodes import WidgetKind
from inkboard.layout.region import Region
from inkboard.render.canvas import DashboardCanvas
from inkboard.utils.logging import VERBOSE

from .family import paint_allowance, paint_countdown, paint_todo
from .status import paint_battery, paint_horizontal_rule, paint_vertical_rule
from .text import paint_date, paint_header, paint_verse
from .weather import paint_weather

Painter = Callable[[DashboardCanvas, Region, Optional[DashboardData]], None]

WIDGET_PAINTERS: dict[WidgetKind, Painter] = {
    WidgetKind.HEADER: paint_header,
    WidgetKind.DATE: paint_date,
    WidgetKind.WEATHER: paint_weather,
    WidgetKind.TODO: paint_todo,
    WidgetKind.ALLOWANCE: paint_allowance,
    WidgetKind.COUNTDOWN: paint_countdown,
    WidgetKind.BATTERY: paint_battery,
    WidgetKind.VERSE: paint_verse,
    WidgetKind.HORIZONTAL_RULE: paint_horizontal_rule,
    WidgetKind.VERTICAL_RULE: paint_vertical_rule,
}


class WidgetPainter:
    """Render callback for :class:`~inkboard.layout.dispatch.LayoutDispatcher`.

    Each widget paints onto a blank tile the size of the part of its region
    that lies on the canvas, which is then pasted back. Nothing a painter
    draws can land outside its region.
    """

    def __init__(
        self,
        canvas: DashboardCanvas,
        draw_outlines: bool = False,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        """Initialize the widget painter.

        Args:
            canvas: Dashboard canvas receiving the painted tiles
            draw_outlines: Draw a rounded debug frame inside every widget region
            logger: Logger for per-widget tracing (defaults to this module's logger)
        """
        self.canvas = canvas
        self.draw_outlines = draw_outlines
        self.logger = logger or logging.getLogger(__name__)
        self.painted: list[WidgetKind] = []

    def __call__(self, kind: WidgetKind, region: Region, data: Optional[DashboardData]) -> None:
        visible = region.intersection(self.canvas.bounds)
        if visible.is_empty():
            self.logger.log(VERBOSE, "Skipping %s widget outside the canvas %r", kind.value, region)
            return
        if visible != region:
            self.logger.log(VERBOSE, "Clipping %s widget %r to %r", kind.value, region, visible)

        tile = self.canvas.tile(visible)
        WIDGET_PAINTERS[kind](tile, tile.bounds, data)

        if self.draw_outlines:
            tile.draw_outline(tile.bounds)

        self.canvas.paste(tile, visible)
        self.painted.append(kind)
        self.logger.debug("Painted %s widget at %r", kind.value, visible)
