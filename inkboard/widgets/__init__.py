"""Widget painters for the dashboard."""

from .painter import WIDGET_PAINTERS, Painter, WidgetPainter

__all__ = ["WIDGET_PAINTERS", "Painter", "WidgetPainter"]
