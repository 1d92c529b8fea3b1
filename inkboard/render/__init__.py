"""Canvas, fonts, colors and output writers for rendered dashboards."""

from .canvas import DashboardCanvas
from .colors import DashboardColors, get_rendering_colors
from .fonts import FontManager
from .output import (
    ChannelPlanes,
    convert_image_to_channels,
    load_channels,
    save_channels,
    save_png,
)

__all__ = [
    "ChannelPlanes",
    "DashboardCanvas",
    "DashboardColors",
    "FontManager",
    "convert_image_to_channels",
    "get_rendering_colors",
    "load_channels",
    "save_channels",
    "save_png",
]
