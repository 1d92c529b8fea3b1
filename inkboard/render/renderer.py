"""Dashboard renderer: lays out a layout tree and paints every widget onto one image."""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from inkboard.config.settings import RenderSettings
from inkboard.data.models import DashboardData
from inkboard.layout.dispatch import LayoutDispatcher, LoggerLike, Placement
from inkboard.layout.nodes import LayoutNode
from inkboard.layout.region import Region
from inkboard.widgets.painter import WidgetPainter

from .canvas import DashboardCanvas
from .colors import get_rendering_colors
from .fonts import FontManager
from .output import save_channels, save_png


class DashboardRenderer:
    """Renders dashboards at a fixed canvas size.

    The renderer owns the font cache, so one instance can render many
    dashboards cheaply.
    """

    def __init__(
        self,
        settings: Optional[RenderSettings] = None,
        logger: Optional[LoggerLike] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Canvas and output settings (defaults to 1200x825, red enabled)
            logger: Logger handed to the layout walk and the widget painter
        """
        self.settings = settings or RenderSettings()
        self.logger = logger or logging.getLogger(__name__)
        font_dir = Path(self.settings.font_dir) if self.settings.font_dir else None
        self.fonts = FontManager(font_dir)
        self.colors = get_rendering_colors(use_red=self.settings.use_red)
        self.last_placements: list[Placement] = []

    @property
    def bounds(self) -> Region:
        return Region(0, 0, self.settings.width, self.settings.height)

    def render(self, layout: LayoutNode, data: Optional[DashboardData] = None) -> Image.Image:
        """Render ``layout`` filled with ``data``.

        Args:
            layout: Root of the layout tree; must be a container
            data: Feeds for the widgets; widgets draw placeholders when None

        Returns:
            The rendered RGB image

        Raises:
            StructuralError: If the root is not a container
        """
        canvas = DashboardCanvas.create(
            self.settings.width, self.settings.height, self.fonts, self.colors
        )
        painter = WidgetPainter(
            canvas, draw_outlines=self.settings.draw_outlines, logger=self.logger
        )
        dispatcher = LayoutDispatcher(painter, logger=self.logger)

        self.last_placements = dispatcher.dispatch(layout, self.bounds, data)
        self.logger.info(
            "Rendered %d widgets on %dx%d canvas",
            len(painter.painted),
            self.settings.width,
            self.settings.height,
        )
        return canvas.image

    def render_to_files(
        self,
        layout: LayoutNode,
        data: Optional[DashboardData],
        output_file: Path,
        channels_file: Optional[Path] = None,
    ) -> Image.Image:
        """Render and write the PNG preview, plus the channel file when requested."""
        image = self.render(layout, data)
        save_png(image, output_file)
        if channels_file is not None:
            save_channels(
                image,
                channels_file,
                threshold=self.settings.threshold,
                red_threshold=self.settings.channel_red_threshold(),
            )
        return image
