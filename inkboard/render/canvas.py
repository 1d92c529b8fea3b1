"""Drawing surface handed to widget painters."""

from typing import Literal, Optional

from PIL import Image, ImageDraw

from inkboard.layout.region import Region

from .colors import get_rendering_colors
from .fonts import Font, FontManager

HorizontalAlign = Literal["left", "center", "right"]
VerticalAlign = Literal["top", "middle", "bottom"]

ELLIPSIS = "…"
OUTLINE_MARGIN = 4
OUTLINE_WIDTH = 2
OUTLINE_RADIUS = 5


class DashboardCanvas:
    """A Pillow image plus the fonts, colors and text helpers widgets share."""

    def __init__(
        self,
        image: Image.Image,
        fonts: FontManager,
        colors: Optional[dict[str, str]] = None,
    ) -> None:
        """Initialize the canvas.

        Args:
            image: Image to draw on
            fonts: Font manager used for every text call
            colors: Role -> color mapping (defaults to the tri-color palette)
        """
        self.image = image
        self.draw = ImageDraw.Draw(image)
        self.fonts = fonts
        self.colors = colors or get_rendering_colors()

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        fonts: FontManager,
        colors: Optional[dict[str, str]] = None,
    ) -> "DashboardCanvas":
        """Create a blank RGB canvas filled with the background color."""
        palette = colors or get_rendering_colors()
        image = Image.new("RGB", (max(0, width), max(0, height)), palette["background"])
        return cls(image, fonts, palette)

    @property
    def bounds(self) -> Region:
        return Region(0, 0, self.image.width, self.image.height)

    def tile(self, region: Region) -> "DashboardCanvas":
        """Blank canvas the size of ``region`` sharing fonts and colors."""
        return DashboardCanvas.create(region.width, region.height, self.fonts, self.colors)

    def paste(self, tile: "DashboardCanvas", region: Region) -> None:
        """Copy a tile back at ``region``; anything past the canvas edge is cut off."""
        self.image.paste(tile.image, (region.x, region.y))

    def color(self, role: str) -> str:
        return self.colors.get(role, self.colors["text_primary"])

    def text_size(self, text: str, font: Font) -> tuple[int, int]:
        """Width and height of ``text`` rendered with ``font``."""
        if not text:
            return (0, 0)
        left, top, right, bottom = self.draw.textbbox((0, 0), text, font=font)
        return (int(right - left), int(bottom - top))

    def fit_font(
        self,
        text: str,
        max_width: int,
        max_height: int,
        bold: bool = False,
        max_size: int = 96,
        min_size: int = 8,
    ) -> Font:
        """Largest font (up to ``max_size``) whose rendering of ``text`` fits the box."""
        size = max(min_size, min(max_size, max_height))
        while size > min_size:
            font = self.fonts.get(size, bold=bold)
            width, height = self.text_size(text, font)
            if width <= max_width and height <= max_height:
                return font
            size -= max(1, size // 10)
        return self.fonts.get(min_size, bold=bold)

    def ellipsize(self, text: str, font: Font, max_width: int) -> str:
        """Trim ``text`` with an ellipsis until it fits ``max_width``."""
        if max_width <= 0:
            return ""
        if self.text_size(text, font)[0] <= max_width:
            return text

        trimmed = text
        while trimmed:
            trimmed = trimmed[:-1].rstrip()
            candidate = trimmed + ELLIPSIS
            if self.text_size(candidate, font)[0] <= max_width:
                return candidate
        return ""

    def wrap_text(self, text: str, font: Font, max_width: int) -> list[str]:
        """Wrap text to fit within maximum width.

        Words longer than the width are kept on their own line; callers
        ellipsize when drawing.
        """
        words = text.split()
        lines: list[str] = []
        current_line = ""

        for word in words:
            test_line = f"{current_line} {word}" if current_line else word
            if self.text_size(test_line, font)[0] <= max_width:
                current_line = test_line
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word

        if current_line:
            lines.append(current_line)

        return lines

    def line_height(self, font: Font) -> int:
        """Height of one text line including a small gap."""
        height = self.text_size("Ag", font)[1]
        return height + max(2, height // 4)

    def draw_text(
        self,
        region: Region,
        text: str,
        font: Font,
        fill: Optional[str] = None,
        align: HorizontalAlign = "left",
        valign: VerticalAlign = "top",
    ) -> int:
        """Draw a single line of text inside ``region``.

        The text is ellipsized to the region width. Nothing is drawn when
        the line is taller than the region.

        Returns:
            Height used, 0 when nothing was drawn
        """
        text = self.ellipsize(text, font, region.width)
        if not text:
            return 0

        left, top, right, bottom = self.draw.textbbox((0, 0), text, font=font)
        width, height = int(right - left), int(bottom - top)
        if height > region.height:
            return 0

        if align == "center":
            x = region.x + (region.width - width) // 2
        elif align == "right":
            x = region.x + region.width - width
        else:
            x = region.x

        if valign == "middle":
            y = region.y + (region.height - height) // 2
        elif valign == "bottom":
            y = region.y + region.height - height
        else:
            y = region.y

        # textbbox offsets are relative to the anchor, subtract them to land exactly at (x, y)
        self.draw.text(
            (x - left, y - top), text, font=font, fill=fill or self.color("text_primary")
        )
        return height

    def draw_lines(
        self,
        region: Region,
        lines: list[str],
        font: Font,
        fill: Optional[str] = None,
        align: HorizontalAlign = "left",
    ) -> int:
        """Draw lines top-down, stopping at the first one that no longer fits.

        Returns:
            Number of lines drawn
        """
        step = self.line_height(font)
        y = region.y
        drawn = 0
        for line in lines:
            if y + step > region.y + region.height and drawn > 0:
                break
            row = Region(region.x, y, region.width, min(step, region.y + region.height - y))
            if not self.draw_text(row, line, font, fill=fill, align=align):
                break
            y += step
            drawn += 1
        return drawn

    def draw_outline(self, region: Region) -> None:
        """Rounded debug frame inset inside ``region``."""
        frame = region.inset(OUTLINE_MARGIN)
        if frame.width < 2 * OUTLINE_RADIUS or frame.height < 2 * OUTLINE_RADIUS:
            return
        self.draw.rounded_rectangle(
            frame.to_box(),
            radius=OUTLINE_RADIUS,
            outline=self.color("outline"),
            width=OUTLINE_WIDTH,
        )

    def draw_placeholder(self, region: Region, label: str) -> None:
        """Muted label shown when a widget has no data."""
        font = self.fit_font(label, region.width - 8, min(24, region.height - 4))
        self.draw_text(
            region.inset(4),
            label,
            font,
            fill=self.color("text_muted"),
            align="center",
            valign="middle",
        )
