"""Drawing helpers shared by the widget painters."""

from inkboard.layout.region import Region
from inkboard.render.canvas import DashboardCanvas
from inkboard.render.fonts import Font

PADDING = 6
RULE_WIDTH = 2


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def title_font(canvas: DashboardCanvas, region: Region) -> Font:
    return canvas.fonts.get(clamp(region.height // 7, 12, 28), bold=True)


def body_font(canvas: DashboardCanvas, region: Region) -> Font:
    return canvas.fonts.get(clamp(region.height // 9, 10, 22))


def draw_title(canvas: DashboardCanvas, region: Region, title: str) -> Region:
    """Draw a bold section title with a rule under it.

    Returns:
        The part of ``region`` left below the title
    """
    font = title_font(canvas, region)
    used = canvas.draw_text(region, title, font)
    if not used:
        return region

    rule_y = region.y + used + PADDING // 2
    if rule_y + RULE_WIDTH <= region.y + region.height:
        canvas.draw.rectangle(
            (region.x, rule_y, region.x + region.width - 1, rule_y + RULE_WIDTH - 1),
            fill=canvas.color("rule"),
        )

    top = rule_y + RULE_WIDTH + PADDING
    return Region(region.x, top, region.width, max(0, region.y + region.height - top))


def draw_row(
    canvas: DashboardCanvas,
    row: Region,
    left: str,
    right: str,
    font: Font,
    right_fill: str = "",
) -> None:
    """Draw ``left`` and ``right`` on one line, giving the right text priority."""
    right_width = canvas.text_size(right, font)[0]
    if right_width > row.width:
        right_width = 0
    else:
        canvas.draw_text(row, right, font, fill=right_fill or None, align="right")

    gap = PADDING if right_width else 0
    left_region = Region(row.x, row.y, max(0, row.width - right_width - gap), row.height)
    canvas.draw_text(left_region, left, font)


def rows(region: Region, step: int) -> list[Region]:
    """Split ``region`` into as many full rows of height ``step`` as fit."""
    if step <= 0:
        return []
    count = region.height // step
    return [Region(region.x, region.y + i * step, region.width, step) for i in range(count)]
