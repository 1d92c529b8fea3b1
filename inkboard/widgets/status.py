"""Battery gauge and divider rules."""

from typing import Optional

from inkboard.data.models import DashboardData
from inkboard.layout.region import Region
from inkboard.render.canvas import DashboardCanvas

from .common import PADDING, RULE_WIDTH, clamp

LOW_BATTERY_PERCENT = 20
TERMINAL_WIDTH = 4


def paint_battery(canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]) -> None:
    """Battery outline filled to the charge level, with the percentage beside it."""
    battery = data.battery if data else None
    if battery is None:
        canvas.draw_placeholder(region, "Battery ?")
        return

    inner = region.inset(PADDING)
    label = f"{battery.percent}%" + (" +" if battery.charging else "")
    font = canvas.fonts.get(clamp(inner.height * 2 // 3, 8, 24))
    label_width = canvas.text_size(label, font)[0]

    icon_height = min(inner.height, 24)
    icon_width = min(icon_height * 2, inner.width - label_width - PADDING - TERMINAL_WIDTH)
    if icon_width < 3 * RULE_WIDTH + 1 or icon_height < 3 * RULE_WIDTH + 1:
        canvas.draw_text(inner, label, font, align="center", valign="middle")
        return

    top = inner.y + (inner.height - icon_height) // 2
    body = (inner.x, top, inner.x + icon_width - 1, top + icon_height - 1)
    canvas.draw.rectangle(body, outline=canvas.color("text_primary"), width=RULE_WIDTH)

    terminal_top = top + icon_height // 3
    canvas.draw.rectangle(
        (
            inner.x + icon_width,
            terminal_top,
            inner.x + icon_width + TERMINAL_WIDTH - 1,
            top + icon_height - icon_height // 3 - 1,
        ),
        fill=canvas.color("text_primary"),
    )

    level_width = (icon_width - 2 * (RULE_WIDTH + 1)) * battery.percent // 100
    if level_width > 0:
        low = battery.percent <= LOW_BATTERY_PERCENT and not battery.charging
        canvas.draw.rectangle(
            (
                inner.x + RULE_WIDTH + 1,
                top + RULE_WIDTH + 1,
                inner.x + RULE_WIDTH + level_width,
                top + icon_height - RULE_WIDTH - 2,
            ),
            fill=canvas.color("accent" if low else "text_primary"),
        )

    label_x = inner.x + icon_width + TERMINAL_WIDTH + PADDING
    canvas.draw_text(
        Region(label_x, inner.y, max(0, inner.x + inner.width - label_x), inner.height),
        label,
        font,
        valign="middle",
    )


def paint_horizontal_rule(
    canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]
) -> None:
    if region.is_empty():
        return
    thickness = min(RULE_WIDTH, region.height)
    y = region.y + (region.height - thickness) // 2
    canvas.draw.rectangle(
        (region.x, y, region.x + region.width - 1, y + thickness - 1), fill=canvas.color("rule")
    )


def paint_vertical_rule(
    canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]
) -> None:
    if region.is_empty():
        return
    thickness = min(RULE_WIDTH, region.width)
    x = region.x + (region.width - thickness) // 2
    canvas.draw.rectangle(
        (x, region.y, x + thickness - 1, region.y + region.height - 1), fill=canvas.color("rule")
    )
