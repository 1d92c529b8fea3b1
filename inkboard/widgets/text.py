"""Header, date and verse widgets."""

from typing import Optional

from inkboard.data.models import DashboardData
from inkboard.layout.region import Region
from inkboard.render.canvas import DashboardCanvas

from .common import PADDING, RULE_WIDTH, clamp


def paint_header(canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]) -> None:
    """Dashboard title on the left, today's date on the right, accent rule below."""
    if data is None:
        canvas.draw_placeholder(region, "Header")
        return

    inner = region.inset(PADDING)
    today = data.today
    date_text = f"{today:%A} {today.day} {today:%B}"
    title_font = canvas.fit_font(data.title, inner.width, inner.height - RULE_WIDTH, bold=True)
    date_font = canvas.fonts.get(max(8, int(getattr(title_font, "size", 16) * 0.6)))

    date_width = canvas.text_size(date_text, date_font)[0]
    title_width = inner.width - date_width - 2 * PADDING
    if title_width < inner.width // 3:
        title_width = inner.width
    else:
        canvas.draw_text(
            inner,
            date_text,
            date_font,
            fill=canvas.color("text_secondary"),
            align="right",
            valign="middle",
        )

    canvas.draw_text(
        Region(inner.x, inner.y, title_width, inner.height),
        data.title,
        title_font,
        valign="middle",
    )

    rule_y = region.y + region.height - RULE_WIDTH
    if rule_y > inner.y:
        canvas.draw.rectangle(
            (region.x, rule_y, region.x + region.width - 1, region.y + region.height - 1),
            fill=canvas.color("accent"),
        )


def paint_date(canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]) -> None:
    """Calendar-page style date: weekday, large day number, month and year."""
    if data is None:
        canvas.draw_placeholder(region, "Date")
        return

    inner = region.inset(PADDING)
    band = inner.height // 4
    top = Region(inner.x, inner.y, inner.width, band)
    middle = Region(inner.x, inner.y + band, inner.width, inner.height - 2 * band)
    bottom = Region(inner.x, inner.y + inner.height - band, inner.width, band)

    weekday = f"{data.today:%A}"
    day = str(data.today.day)
    month = f"{data.today:%B %Y}"

    canvas.draw_text(
        top,
        weekday,
        canvas.fit_font(weekday, top.width, top.height, max_size=32),
        align="center",
        valign="middle",
    )
    canvas.draw_text(
        middle,
        day,
        canvas.fit_font(day, middle.width, middle.height, bold=True, max_size=160),
        fill=canvas.color("accent"),
        align="center",
        valign="middle",
    )
    canvas.draw_text(
        bottom,
        month,
        canvas.fit_font(month, bottom.width, bottom.height, max_size=28),
        fill=canvas.color("text_secondary"),
        align="center",
        valign="middle",
    )


def paint_verse(canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]) -> None:
    """Verse or quote of the day, wrapped with the largest font that fits."""
    verse = data.verse if data else None
    if verse is None:
        canvas.draw_placeholder(region, "No verse today")
        return

    inner = region.inset(PADDING)
    reference_font = canvas.fonts.get(clamp(inner.height // 8, 10, 20))
    reference_height = canvas.line_height(reference_font) if verse.reference else 0
    text_area = Region(inner.x, inner.y, inner.width, max(0, inner.height - reference_height))

    size = clamp(text_area.height // 3, 10, 36)
    while True:
        font = canvas.fonts.get(size)
        lines = canvas.wrap_text(verse.text, font, text_area.width)
        if len(lines) * canvas.line_height(font) <= text_area.height or size <= 10:
            break
        size -= 2

    canvas.draw_lines(text_area, lines, font, align="center")

    if verse.reference:
        reference_area = Region(
            inner.x, inner.y + inner.height - reference_height, inner.width, reference_height
        )
        canvas.draw_text(
            reference_area,
            verse.reference,
            reference_font,
            fill=canvas.color("text_secondary"),
            align="right",
        )
