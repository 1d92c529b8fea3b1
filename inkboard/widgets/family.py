"""
List widgets for the household: to-do items, allowance balances and
countdowns to significant dates.

Each widget draws a titled list and shows as many rows as fit its region.
When rows are cut off, the last visible row says how many are hidden.
"""

from typing import Optional

from inkboard.data.models import DashboardData
from inkboard.layout.region import Region
from inkboard.render.canvas import DashboardCanvas
from inkboard.render.fonts import Font

from .common import PADDING, body_font, draw_row, draw_title, rows

BULLET = "•"


def _visible(entries: list, capacity: int) -> tuple[list, int]:
    """Entries that fit ``capacity`` rows, reserving one row for the overflow note."""
    if capacity <= 0:
        return [], 0
    if len(entries) <= capacity:
        return entries, 0
    shown = max(0, capacity - 1)
    return entries[:shown], len(entries) - shown


def _draw_overflow(canvas: DashboardCanvas, slot: Region, hidden: int, font: Font) -> None:
    canvas.draw_text(slot, f"+{hidden} more", font, fill=canvas.color("text_muted"))


def format_days_until(days: int) -> str:
    if days == 0:
        return "today"
    if days == 1:
        return "tomorrow"
    return f"in {days} days"


def paint_todo(canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]) -> None:
    todo = data.todo if data else None
    if todo is None:
        canvas.draw_placeholder(region, "No to-do list")
        return

    body = draw_title(canvas, region.inset(PADDING), todo.title)
    font = body_font(canvas, region)
    slots = rows(body, canvas.line_height(font))
    open_items = todo.open_items()

    if not open_items:
        if slots:
            canvas.draw_text(slots[0], "All done", font, fill=canvas.color("text_muted"))
        return

    shown, hidden = _visible(open_items, len(slots))
    for slot, item in zip(slots, shown):
        owner = f" ({item.owner})" if item.owner else ""
        canvas.draw_text(slot, f"{BULLET} {item.text}{owner}", font)
    if hidden:
        _draw_overflow(canvas, slots[len(shown)], hidden, font)


def paint_allowance(
    canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]
) -> None:
    people = data.people if data else None
    if people is None:
        canvas.draw_placeholder(region, "No allowance data")
        return

    body = draw_title(canvas, region.inset(PADDING), "Allowance")
    font = body_font(canvas, region)
    slots = rows(body, canvas.line_height(font))

    shown, hidden = _visible(people.people, len(slots))
    for slot, person in zip(slots, shown):
        fill = canvas.color("accent") if person.allowance < 0 else ""
        draw_row(canvas, slot, person.name, person.formatted_allowance(), font, right_fill=fill)
    if hidden:
        _draw_overflow(canvas, slots[len(shown)], hidden, font)


def paint_countdown(
    canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]
) -> None:
    dates = data.dates if data else None
    if dates is None:
        canvas.draw_placeholder(region, "No dates")
        return

    body = draw_title(canvas, region.inset(PADDING), "Coming up")
    font = body_font(canvas, region)
    slots = rows(body, canvas.line_height(font))
    upcoming = dates.upcoming(data.today, limit=len(slots))

    if not upcoming:
        if slots:
            canvas.draw_text(slots[0], "Nothing planned", font, fill=canvas.color("text_muted"))
        return

    for slot, (days, entry) in zip(slots, upcoming):
        fill = canvas.color("accent") if days <= 1 else ""
        draw_row(canvas, slot, entry.name, format_days_until(days), font, right_fill=fill)
