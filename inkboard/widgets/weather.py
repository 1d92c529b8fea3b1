"""Current weather and short forecast."""

from typing import Optional

from inkboard.data.models import DashboardData, ForecastDay, WeatherFeed
from inkboard.layout.region import Region
from inkboard.render.canvas import DashboardCanvas

from .common import PADDING, body_font, clamp

MAX_FORECAST_DAYS = 5


def format_temperature(value: Optional[float], unit: str = "") -> str:
    if value is None:
        return "--"
    return f"{round(value)}°{unit}"


def describe_condition(condition: str) -> str:
    return condition.replace("_", " ").replace("-", " ").capitalize()


def paint_weather(canvas: DashboardCanvas, region: Region, data: Optional[DashboardData]) -> None:
    """Current temperature and condition on top, forecast columns below when there is room."""
    weather = data.weather if data else None
    if weather is None:
        canvas.draw_placeholder(region, "No weather data")
        return

    inner = region.inset(PADDING)
    show_forecast = bool(weather.forecast) and inner.height >= 120
    current_height = inner.height // 2 if show_forecast else inner.height
    _paint_current(canvas, Region(inner.x, inner.y, inner.width, current_height), weather)

    if show_forecast:
        forecast_area = Region(
            inner.x,
            inner.y + current_height + PADDING,
            inner.width,
            max(0, inner.height - current_height - PADDING),
        )
        _paint_forecast(canvas, forecast_area, weather.forecast[:MAX_FORECAST_DAYS])


def _paint_current(canvas: DashboardCanvas, area: Region, weather: WeatherFeed) -> None:
    current = weather.current
    temperature = format_temperature(current.temperature, weather.unit)

    left = Region(area.x, area.y, area.width // 2, area.height)
    right = Region(
        area.x + left.width + PADDING,
        area.y,
        max(0, area.width - left.width - PADDING),
        area.height,
    )

    canvas.draw_text(
        left,
        temperature,
        canvas.fit_font(temperature, left.width, left.height, bold=True, max_size=120),
        valign="middle",
    )

    details = [describe_condition(current.condition)]
    if current.high is not None or current.low is not None:
        details.append(f"H {format_temperature(current.high)}  L {format_temperature(current.low)}")
    if weather.location:
        details.append(weather.location)

    font = canvas.fonts.get(clamp(right.height // (len(details) + 1), 10, 28))
    block_height = canvas.line_height(font) * len(details)
    top = right.y + max(0, (right.height - block_height) // 2)
    text_area = Region(right.x, top, right.width, right.y + right.height - top)
    canvas.draw_lines(text_area, details, font)


def _paint_forecast(canvas: DashboardCanvas, area: Region, days: list[ForecastDay]) -> None:
    column_width = area.width // len(days)
    if column_width <= 0:
        return

    font = body_font(canvas, area)
    for index, day in enumerate(days):
        column = Region(area.x + index * column_width, area.y, column_width, area.height)
        lines = [
            day.day,
            f"{format_temperature(day.high)} / {format_temperature(day.low)}",
            describe_condition(day.condition),
        ]
        canvas.draw_lines(column, lines, font, align="center")
