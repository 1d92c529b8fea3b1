"""
Data feed models using Pydantic for validation.

Feeds are small JSON documents fetched by other tools and dropped into the
data directory. Each model validates one file; ``DashboardData`` bundles
them together with the date being rendered and is what every widget
receives.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class WeatherReading(BaseModel):
    """Current conditions.

    Attributes:
        temperature: Current temperature in the feed's unit
        condition: Short condition keyword such as ``"sunny"`` or ``"rain"``
        high: Today's forecast high
        low: Today's forecast low
    """

    temperature: float
    condition: str = Field(default="unknown", max_length=40)
    high: Optional[float] = None
    low: Optional[float] = None

    @field_validator("condition")
    @classmethod
    def normalize_condition(cls, v: str) -> str:
        return v.strip().lower() or "unknown"


class ForecastDay(BaseModel):
    """One day of the multi-day forecast."""

    day: str = Field(..., min_length=1, max_length=12, description="Short day label, e.g. 'Tue'")
    high: float
    low: float
    condition: str = Field(default="unknown", max_length=40)

    @field_validator("condition")
    @classmethod
    def normalize_condition(cls, v: str) -> str:
        return v.strip().lower() or "unknown"


class WeatherFeed(BaseModel):
    """Contents of ``weather.json``."""

    location: str = Field(default="", max_length=60)
    unit: Literal["C", "F"] = "C"
    current: WeatherReading
    forecast: list[ForecastDay] = Field(default_factory=list)


class Person(BaseModel):
    """A family member and their allowance balance."""

    name: str = Field(..., min_length=1, max_length=40)
    allowance: float = Field(default=0.0, description="Current balance")
    currency: str = Field(default="$", max_length=4)

    def formatted_allowance(self) -> str:
        """Balance with currency symbol, e.g. ``$12.50`` or ``-$3.00``."""
        sign = "-" if self.allowance < 0 else ""
        return f"{sign}{self.currency}{abs(self.allowance):.2f}"


class PeopleFeed(BaseModel):
    """Contents of ``people.json``."""

    people: list[Person] = Field(default_factory=list)


class SignificantDate(BaseModel):
    """A birthday, anniversary or one-off event to count down to.

    Attributes:
        name: Display name
        date: The date itself; for recurring entries only month/day matter
        recurring: Whether the date repeats every year
    """

    name: str = Field(..., min_length=1, max_length=60)
    date: datetime.date
    recurring: bool = True

    def next_occurrence(self, today: datetime.date) -> Optional[datetime.date]:
        """Next date on or after ``today``, or None for a past one-off date."""
        if not self.recurring:
            return self.date if self.date >= today else None

        for year in (today.year, today.year + 1, today.year + 2):
            candidate = _anniversary(self.date, year)
            if candidate >= today:
                return candidate
        return None

    def days_until(self, today: datetime.date) -> Optional[int]:
        occurrence = self.next_occurrence(today)
        if occurrence is None:
            return None
        return (occurrence - today).days


def _anniversary(original: datetime.date, year: int) -> datetime.date:
    """Same month/day in ``year``; Feb 29 falls back to Feb 28."""
    try:
        return original.replace(year=year)
    except ValueError:
        return original.replace(year=year, day=28)


class SignificantDatesFeed(BaseModel):
    """Contents of ``dates.json``."""

    dates: list[SignificantDate] = Field(default_factory=list)

    def upcoming(
        self, today: datetime.date, limit: Optional[int] = None
    ) -> list[tuple[int, SignificantDate]]:
        """Upcoming dates as ``(days_until, entry)`` sorted soonest first.

        Ties keep the order of the feed. Past one-off dates are skipped.
        """
        pending = []
        for entry in self.dates:
            days = entry.days_until(today)
            if days is not None:
                pending.append((days, entry))

        pending.sort(key=lambda item: item[0])
        if limit is not None:
            pending = pending[:limit]
        return pending


class TodoItem(BaseModel):
    """A single to-do entry."""

    text: str = Field(..., min_length=1, max_length=200)
    done: bool = False
    owner: Optional[str] = Field(default=None, max_length=40)


class TodoFeed(BaseModel):
    """Contents of ``todo.json``."""

    title: str = Field(default="To do", max_length=40)
    items: list[TodoItem] = Field(default_factory=list)

    def open_items(self) -> list[TodoItem]:
        return [item for item in self.items if not item.done]


class VerseFeed(BaseModel):
    """Contents of ``verse.json``: a verse or quote of the day."""

    text: str = Field(..., min_length=1, max_length=1000)
    reference: str = Field(default="", max_length=80)

    @field_validator("text")
    @classmethod
    def collapse_whitespace(cls, v: str) -> str:
        return " ".join(v.split())


class BatteryStatus(BaseModel):
    """Contents of ``battery.json``: the display device's battery."""

    percent: int = Field(..., ge=0, le=100)
    charging: bool = False


class DashboardData(BaseModel):
    """Everything a widget may draw from.

    Every feed is optional; widgets draw a placeholder when theirs is
    missing.
    """

    today: datetime.date = Field(default_factory=datetime.date.today)
    title: str = Field(default="Family Board", max_length=60)
    weather: Optional[WeatherFeed] = None
    people: Optional[PeopleFeed] = None
    dates: Optional[SignificantDatesFeed] = None
    todo: Optional[TodoFeed] = None
    verse: Optional[VerseFeed] = None
    battery: Optional[BatteryStatus] = None
