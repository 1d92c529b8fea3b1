"""Data feed models and loading."""

from .loader import FEED_FILES, load_dashboard_data, load_feed
from .models import (
    BatteryStatus,
    DashboardData,
    ForecastDay,
    PeopleFeed,
    Person,
    SignificantDate,
    SignificantDatesFeed,
    TodoFeed,
    TodoItem,
    VerseFeed,
    WeatherFeed,
    WeatherReading,
)

__all__ = [
    "FEED_FILES",
    "BatteryStatus",
    "DashboardData",
    "ForecastDay",
    "PeopleFeed",
    "Person",
    "SignificantDate",
    "SignificantDatesFeed",
    "TodoFeed",
    "TodoItem",
    "VerseFeed",
    "WeatherFeed",
    "WeatherReading",
    "load_dashboard_data",
    "load_feed",
]
