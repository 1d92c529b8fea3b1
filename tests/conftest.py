"""Shared test fixtures for InkBoard tests."""

import datetime
import json
import logging
import os
from pathlib import Path
from typing import Any

import pytest

from inkboard.config import settings as settings_module
from inkboard.data.models import (
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
from inkboard.layout.nodes import Container, Leaf, SplitDirection, WidgetKind
from inkboard.layout.size import Pixels, Units
from inkboard.render.canvas import DashboardCanvas
from inkboard.render.fonts import FontManager

# Disable logging during tests for performance
logging.getLogger("inkboard").setLevel(logging.CRITICAL)

TODAY = datetime.date(2026, 10, 17)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Keep user config files and INKBOARD_* variables out of every test."""
    monkeypatch.setattr(settings_module, "default_config_paths", lambda: [])
    for key in list(os.environ):
        if key.upper().startswith("INKBOARD_"):
            monkeypatch.delenv(key, raising=False)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture
def today() -> datetime.date:
    return TODAY


@pytest.fixture
def sample_layout() -> Container:
    """Header over a two-column body."""
    return Container(
        size=Units(1),
        split=SplitDirection.VERTICAL,
        entries=(
            Leaf(kind=WidgetKind.HEADER, size=Pixels(80)),
            Container(
                size=Units(1),
                split=SplitDirection.HORIZONTAL,
                entries=(
                    Leaf(kind=WidgetKind.TODO, size=Units(3)),
                    Leaf(kind=WidgetKind.VERTICAL_RULE, size=Pixels(10)),
                    Leaf(kind=WidgetKind.COUNTDOWN, size=Units(1)),
                ),
            ),
        ),
    )


@pytest.fixture
def sample_layout_dict() -> dict[str, Any]:
    return {
        "type": "container",
        "size": "1u",
        "split": "vertical",
        "entries": [
            {"type": "header", "size": "80px"},
            {
                "type": "container",
                "size": "1u",
                "split": "horizontal",
                "entries": [
                    {"type": "todo", "size": "3u"},
                    {"type": "vertical-rule", "size": "10px"},
                    {"type": "countdown", "size": "1u"},
                ],
            },
        ],
    }


@pytest.fixture
def layout_file(tmp_path: Path, sample_layout_dict: dict[str, Any]) -> Path:
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(sample_layout_dict), encoding="utf-8")
    return path


@pytest.fixture
def dashboard_data() -> DashboardData:
    """Dashboard data with every feed present."""
    return DashboardData(
        today=TODAY,
        title="Test Board",
        weather=WeatherFeed(
            location="Home",
            unit="C",
            current=WeatherReading(temperature=14.6, condition="Cloudy", high=17, low=8),
            forecast=[
                ForecastDay(day="Sun", high=16, low=9, condition="rain"),
                ForecastDay(day="Mon", high=15, low=7, condition="sunny"),
            ],
        ),
        people=PeopleFeed(
            people=[
                Person(name="Ada", allowance=12.5),
                Person(name="Ben", allowance=-2),
            ]
        ),
        dates=SignificantDatesFeed(
            dates=[
                SignificantDate(name="Ada's birthday", date=datetime.date(2015, 11, 2)),
                SignificantDate(name="Anniversary", date=datetime.date(2009, 10, 18)),
            ]
        ),
        todo=TodoFeed(
            items=[
                TodoItem(text="Book dentist", owner="Ben"),
                TodoItem(text="Water plants", done=True),
                TodoItem(text="Return library books"),
            ]
        ),
        verse=VerseFeed(text="Be still, and know that I am God.", reference="Psalm 46:10"),
        battery=BatteryStatus(percent=76),
    )


@pytest.fixture
def data_dir(tmp_path: Path, dashboard_data: DashboardData) -> Path:
    """Directory holding every feed file written from ``dashboard_data``."""
    directory = tmp_path / "data"
    directory.mkdir()
    for field, file_name in (
        ("weather", "weather.json"),
        ("people", "people.json"),
        ("dates", "dates.json"),
        ("todo", "todo.json"),
        ("verse", "verse.json"),
        ("battery", "battery.json"),
    ):
        feed = getattr(dashboard_data, field)
        (directory / file_name).write_text(feed.model_dump_json(), encoding="utf-8")
    return directory


@pytest.fixture(scope="session")
def font_manager() -> FontManager:
    return FontManager()


@pytest.fixture
def canvas(font_manager: FontManager) -> DashboardCanvas:
    return DashboardCanvas.create(400, 300, font_manager)
