"""Load pre-fetched data feeds from a directory of JSON files."""

import datetime
import json
import logging
from pathlib import Path
from typing import Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from inkboard.utils.exceptions import DataFeedError

from .models import (
    BatteryStatus,
    DashboardData,
    PeopleFeed,
    SignificantDatesFeed,
    TodoFeed,
    VerseFeed,
    WeatherFeed,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# DashboardData field -> (file name, model)
FEED_FILES: dict[str, tuple[str, type[BaseModel]]] = {
    "weather": ("weather.json", WeatherFeed),
    "people": ("people.json", PeopleFeed),
    "dates": ("dates.json", SignificantDatesFeed),
    "todo": ("todo.json", TodoFeed),
    "verse": ("verse.json", VerseFeed),
    "battery": ("battery.json", BatteryStatus),
}


def load_feed(path: Union[str, Path], model: type[ModelT]) -> Optional[ModelT]:
    """Load and validate a single feed file.

    Args:
        path: Path to the JSON file
        model: Pydantic model the file must match

    Returns:
        Validated model instance, or None if the file does not exist

    Raises:
        DataFeedError: If the file is unreadable, not JSON or fails validation
    """
    feed_path = Path(path)
    if not feed_path.exists():
        logger.info("Feed %s not found, widgets will show placeholders", feed_path.name)
        return None

    try:
        with feed_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DataFeedError(
            f"Invalid JSON in {feed_path.name}: {e}",
            feed_name=model.__name__,
            file_path=str(feed_path),
        ) from e
    except OSError as e:
        raise DataFeedError(
            f"Cannot read {feed_path.name}: {e}",
            feed_name=model.__name__,
            file_path=str(feed_path),
        ) from e

    try:
        feed = model.model_validate(raw)
    except ValidationError as e:
        raise DataFeedError(
            f"Feed {feed_path.name} failed validation",
            feed_name=model.__name__,
            file_path=str(feed_path),
            validation_errors=[
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ],
        ) from e

    logger.debug("Loaded feed %s", feed_path.name)
    return feed


def load_dashboard_data(
    data_dir: Union[str, Path],
    today: Optional[datetime.date] = None,
    title: Optional[str] = None,
) -> DashboardData:
    """Load every known feed from ``data_dir``.

    Missing files leave the corresponding feed empty; broken files raise.

    Args:
        data_dir: Directory holding the feed files
        today: Date to render for (defaults to the current date)
        title: Dashboard title shown by the header widget

    Returns:
        DashboardData with all feeds found

    Raises:
        DataFeedError: If any present feed is invalid
    """
    directory = Path(data_dir)
    if not directory.is_dir():
        logger.warning("Data directory not found: %s", directory)

    feeds = {
        field: load_feed(directory / file_name, model)
        for field, (file_name, model) in FEED_FILES.items()
    }
    loaded = sorted(field for field, feed in feeds.items() if feed is not None)
    logger.info("Loaded %d/%d feeds from %s: %s", len(loaded), len(feeds), directory, loaded)

    extra: dict[str, object] = {}
    if today is not None:
        extra["today"] = today
    if title is not None:
        extra["title"] = title

    return DashboardData(**feeds, **extra)
