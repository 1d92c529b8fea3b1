"""Configuration management for InkBoard."""

from .settings import (
    InkBoardSettings,
    LoggingSettings,
    RenderSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "InkBoardSettings",
    "LoggingSettings",
    "RenderSettings",
    "get_settings",
    "reset_settings",
]
