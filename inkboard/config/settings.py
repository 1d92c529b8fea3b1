"""Configuration settings for InkBoard.

Values come from, in increasing priority: defaults, ``INKBOARD_*``
environment variables (nested fields use ``__``, e.g.
``INKBOARD_RENDER__WIDTH``), a YAML config file, and explicit keyword
arguments (the CLI passes its options this way).
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from inkboard.utils.exceptions import ConfigError
from inkboard.utils.logging import get_log_level

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 825


def default_config_paths() -> list[Path]:
    """Config files looked for when none is given explicitly, first match wins."""
    return [
        Path.cwd() / "config" / "config.yaml",
        Path.home() / ".config" / "inkboard" / "config.yaml",
    ]


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    model_config = ConfigDict(validate_assignment=True)

    level: str = Field(
        default="INFO", description="Log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL"
    )
    file: Optional[str] = Field(default=None, description="Log file path (rotated at 5MB)")
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )
    third_party_level: str = Field(
        default="WARNING", description="Log level for third-party libraries"
    )

    @field_validator("level", "third_party_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        get_log_level(v)
        return v.upper()


class RenderSettings(BaseModel):
    """Canvas and output settings."""

    model_config = ConfigDict(validate_assignment=True)

    width: int = Field(default=DEFAULT_WIDTH, ge=1, le=0xFFFF, description="Canvas width")
    height: int = Field(default=DEFAULT_HEIGHT, ge=1, le=0xFFFF, description="Canvas height")
    font_dir: Optional[str] = Field(
        default=None, description="Directory holding DejaVuSans.ttf and DejaVuSans-Bold.ttf"
    )
    draw_outlines: bool = Field(default=False, description="Outline every widget region")
    use_red: bool = Field(default=True, description="Target panel can show red")
    threshold: int = Field(default=128, ge=0, le=255, description="Black/white threshold")
    red_threshold: int = Field(default=200, ge=0, le=255, description="Red threshold")

    def channel_red_threshold(self) -> Optional[int]:
        """Red threshold for channel conversion, None when the panel is black/white."""
        return self.red_threshold if self.use_red else None


class InkBoardSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    _explicit_args: set[str] = PrivateAttr(default_factory=set)

    title: str = Field(default="Family Board", max_length=60, description="Dashboard title")
    layout_file: Optional[Path] = Field(default=None, description="Layout JSON document")
    data_dir: Path = Field(default=Path("data"), description="Directory of JSON data feeds")
    output_file: Path = Field(default=Path("dashboard.png"), description="PNG output path")
    channels_file: Optional[Path] = Field(
        default=None, description="Optional e-paper channel file output path"
    )
    config_file: Optional[Path] = Field(default=None, description="YAML configuration file")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)

    model_config = SettingsConfigDict(
        env_prefix="INKBOARD_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        # Track which arguments were explicitly provided, nested ones as "section.key"
        explicit = set()
        for key, value in kwargs.items():
            if isinstance(value, dict):
                explicit.update(f"{key}.{nested}" for nested in value)
            else:
                explicit.add(key)
        self._explicit_args = explicit

        self._load_yaml_config()

    def _is_explicit(self, key: str, section: Optional[str] = None) -> bool:
        if section is None:
            return key in self._explicit_args
        return section in self._explicit_args or f"{section}.{key}" in self._explicit_args

    def _find_config_file(self) -> Optional[Path]:
        """Explicit config file if set, otherwise the first default location that exists."""
        if self.config_file is not None:
            if not self.config_file.is_file():
                raise ConfigError(
                    f"Config file not found: {self.config_file}", str(self.config_file)
                )
            return self.config_file

        for candidate in default_config_paths():
            if candidate.is_file():
                return candidate
        return None

    def _read_yaml(self, config_file: Path) -> dict[str, Any]:
        explicit = self.config_file is not None
        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            if explicit:
                raise ConfigError(
                    f"Could not load config {config_file}: {e}", str(config_file)
                ) from e
            logger.warning("Could not load YAML config from %s: %s", config_file, e)
            return {}

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            if explicit:
                raise ConfigError(
                    f"Config {config_file} must contain a mapping", str(config_file)
                )
            logger.warning("Ignoring YAML config %s: top level is not a mapping", config_file)
            return {}
        return config_data

    def _load_section(self, section: str, values: Any) -> None:
        if not isinstance(values, dict):
            logger.warning("Ignoring config section %r: expected a mapping", section)
            return

        target = getattr(self, section)
        for key, value in values.items():
            if key not in type(target).model_fields:
                logger.warning("Unknown setting %s.%s in config file", section, key)
            elif not self._is_explicit(key, section):
                setattr(target, key, value)

    def _load_yaml_config(self) -> None:
        """Apply the YAML config file to every setting not given explicitly."""
        config_file = self._find_config_file()
        if not config_file:
            return

        config_data = self._read_yaml(config_file)
        for key, value in config_data.items():
            if key in ("logging", "render"):
                self._load_section(key, value)
            elif key == "config_file" or key not in type(self).model_fields:
                logger.warning("Unknown setting %s in config file", key)
            elif not self._is_explicit(key):
                setattr(self, key, value)

        logger.debug("Loaded configuration from %s", config_file)


# Global settings management
_settings_instance: Optional[InkBoardSettings] = None


def get_settings() -> InkBoardSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = InkBoardSettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
