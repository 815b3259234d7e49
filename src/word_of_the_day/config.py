"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from word_of_the_day.core import SourceConfig, SourceKind


@dataclass
class DisplayConfig:
    """Which feeds to show and how."""
    message_color: str = "#00ffff"
    word_of_the_day: bool = True
    medieval_word_of_the_day: bool = True
    custom_word_of_the_day: bool = False


@dataclass
class SourceSettings:
    """Primary source and custom page settings."""
    kind: SourceKind = SourceKind.MERRIAM_WEBSTER
    custom_url: str = ""
    custom_selector: str = "h1"

    def __post_init__(self) -> None:
        # Raises ValueError for unknown names from YAML
        self.kind = SourceKind(self.kind)


@dataclass
class HttpConfig:
    """HTTP client settings."""
    timeout: float = 30.0
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    )


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"


@dataclass
class Settings:
    """Application settings."""

    # From environment only
    slack_webhook_url: Optional[str] = None

    # Config sections
    display: DisplayConfig = field(default_factory=DisplayConfig)
    source: SourceSettings = field(default_factory=SourceSettings)
    http: HttpConfig = field(default_factory=HttpConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def message_color(self) -> str:
        return self.display.message_color

    @property
    def primary_source(self) -> SourceConfig:
        if self.source.kind is SourceKind.CUSTOM:
            return self.custom_source
        return SourceConfig(kind=self.source.kind)

    @property
    def custom_source(self) -> SourceConfig:
        return SourceConfig(
            kind=SourceKind.CUSTOM,
            url=self.source.custom_url,
            selector=self.source.custom_selector,
        )

    @property
    def log_level(self) -> str:
        return self.logging.level.upper()


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(slack_webhook_url=os.getenv("SLACK_WEBHOOK_URL"))

    if "display" in config:
        settings.display = DisplayConfig(**config["display"])

    if "source" in config:
        settings.source = SourceSettings(**config["source"])

    if "http" in config:
        for key, value in config["http"].items():
            setattr(settings.http, key, value)

    if "logging" in config:
        for key, value in config["logging"].items():
            setattr(settings.logging, key, value)

    custom_url = os.getenv("WOTD_CUSTOM_URL")
    if custom_url:
        settings.source.custom_url = custom_url

    return settings
