"""Core domain layer."""

from word_of_the_day.core.daily_gate import DailyGate
from word_of_the_day.core.entities import SourceConfig, SourceKind, WordResult
from word_of_the_day.core.errors import (
    ConfigError,
    FetchError,
    HttpError,
    NotFoundError,
    ParseError,
    TransportError,
)
from word_of_the_day.core.extractor import Candidate, find_first_match, find_first_valid
from word_of_the_day.core.interfaces import NotificationService, SiteScraper

__all__ = [
    "WordResult",
    "SourceKind",
    "SourceConfig",
    "FetchError",
    "ConfigError",
    "TransportError",
    "HttpError",
    "ParseError",
    "NotFoundError",
    "Candidate",
    "find_first_match",
    "find_first_valid",
    "SiteScraper",
    "NotificationService",
    "DailyGate",
]
