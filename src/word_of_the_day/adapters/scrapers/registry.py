"""Map source configuration to an endpoint and a scraper."""

from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from word_of_the_day.adapters.scrapers.custom import CustomScraper
from word_of_the_day.adapters.scrapers.dictionary_com import DictionaryComScraper
from word_of_the_day.adapters.scrapers.merriam_webster import MerriamWebsterScraper
from word_of_the_day.adapters.scrapers.old_english_wordhord import OldEnglishWordhordScraper
from word_of_the_day.adapters.scrapers.wordsmith import WordsmithScraper
from word_of_the_day.core import ConfigError, SiteScraper, SourceConfig, SourceKind

ScraperFactory = Callable[[], SiteScraper]


@dataclass(frozen=True)
class ResolvedSource:
    """Everything needed to fetch one source."""

    url: str
    scraper: SiteScraper
    label: str


def validate_url(url: Optional[str]) -> str:
    """Return the URL stripped, or raise ConfigError if it is not absolute http(s)."""
    url = (url or "").strip()
    if not url:
        raise ConfigError("Custom URL not configured")

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ConfigError(f"Invalid custom URL: {url}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigError(f"Invalid custom URL: {url}")
    return url


class SourceRegistry:
    """Built-in sites plus the user's custom page."""

    def __init__(self) -> None:
        self._builtin: dict[SourceKind, tuple[str, ScraperFactory]] = {}
        for scraper_cls, kind in (
            (MerriamWebsterScraper, SourceKind.MERRIAM_WEBSTER),
            (DictionaryComScraper, SourceKind.DICTIONARY_COM),
            (WordsmithScraper, SourceKind.WORDSMITH),
            (OldEnglishWordhordScraper, SourceKind.OLD_ENGLISH_WORDHORD),
        ):
            self.register(kind, scraper_cls.url, scraper_cls)

    def register(self, kind: SourceKind, url: str, factory: ScraperFactory) -> None:
        """Add or replace a built-in source."""
        if kind is SourceKind.CUSTOM:
            raise ValueError("The custom source is configured, not registered")
        self._builtin[kind] = (url, factory)

    @property
    def builtin_kinds(self) -> list[SourceKind]:
        return list(self._builtin)

    def resolve(self, config: SourceConfig) -> ResolvedSource:
        """Pick the URL and scraper for a source.

        Raises:
            ConfigError: custom source without a well-formed absolute URL.
        """
        if config.kind is SourceKind.CUSTOM:
            url = validate_url(config.url)
            return ResolvedSource(
                url=url,
                scraper=CustomScraper(config.selector),
                label=config.display_label,
            )

        if config.kind not in self._builtin:
            raise ConfigError(f"No scraper registered for {config.kind.display_name}")

        url, factory = self._builtin[config.kind]
        return ResolvedSource(url=url, scraper=factory(), label=config.display_label)
