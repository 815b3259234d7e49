"""Business logic use cases."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import httpx
from bs4 import BeautifulSoup

from word_of_the_day.adapters.scrapers import SourceRegistry
from word_of_the_day.config import Settings
from word_of_the_day.core import (
    ConfigError,
    DailyGate,
    FetchError,
    HttpError,
    NotFoundError,
    NotificationService,
    ParseError,
    SourceConfig,
    SourceKind,
    TransportError,
    WordResult,
)

logger = logging.getLogger(__name__)

FAILED_TO_FETCH = "Word of the day: Failed to fetch"

FetchOutcome = Union[WordResult, FetchError]


class WordOfTheDayFetcher:
    """Resolve a source, download it, and scrape the word of the day.

    ``fetch`` never raises. Every failure comes back as a ``FetchError``
    subclass and is logged.
    """

    def __init__(
        self,
        registry: Optional[SourceRegistry] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
    ) -> None:
        self.registry = registry or SourceRegistry()
        self.client = client
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent} if user_agent else {}

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "WordOfTheDayFetcher":
        return cls(timeout=settings.http.timeout, user_agent=settings.http.user_agent, **kwargs)

    async def fetch(self, source: SourceConfig) -> FetchOutcome:
        """Fetch one source once, without retrying."""
        try:
            resolved = self.registry.resolve(source)
        except ConfigError as e:
            logger.warning("%s: %s", source.display_label, e)
            return e

        try:
            html = await self._get(resolved.url)
            document = self._parse(html)
        except HttpError as e:
            logger.warning("%s returned: %s", resolved.label, e.status)
            return e
        except FetchError as e:
            logger.warning("Error fetching %s from %s: %s", resolved.label, resolved.scraper.name, e)
            return e

        result = resolved.scraper.scrape(document)
        if result is None:
            return NotFoundError(resolved.scraper.name)

        logger.debug("%s: found %r", resolved.label, result.word)
        return result

    async def fetch_word(self, source: SourceConfig) -> Optional[str]:
        """Just the headword, or None on any failure."""
        result = await self.fetch(source)
        return result.word if isinstance(result, WordResult) else None

    async def fetch_all(self, sources: Sequence[SourceConfig]) -> list[str]:
        """Fetch every source in parallel and format one line per source.

        A failed source yields the ``FAILED_TO_FETCH`` placeholder so the
        batch itself never fails.
        """
        results = await asyncio.gather(
            *(self.fetch(source) for source in sources), return_exceptions=True
        )

        lines = []
        for source, result in zip(sources, results):
            if isinstance(result, WordResult):
                lines.append(result.format(source.display_label))
            else:
                if not isinstance(result, FetchError):
                    logger.error("Unexpected error fetching %s: %s", source.display_label, result)
                lines.append(FAILED_TO_FETCH)
        return lines

    async def _get(self, url: str) -> str:
        try:
            if self.client is not None:
                response = await self.client.get(
                    url, headers=self.headers, follow_redirects=True
                )
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout, follow_redirects=True, headers=self.headers
                ) as client:
                    response = await client.get(url)
        except httpx.HTTPError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise HttpError(response.status_code, url)
        return response.text

    def _parse(self, html: Optional[str]) -> BeautifulSoup:
        if not html or not html.strip():
            raise ParseError("Empty response body")
        try:
            return BeautifulSoup(html, "html.parser")
        except Exception as e:
            raise ParseError(f"Could not parse HTML: {e}") from e


@dataclass(frozen=True)
class Feed:
    """One independently gated word source shown to the user."""

    key: str
    source: SourceConfig


def build_feeds(settings: Settings) -> list[Feed]:
    """Feeds enabled by the display toggles, in display order."""
    feeds = []
    if settings.display.word_of_the_day:
        primary = settings.primary_source
        feeds.append(Feed(
            key="primary",
            source=SourceConfig(
                kind=primary.kind,
                url=primary.url,
                selector=primary.selector,
                label="Word of the Day",
            ),
        ))
    if settings.display.medieval_word_of_the_day:
        feeds.append(Feed(
            key="medieval",
            source=SourceConfig(
                kind=SourceKind.OLD_ENGLISH_WORDHORD,
                label="Word of the Day (Medieval)",
            ),
        ))
    if settings.display.custom_word_of_the_day:
        custom = settings.custom_source
        feeds.append(Feed(
            key="custom",
            source=SourceConfig(
                kind=SourceKind.CUSTOM,
                url=custom.url,
                selector=custom.selector,
                label="Word of the Day (Custom)",
            ),
        ))
    return feeds


class WordOfTheDayService:
    """Show each enabled feed at most once per local day."""

    def __init__(
        self,
        fetcher: WordOfTheDayFetcher,
        feeds: Sequence[Feed],
        notifiers: Sequence[NotificationService] = (),
        gate: Optional[DailyGate] = None,
    ) -> None:
        self.fetcher = fetcher
        self.feeds = list(feeds)
        self.notifiers = list(notifiers)
        self.gate = gate or DailyGate()

    async def announce(self, force: bool = False) -> list[str]:
        """Fetch due feeds in parallel and send their lines.

        Args:
            force: Ignore the daily gate (still marks feeds as shown).

        Returns:
            The lines that were sent, in feed order.
        """
        # Claimed before fetching so overlapping triggers cannot both show a feed.
        claimed = {feed.key for feed in self.feeds if self.gate.try_claim(feed.key)}
        due = self.feeds if force else [feed for feed in self.feeds if feed.key in claimed]
        if not due:
            return []

        try:
            results = await asyncio.gather(*(self.fetcher.fetch(feed.source) for feed in due))
        except BaseException:
            for key in claimed:
                self.gate.release(key)
            raise

        lines = []
        for feed, result in zip(due, results):
            if not isinstance(result, WordResult):
                # Already logged by the fetcher; the feed stays armed.
                if feed.key in claimed:
                    self.gate.release(feed.key)
                continue

            line = result.format(feed.source.display_label)
            for notifier in self.notifiers:
                await notifier.send_message(line)

            self.gate.mark_shown(feed.key)
            logger.info("Displayed %s word of the day: %s", feed.key, result.word)
            lines.append(line)

        return lines

    def shutdown(self) -> None:
        """Re-arm every feed."""
        self.gate.reset()
