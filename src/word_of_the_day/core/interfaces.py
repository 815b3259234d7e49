"""Core interfaces for adapters."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup

from word_of_the_day.core.entities import WordResult

logger = logging.getLogger(__name__)


class SiteScraper(ABC):
    """Interface for pulling a word of the day out of a parsed page."""

    name: str = "site"
    url: str = ""

    def scrape(self, document: BeautifulSoup) -> Optional[WordResult]:
        """Extract the word and definition, or None if nothing matched.

        Never raises: unexpected markup is logged and treated as no match.
        """
        try:
            return self.extract(document)
        except Exception as e:
            logger.warning("Error scraping %s: %s", self.name, e, exc_info=True)
            return None

    @abstractmethod
    def extract(self, document: BeautifulSoup) -> Optional[WordResult]:
        """Site-specific extraction; may raise on malformed markup."""
        pass


class NotificationService(ABC):
    """Interface for delivering display lines to a surface."""

    @abstractmethod
    async def send_message(self, text: str) -> None:
        """Deliver one formatted line."""
        pass
