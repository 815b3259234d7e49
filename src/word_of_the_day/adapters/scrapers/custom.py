"""User-configured word of the day page."""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from word_of_the_day.core import Candidate, SiteScraper, WordResult, find_first_match
from word_of_the_day.core.extractor import first_truncated_definition

logger = logging.getLogger(__name__)

NEARBY_DEFINITION_SELECTORS = ("p, .definition, .def",)
GENERIC_SELECTORS = ("h1, h2, .word, .wotd, [class*=word]",)


class CustomScraper(SiteScraper):
    """Scrape an arbitrary page, optionally guided by a CSS selector."""

    name = "custom URL"

    def __init__(self, selector: Optional[str] = None) -> None:
        self.selector = (selector or "").strip() or None

    def extract(self, document: BeautifulSoup) -> Optional[WordResult]:
        if self.selector:
            candidate = self._find_selected(document)
            if candidate is not None:
                definition = None
                parent = candidate.element.parent
                if parent is not None:
                    definition = first_truncated_definition(parent, NEARBY_DEFINITION_SELECTORS)
                return WordResult(word=candidate.word, definition=definition)

        candidate = find_first_match(document, GENERIC_SELECTORS)
        if candidate is not None:
            return WordResult(word=candidate.word)

        logger.warning("Could not find word element on %s page", self.name)
        return None

    def _find_selected(self, document: BeautifulSoup) -> Optional[Candidate]:
        try:
            candidate = find_first_match(document, (self.selector,))
        except SelectorSyntaxError as e:
            logger.warning("Invalid custom selector %r: %s", self.selector, e)
            return None

        if candidate is None:
            logger.debug("Custom selector %r matched no valid word", self.selector)
        return candidate
