"""Shared selector-chain algorithm for dictionary sites."""

import logging
from typing import Optional

from bs4 import BeautifulSoup

from word_of_the_day.core import Candidate, SiteScraper, WordResult, find_first_match
from word_of_the_day.core.extractor import first_truncated_definition
from word_of_the_day.core.text import element_text, extract_word, is_valid_word, truncate_definition

logger = logging.getLogger(__name__)

META_TITLE_SELECTOR = "meta[property='og:title'], meta[name='twitter:title']"


class ChainScraper(SiteScraper):
    """Scrape a page with ordered selector chains.

    Subclasses only declare selectors and boilerplate rules:

    1. ``specific_selectors``: site classes most likely to hold the headword.
    2. ``general_selectors``: broad headings, filtered by ``is_boilerplate``.
    3. ``og:title`` / ``twitter:title`` meta content.
    4. ``definition_selectors``, then a paragraph next to the headword.
    """

    specific_selectors: tuple[str, ...] = ()
    general_selectors: tuple[str, ...] = ()
    definition_selectors: tuple[str, ...] = ()

    # Boilerplate filter for the general chain, applied to lower-cased text.
    boilerplate_contains: tuple[str, ...] = ("word of the day",)
    boilerplate_equals: tuple[str, ...] = ("word",)
    boilerplate_prefixes: tuple[str, ...] = ()
    min_text_length: int = 0

    # Split the meta title on this and read the last segment; None reads it whole.
    meta_delimiter: Optional[str] = ":"
    parent_definition_selector: Optional[str] = "p"
    min_word_length = 4

    def is_boilerplate(self, text: str) -> bool:
        lower = text.lower()
        return (
            len(lower) < self.min_text_length
            or any(phrase in lower for phrase in self.boilerplate_contains)
            or lower in self.boilerplate_equals
            or lower.startswith(self.boilerplate_prefixes)
        )

    def extract(self, document: BeautifulSoup) -> Optional[WordResult]:
        candidate = self.find_headword(document)
        if candidate is None:
            logger.warning("Could not find word element on %s page", self.name)
            return None

        definition = self.find_definition(document, candidate)
        return WordResult(word=candidate.word, definition=definition)

    def find_headword(self, document: BeautifulSoup) -> Optional[Candidate]:
        candidate = find_first_match(
            document, self.specific_selectors, min_length=self.min_word_length
        )
        if candidate is None:
            candidate = find_first_match(
                document,
                self.general_selectors,
                min_length=self.min_word_length,
                reject=self.is_boilerplate,
            )
        if candidate is None:
            candidate = self.find_meta_headword(document)
        return candidate

    def find_meta_headword(self, document: BeautifulSoup) -> Optional[Candidate]:
        meta = document.select_one(META_TITLE_SELECTOR)
        if meta is None:
            return None

        content = (meta.get("content") or "").strip()
        if not content:
            return None

        if self.meta_delimiter is not None:
            parts = content.split(self.meta_delimiter)
            if len(parts) < 2:
                return None
            content = parts[-1].strip()

        word = extract_word(content)
        if is_valid_word(word) and len(word) >= self.min_word_length:
            return Candidate(word=word)
        return None

    def find_definition(
        self, document: BeautifulSoup, candidate: Candidate
    ) -> Optional[str]:
        definition = first_truncated_definition(document, self.definition_selectors)
        if definition is not None:
            return definition

        if self.parent_definition_selector is None or candidate.element is None:
            return None

        parent = candidate.element.parent
        if parent is None:
            return None

        return truncate_definition(
            element_text(parent.select_one(self.parent_definition_selector))
        )
