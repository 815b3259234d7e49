"""Old English Wordhord, a blog-style archive of Old English words."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from word_of_the_day.core import SiteScraper, WordResult
from word_of_the_day.core.text import (
    DEFAULT_DEFINITION_LENGTH,
    cap_definition,
    clean_archive_word,
    element_text,
    strip_pronunciation,
)

logger = logging.getLogger(__name__)

POST_SELECTORS = (
    "article.post, article, .entry, .post, .word-entry",
    "[class*='post'], [class*='entry']",
)
TITLE_SELECTOR = "h1, h2, .entry-title, .post-title"
MAIN_CONTENT_SELECTOR = "main, .main-content, #content, #main"

TITLE_BOILERPLATE = ("posted", "old english wordhord")
HEADING_BOILERPLATE = ("old english", "wordhord", "navigation", "word of the day")


class OldEnglishWordhordScraper(SiteScraper):
    """Scrape the newest entry on oldenglishwordhord.com.

    Each post is titled with the headword and its body contains a line like
    ``ǣfen-glōm, noun: twilight. (AY-ven-glohm / ˈæːvenɡloːm)``.
    """

    name = "Old English Wordhord"
    url = "https://oldenglishwordhord.com/"

    def extract(self, document: BeautifulSoup) -> Optional[WordResult]:
        word = None
        definition = None

        post = self._first_post(document)
        if post is not None:
            word = self._title_word(post)
            if word:
                definition = self._definition(post, word)

        if not word:
            word = self._main_heading_word(document)

        if not word:
            logger.warning("Could not find word element on %s page", self.name)
            return None

        return WordResult(word=word, definition=definition)

    def _first_post(self, document: BeautifulSoup) -> Optional[Tag]:
        for selector in POST_SELECTORS:
            post = document.select_one(selector)
            if post is not None:
                return post
        return None

    def _title_word(self, post: Tag) -> Optional[str]:
        title = post.select_one(TITLE_SELECTOR)
        if title is None:
            return None

        text = element_text(title)
        lower = text.lower()
        if not text or any(phrase in lower for phrase in TITLE_BOILERPLATE):
            return None

        return clean_archive_word(text.split()[0]) or None

    def _definition(self, post: Tag, word: str) -> Optional[str]:
        pattern = re.escape(word) + r",\s*[^:]+:\s*([^.]+)\."
        match = re.search(pattern, element_text(post))
        if match:
            definition = strip_pronunciation(match.group(1))
        else:
            definition = self._paragraph_definition(post, word)

        if not definition:
            return None
        return cap_definition(definition)

    def _paragraph_definition(self, post: Tag, word: str) -> Optional[str]:
        """Scan paragraphs for "word," or "word:" and read after the colon."""
        for paragraph in post.select("p"):
            text = element_text(paragraph)
            if f"{word}," not in text and f"{word}:" not in text:
                continue

            colon = text.find(":")
            if colon <= 0:
                continue

            after_colon = text[colon + 1:].strip()
            period = after_colon.find(".")
            if period > 0:
                definition = strip_pronunciation(after_colon[:period])
            else:
                definition = strip_pronunciation(after_colon)[:DEFAULT_DEFINITION_LENGTH].strip()

            if len(definition) > 3:
                return definition
        return None

    def _main_heading_word(self, document: BeautifulSoup) -> Optional[str]:
        main = document.select_one(MAIN_CONTENT_SELECTOR)
        if main is None:
            return None

        for heading in main.select("h1, h2"):
            text = element_text(heading)
            lower = text.lower()
            if any(phrase in lower for phrase in HEADING_BOILERPLATE):
                continue
            if not 1 < len(text) < 50:
                continue

            word = clean_archive_word(text.split()[0])
            if len(word) >= 2:
                return word
        return None
