"""Wordsmith.org "A.Word.A.Day"."""

from typing import Optional

from bs4 import BeautifulSoup

from word_of_the_day.adapters.scrapers.base import ChainScraper
from word_of_the_day.core import Candidate, find_first_match
from word_of_the_day.core.text import (
    element_text,
    extract_word,
    is_valid_word,
    strip_non_letters,
    truncate_definition,
)

NEARBY_DEFINITION_SELECTOR = "td p, td, p"


def first_valid_token(text: str) -> Optional[str]:
    """First whitespace token that is a valid word once punctuation is removed."""
    for part in text.split():
        cleaned = strip_non_letters(part)
        if is_valid_word(cleaned) and len(cleaned) >= 4:
            return cleaned
    return None


class WordsmithScraper(ChainScraper):
    """Scrape wordsmith.org/words/today.html.

    The page is table based with the word in an ``h2``; there are no useful
    class names or meta tags.
    """

    name = "Wordsmith.org"
    url = "https://wordsmith.org/words/today.html"

    general_selectors = (
        "table[width='100%'] h2",
        "table h2",
        "h2",
        ".word",
    )
    boilerplate_contains = ("a word a day", "wordsmith", "word of the day")
    boilerplate_equals = ("word",)
    min_text_length = 3

    def find_headword(self, document: BeautifulSoup) -> Optional[Candidate]:
        candidate = find_first_match(
            document,
            self.general_selectors,
            min_length=self.min_word_length,
            reject=self.is_boilerplate,
            extract=first_valid_token,
        )
        if candidate is not None:
            return candidate

        # Last resort: bold text is usually the word.
        for bold in document.select("b, strong"):
            word = extract_word(element_text(bold))
            if is_valid_word(word) and len(word) >= self.min_word_length:
                return Candidate(word=word, element=bold)
        return None

    def find_definition(
        self, document: BeautifulSoup, candidate: Candidate
    ) -> Optional[str]:
        if candidate.element is None or candidate.element.parent is None:
            return None

        parent = candidate.element.parent
        definition_element = parent.select_one(NEARBY_DEFINITION_SELECTOR)
        if definition_element is None and parent.parent is not None:
            definition_element = parent.parent.select_one(NEARBY_DEFINITION_SELECTOR)
        if definition_element is None:
            return None

        text = element_text(definition_element)
        if candidate.word.lower() in text.lower():
            return None
        return truncate_definition(text)
