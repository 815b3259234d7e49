"""Ordered selector fallback chains."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from bs4 import Tag

from word_of_the_day.core.text import (
    element_text,
    extract_word,
    is_valid_word,
    truncate_definition,
)

logger = logging.getLogger(__name__)

TextFilter = Callable[[str], bool]
WordExtractor = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Candidate:
    """An accepted headword and the element it was read from."""

    word: str
    element: Optional[Tag] = None


def find_first_match(
    scope: Tag,
    selectors: Iterable[str],
    min_length: int = 4,
    reject: Optional[TextFilter] = None,
    extract: WordExtractor = extract_word,
) -> Optional[Candidate]:
    """Try each selector in order and return the first valid candidate.

    Args:
        scope: Document or element to query.
        selectors: CSS selectors; only the first match of each is examined.
        min_length: Minimum accepted word length.
        reject: Skips an element when it returns True for the element's text.
        extract: Turns element text into a candidate word.
    """
    for selector in selectors:
        element = scope.select_one(selector)
        if element is None:
            continue

        text = element_text(element)
        if reject is not None and reject(text):
            logger.debug("Skipping boilerplate %r from %s", text, selector)
            continue

        word = extract(text)
        if is_valid_word(word) and len(word) >= min_length:
            return Candidate(word=word, element=element)

        logger.debug("Rejected candidate %r from %s", word, selector)

    return None


def find_first_valid(
    document: Tag, selectors: Iterable[str], min_length: int = 4
) -> Optional[str]:
    """Word-only form of ``find_first_match``."""
    candidate = find_first_match(document, selectors, min_length=min_length)
    return candidate.word if candidate else None


def first_truncated_definition(
    scope: Tag, selectors: Iterable[str], max_len: int = 200
) -> Optional[str]:
    """Return the first selector match that survives ``truncate_definition``."""
    for selector in selectors:
        element = scope.select_one(selector)
        if element is None:
            continue
        definition = truncate_definition(element_text(element), max_len)
        if definition:
            return definition
    return None
