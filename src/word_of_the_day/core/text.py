"""Text cleaning rules shared by every scraper."""

import re
from typing import Optional

from bs4 import NavigableString, Tag

# Checked in order, so longer phrases must come before their prefixes.
FILLER_PHRASES = (
    "word of the day",
    "word of day",
    "today's word",
    "the word",
    "word",
    "day",
    "what is",
    "what's",
    "how to",
    "when is",
    "where is",
    "why is",
)

# Tokens extract_word never picks on its primary path.
EXCLUDED_TOKENS = frozenset({
    "the", "word", "day",
    "what", "how", "when", "where", "why", "who", "which",
    "this", "that", "means", "mean",
    "example", "definition", "pronunciation",
    "awordaday", "wordsmith",
})

STOP_WORDS = frozenset({
    "word", "day", "the", "of", "and", "or", "but", "in", "on", "at", "to", "for",
    "what", "how", "when", "where", "why", "who", "which", "this", "that", "these", "those",
    "means", "mean", "example", "definition", "pronunciation", "awordaday", "wordsmith",
    "with", "from", "into", "onto", "upon", "about", "above", "below", "under", "over",
})

OLD_ENGLISH_CHARS = "āēīōūǣȳæþðƿ"

DEFAULT_DEFINITION_LENGTH = 200

_NON_LETTERS = re.compile(r"[^A-Za-z]")
_LETTERS_ONLY = re.compile(r"^[A-Za-z]+$")
_LEADING_PUNCTUATION = re.compile(r"^[\W_]+")
_PRONUNCIATION = re.compile(r"\([^)]*/[^)]*\)")
_NOT_ARCHIVE_CHARS = re.compile(rf"[^A-Za-z{OLD_ENGLISH_CHARS}-]")

_BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "figcaption", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header",
    "hr", "li", "main", "nav", "ol", "p", "pre", "section", "table", "td", "th",
    "tr", "ul",
})


def strip_non_letters(token: str) -> str:
    """Remove everything except ASCII letters."""
    return _NON_LETTERS.sub("", token)


def _match_filler(lower_text: str) -> Optional[str]:
    """Return the filler phrase the text opens with, if any.

    A phrase only counts when followed by a non-letter, so "daylight" does
    not open with "day".
    """
    for phrase in FILLER_PHRASES:
        if lower_text == phrase:
            return phrase
        if lower_text.startswith(phrase) and not lower_text[len(phrase)].isalpha():
            return phrase
    return None


def extract_word(text: Optional[str]) -> Optional[str]:
    """Pick the most likely headword out of a text fragment.

    Leading filler such as "Word of the Day:" is discarded and the rest is
    examined again. The result is not validated; run ``is_valid_word`` on it
    before accepting it.
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None

    had_filler = False
    while True:
        phrase = _match_filler(text.lower())
        if phrase is None:
            break
        text = _LEADING_PUNCTUATION.sub("", text[len(phrase):].strip()).strip()
        if not text:
            return None
        had_filler = True

    candidate = _first_token(text)
    if had_filler and not (candidate and len(candidate) > 2 and candidate.lower() != "the"):
        return None
    return candidate


def _first_token(text: str) -> str:
    tokens = text.split()
    for token in tokens:
        cleaned = strip_non_letters(token)
        if len(cleaned) >= 4 and cleaned.lower() not in EXCLUDED_TOKENS:
            return cleaned

    return strip_non_letters(tokens[0])


def is_valid_word(word: Optional[str]) -> bool:
    """Whether a candidate looks like a real dictionary headword."""
    if not word:
        return False
    word = word.strip()
    if len(word) < 3:
        return False
    if not _LETTERS_ONLY.match(word):
        return False
    return word.lower() not in STOP_WORDS


def strip_pronunciation(text: str) -> str:
    """Drop parentheticals that contain a slash, e.g. ``(AY-kuhn / ˈeɪ.kən)``."""
    text = _PRONUNCIATION.sub("", text)
    return re.sub(r"\s{2,}", " ", text).strip()


def truncate_definition(
    text: Optional[str], max_len: int = DEFAULT_DEFINITION_LENGTH
) -> Optional[str]:
    """Shorten a definition to its first sentence, or ``max_len`` characters.

    Returns None for text of 10 characters or fewer.
    """
    if text is None:
        return None
    text = text.strip()
    if len(text) <= 10:
        return None

    window = text[:max_len]
    end = window.find(".", 50)
    if end == -1:
        end = window.find(".")

    if end > 10:
        result = text[:end + 1]
    else:
        result = text[:max_len]

    return strip_pronunciation(result) or None


def cap_definition(text: str, max_len: int = DEFAULT_DEFINITION_LENGTH) -> str:
    """Hard cap used for archive entries, marking the cut with an ellipsis."""
    if len(text) <= max_len:
        return text
    text = text[:max_len].strip()
    if not text.endswith(".") and not text.endswith("..."):
        text += "..."
    return text


def clean_archive_word(token: str) -> str:
    """Keep letters, Old English characters and hyphens."""
    return _NOT_ARCHIVE_CHARS.sub("", token).strip()


def element_text(element: Optional[Tag]) -> str:
    """Visible text of an element with whitespace collapsed.

    Block-level children are separated by a space while inline markup is
    joined as-is, so ``<h1>ser<b>en</b>dipity</h1>`` reads "serendipity".
    """
    if element is None:
        return ""
    parts = []
    for node in element.descendants:
        if type(node) is NavigableString:
            parts.append(str(node))
        elif isinstance(node, Tag) and node.name in _BLOCK_TAGS:
            parts.append(" ")
    return " ".join("".join(parts).split())
