"""Tests for text normalization rules."""

import pytest
from bs4 import BeautifulSoup

from word_of_the_day.core.text import (
    cap_definition,
    clean_archive_word,
    element_text,
    extract_word,
    is_valid_word,
    strip_pronunciation,
    truncate_definition,
)


@pytest.mark.parametrize("word", ["Serendipity", "zen", "wherein", "ABC"])
def test_is_valid_word_accepts_letters(word):
    """Plain letter strings of three or more characters are valid."""
    assert is_valid_word(word)


@pytest.mark.parametrize(
    "word",
    [None, "", "ab", "don't", "word2", "self-made", "naïve", "THE", "Over", "pronunciation", "Wordsmith"],
)
def test_is_valid_word_rejects(word):
    """Short, non-letter and stop-word candidates are rejected."""
    assert not is_valid_word(word)


def test_is_valid_word_only_exact_stop_words():
    """Stop words are matched whole, not as substrings."""
    assert not is_valid_word("where")
    assert is_valid_word("wherein")
    assert is_valid_word("Theory")


def test_extract_word_strips_filler_phrase():
    """Leading "Word of the Day:" is discarded before extraction."""
    assert extract_word("Word of the Day: Serendipity") == "Serendipity"


def test_extract_word_the_quick():
    """"the" is not a filler phrase, so the first long token wins."""
    assert extract_word("the quick") == "quick"


def test_extract_word_only_filler():
    """Text made entirely of filler yields nothing."""
    assert extract_word("Word of the Day") is None
    assert extract_word("word") is None
    assert extract_word("Today's word:") is None


def test_extract_word_short_remainder():
    """A remainder of two letters or "the" is rejected."""
    assert extract_word("The Word: of") is None
    assert extract_word("What is the") is None


def test_extract_word_remainder_threshold_is_three():
    """After a filler phrase a three-letter word is enough."""
    assert extract_word("What is zen?") == "zen"


def test_extract_word_question_opener():
    """WH-question openers are filler too."""
    assert extract_word("What is luminous?") == "luminous"


def test_extract_word_after_the_word():
    """Text after "the word" is examined again."""
    assert extract_word("The word of the day is Luminous") == "Luminous"


def test_extract_word_long_run_of_filler():
    """Any number of stacked filler phrases is stripped."""
    assert extract_word("day " * 1200 + "luminous") == "luminous"
    assert extract_word("word: " * 1200) is None


def test_extract_word_phrase_needs_boundary():
    """"day" does not match the start of "daylight"."""
    assert extract_word("daylight savings") == "daylight"


def test_extract_word_skips_excluded_tokens():
    """Structural words are skipped on the primary path."""
    assert extract_word("Definition: ephemeral (adj.)") == "ephemeral"
    assert extract_word("this means nothing") == "nothing"


def test_extract_word_falls_back_to_first_token():
    """With no long token the first token is returned unvalidated."""
    assert extract_word("a an") == "a"
    assert extract_word("Zen!") == "Zen"


def test_extract_word_empty():
    """Blank input returns None."""
    assert extract_word(None) is None
    assert extract_word("   ") is None


def test_truncate_definition_cuts_at_sentence():
    """A period past position 50 ends the definition, inclusive."""
    text = "a" * 120 + "." + "b" * 179
    assert len(text) == 300

    result = truncate_definition(text)

    assert len(result) == 121
    assert result.endswith(".")


def test_truncate_definition_too_short():
    """Ten characters or fewer is not a definition."""
    assert truncate_definition("short") is None
    assert truncate_definition("  exactly10!  ") is None
    assert truncate_definition(None) is None


def test_truncate_definition_early_period():
    """Without a period after 50, the first period is used if past 10."""
    text = "A brief sentence here. and more words without a stop"
    assert truncate_definition(text) == "A brief sentence here."


def test_truncate_definition_hard_limit():
    """No usable period means a hard cut at max_len."""
    assert truncate_definition("c" * 250) == "c" * 200
    assert truncate_definition("c" * 250, max_len=80) == "c" * 80

    # Period within the first ten characters is ignored
    text = "Hi yo. " + "c" * 100
    assert truncate_definition(text) == text


def test_truncate_definition_period_outside_window():
    """Periods beyond max_len are not considered."""
    text = "d" * 210 + "."
    assert truncate_definition(text) == "d" * 200


def test_truncate_definition_strips_pronunciation():
    """Parentheticals containing a slash are removed."""
    text = "to walk about idly (MAN-der / ˈmændər) without a clear purpose."
    assert truncate_definition(text) == "to walk about idly without a clear purpose."


def test_strip_pronunciation_keeps_plain_parentheticals():
    """Only slash-containing groups are pronunciation guides."""
    assert strip_pronunciation("twilight (poetic)") == "twilight (poetic)"
    assert strip_pronunciation("twilight (AY / ay) hour") == "twilight hour"


def test_cap_definition():
    """Long archive definitions are cut and marked with an ellipsis."""
    assert cap_definition("short one") == "short one"
    assert cap_definition("x" * 250) == "x" * 200 + "..."

    ends_on_period = "y" * 199 + "." + "z" * 50
    assert cap_definition(ends_on_period) == "y" * 199 + "."


def test_clean_archive_word():
    """Old English characters and hyphens survive cleaning."""
    assert clean_archive_word("ǣfen-glōm,") == "ǣfen-glōm"
    assert clean_archive_word("þēod:") == "þēod"
    assert clean_archive_word("“hwæt”") == "hwæt"


def test_element_text_joins_inline_and_splits_blocks():
    """Inline markup is joined, block elements are space separated."""
    soup = BeautifulSoup(
        "<h1>ser<b>en</b>dipity</h1><div><p>first</p><p>second\n  line</p></div>",
        "html.parser",
    )

    assert element_text(soup.h1) == "serendipity"
    assert element_text(soup.div) == "first second line"
    assert element_text(None) == ""
