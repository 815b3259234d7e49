"""Merriam-Webster word of the day."""

from word_of_the_day.adapters.scrapers.base import ChainScraper


class MerriamWebsterScraper(ChainScraper):
    """Scrape merriam-webster.com/word-of-the-day."""

    name = "Merriam-Webster"
    url = "https://www.merriam-webster.com/word-of-the-day"

    specific_selectors = (
        "[data-word]",
        ".wod-headword",
        "h1.word-header-txt",
        ".word-and-pronunciation h1",
        ".wotd-word",
        "h1.wotd-word",
        ".word-header h1",
        "h1.word",
    )
    general_selectors = (
        "article h1",
        "main h1",
        ".word-header h1",
        "h1[class*=word]",
    )
    definition_selectors = (
        ".wod-definition-container p",
        ".wod-definition-text-container p",
        ".word-definition p",
        ".definition p",
        ".wotd-definition p",
        "p.wod-definition",
        ".wod-definition-container",
        ".wod-definition-text-container",
    )

    boilerplate_equals = ("word", "day")
    boilerplate_prefixes = ("what", "how", "when", "where", "why")
