"""Dictionary.com word of the day."""

from word_of_the_day.adapters.scrapers.base import ChainScraper


class DictionaryComScraper(ChainScraper):
    """Scrape dictionary.com/e/word-of-the-day."""

    name = "Dictionary.com"
    url = "https://www.dictionary.com/e/word-of-the-day/"

    specific_selectors = (
        "h1.wotd-item__headword",
        ".wotd-item-headword",
        "h1[class*=headword]",
        ".wotd-headword",
        "h1.wotd-headword",
        "[data-headword]",
        ".otd-item-headword",
        "h1.otd-item-headword",
        ".wotd-item__headword",
        "h1[data-headword]",
    )
    general_selectors = (
        "article h1",
        "main h1",
        ".wotd-item h1",
        "[class*=wotd] h1",
    )
    definition_selectors = (
        ".wotd-item__definition p",
        ".wotd-item__definition",
        ".otd-item__definition p",
        ".wotd-definition p",
        "p.wotd-definition",
    )

    min_text_length = 3
    # The og:title is read whole, e.g. "Serendipity | Dictionary.com".
    meta_delimiter = None
    parent_definition_selector = None
