"""Site scrapers and the registry that picks between them."""

from word_of_the_day.adapters.scrapers.base import ChainScraper
from word_of_the_day.adapters.scrapers.custom import CustomScraper
from word_of_the_day.adapters.scrapers.dictionary_com import DictionaryComScraper
from word_of_the_day.adapters.scrapers.merriam_webster import MerriamWebsterScraper
from word_of_the_day.adapters.scrapers.old_english_wordhord import OldEnglishWordhordScraper
from word_of_the_day.adapters.scrapers.registry import ResolvedSource, SourceRegistry
from word_of_the_day.adapters.scrapers.wordsmith import WordsmithScraper

__all__ = [
    "ChainScraper",
    "CustomScraper",
    "DictionaryComScraper",
    "MerriamWebsterScraper",
    "OldEnglishWordhordScraper",
    "WordsmithScraper",
    "ResolvedSource",
    "SourceRegistry",
]
