"""Scrape a word of the day from dictionary sites and show it once per day."""

__version__ = "0.1.0"
