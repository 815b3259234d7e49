"""Core domain entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SourceKind(str, Enum):
    """Where a word of the day comes from."""

    MERRIAM_WEBSTER = "merriam_webster"
    DICTIONARY_COM = "dictionary_com"
    WORDSMITH = "wordsmith"
    OLD_ENGLISH_WORDHORD = "old_english_wordhord"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    SourceKind.MERRIAM_WEBSTER: "Merriam-Webster",
    SourceKind.DICTIONARY_COM: "Dictionary.com",
    SourceKind.WORDSMITH: "Wordsmith.org",
    SourceKind.OLD_ENGLISH_WORDHORD: "Old English Wordhord",
    SourceKind.CUSTOM: "Custom URL",
}


@dataclass(frozen=True)
class WordResult:
    """A scraped headword with its optional short definition."""

    word: str
    definition: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.word:
            raise ValueError("Word cannot be empty")

    def format(self, label: str) -> str:
        """Render as a single display line."""
        if self.definition:
            return f"{label}: {self.word} - {self.definition}"
        return f"{label}: {self.word}"


@dataclass(frozen=True)
class SourceConfig:
    """Identifies a site to fetch from.

    ``url`` and ``selector`` are only read for ``SourceKind.CUSTOM``.
    """

    kind: SourceKind
    url: str = ""
    selector: Optional[str] = None
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        return self.label or self.kind.display_name
