"""Failure reasons reported by the fetcher.

None of these are fatal to the host. ``WordOfTheDayFetcher.fetch`` returns
them instead of raising so callers can branch on the failure type.
"""

from typing import Optional


class FetchError(Exception):
    """Base class for every reason a fetch produced no word."""


class ConfigError(FetchError):
    """Custom source selected without a usable URL."""


class TransportError(FetchError):
    """Network failure: DNS, connect, timeout, reset."""


class HttpError(FetchError):
    """Server answered with a non-success status."""

    def __init__(self, status: int, url: Optional[str] = None) -> None:
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status}" + (f" from {url}" if url else ""))


class ParseError(FetchError):
    """Response body was absent or could not be parsed as HTML."""


class NotFoundError(FetchError):
    """Page parsed fine but no selector chain produced a valid word."""

    def __init__(self, site: str) -> None:
        self.site = site
        super().__init__(f"Could not find word element on {site} page")
