"""
Search failure classification.

Every failure raised by the search engine is one of two kinds:

- PARSE: the upstream response did not decode into the expected shape
- UNKNOWN: anything else (transport failure, construction failure,
  or an explicit error object returned by Scryfall)

A Scryfall 404 is not a failure; it means zero matches.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of search failures."""

    PARSE = "parse"
    UNKNOWN = "unknown"


class SearchError(Exception):
    """
    Base class for search engine failures.

    Both kinds are terminal for the current search: there is no retry
    and no fallback data source.
    """

    kind: FailureKind = FailureKind.UNKNOWN

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class ParseError(SearchError):
    """Upstream response bytes did not decode into a search result."""

    kind = FailureKind.PARSE


class UnknownSearchError(SearchError):
    """Transport, construction or upstream-reported failure."""

    kind = FailureKind.UNKNOWN
