"""Errors raised while constructing a :class:`~url_scraper.scraper.UrlScraper`.

Only construction can fail.  Iterating over a built scraper never raises.
"""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for every failure surfaced by url-scraper.

    ``why`` keeps the originating diagnostic (an exception or a message) so
    callers can inspect the underlying cause.
    """

    prefix = "scraper error"

    def __init__(self, why: BaseException | str) -> None:
        super().__init__(f"{self.prefix}: {why}")
        self.why = why


class UrlParsingError(ScraperError):
    """The supplied string is not a valid absolute URL."""

    prefix = "failed to parse URL"


class RequestError(ScraperError):
    """The GET request failed at the transport level."""

    prefix = "failure in request"
