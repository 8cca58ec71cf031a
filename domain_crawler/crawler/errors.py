# domain_crawler/crawler/errors.py
"""
Exception hierarchy of the crawler.

Every error here is contained at the level of a single URL: the crawl
records it and carries on with the remaining branches.
"""
from __future__ import annotations

from typing import Optional


class CrawlerError(Exception):
    """Base class for all crawler errors."""


class UrlParseError(CrawlerError, ValueError):
    """No host could be derived from a URL."""

    def __init__(self, url: str, reason: str = "no scheme or host") -> None:
        super().__init__(f"Cannot parse URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class FetchError(CrawlerError):
    """Network failure or unexpected HTTP status while fetching a URL."""

    def __init__(self, url: str, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.message = message

    def __str__(self) -> str:
        return f"{self.url}: {self.message}"


class TooManyRedirects(FetchError):
    """The redirect chain starting at ``url`` is longer than allowed."""

    def __init__(self, url: str, max_redirects: int) -> None:
        super().__init__(url, f"more than {max_redirects} redirects", status=301)
        self.max_redirects = max_redirects


__all__ = ("CrawlerError", "UrlParseError", "FetchError", "TooManyRedirects")
