# domain_crawler/crawler/models.py
"""
Data models for the DomainCrawler engine.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(slots=True)
class PageData:
    """A fetched page: final URL (after redirects) and its raw text content."""

    url: str
    content: str
    requested_url: Optional[str] = None
    redirects: int = 0


@dataclass(slots=True, frozen=True)
class CrawlFailure:
    """Why the branch rooted at ``url`` stopped."""

    url: str
    reason: str
    kind: str = "FetchError"


class VisitedSet:
    """
    URLs processed during one crawl.

    :meth:`add_if_absent` is the only way a crawl inserts a URL; the check
    and the insert happen under one lock, so two workers that discover the
    same link cannot both claim it.
    """

    def __init__(self, urls: Iterable[str] = ()) -> None:
        self._urls: set[str] = set(urls)
        self._lock = asyncio.Lock()

    async def add_if_absent(self, url: str) -> bool:
        """Insert ``url``; return False if it was already there."""
        async with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._urls)

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._urls))

    def __len__(self) -> int:
        return len(self._urls)

    def __repr__(self) -> str:
        return f"VisitedSet({sorted(self._urls)!r})"


__all__ = ("PageData", "CrawlFailure", "VisitedSet")
