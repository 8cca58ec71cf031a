# domain_crawler/crawler/fetcher.py
"""
Fetcher module: HTTP GET with a bounded chain of permanent redirects.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, Protocol
from urllib.parse import urljoin, urlparse

from aiohttp import ClientError, ClientSession

from domain_crawler.crawler.errors import FetchError, TooManyRedirects
from domain_crawler.crawler.models import PageData
from domain_crawler.logger import logger

#: Status codes that are followed. Everything else but 200 is a failure.
REDIRECT_STATUS = 301
SUPPORTED_SCHEMES = ("http", "https")


class PageFetcher(Protocol):
    """Anything the crawler can ask for the content behind a URL."""

    async def fetch(self, url: str) -> PageData: ...


#: Decides whether a redirect target may be requested.
RedirectPolicy = Callable[[str], Awaitable[bool]]


class Fetcher:
    """Fetches pages through a shared aiohttp session, following 301 redirects."""

    def __init__(
        self,
        session: ClientSession,
        max_redirects: int = 10,
        follow: Optional[RedirectPolicy] = None,
    ) -> None:
        self.session = session
        self.max_redirects = max_redirects
        self.follow = follow

    async def fetch(self, url: str) -> PageData:
        """
        Return the content behind ``url``.

        A 301 with a ``Location`` header is followed (relative locations are
        resolved against the current URL) up to ``max_redirects`` times; a 301
        without one yields an empty page, and so does a target the ``follow``
        policy refuses (it is never requested). Any other non-200 status, an
        unsupported scheme or a network error raises FetchError.
        """
        current = url
        for hop in range(self.max_redirects + 1):
            status, location, body = await self._get(current)
            if status == 200:
                return PageData(current, body, requested_url=url, redirects=hop)
            if not location:
                logger.debug("301 without Location at %s, nothing to read", current)
                return PageData(current, "", requested_url=url, redirects=hop)
            target = urljoin(current, location)
            if hop == self.max_redirects:
                break
            if self.follow is not None and not await self.follow(target):
                logger.debug("Not following redirect %s -> %s", current, target)
                return PageData(current, "", requested_url=url, redirects=hop)
            logger.debug("Redirect %d: %s -> %s", hop + 1, current, target)
            current = target
        raise TooManyRedirects(url, self.max_redirects)

    async def _get(self, url: str) -> tuple[int, Optional[str], str]:
        """
        One request, no redirect handling.

        Returns ``(200, None, body)`` on success or ``(301, location, "")``
        for a permanent redirect; raises FetchError otherwise.
        """
        scheme = urlparse(url).scheme.lower()
        if scheme not in SUPPORTED_SCHEMES:
            raise FetchError(url, f"unsupported URL scheme {scheme!r}")
        try:
            async with self.session.get(url, allow_redirects=False) as resp:
                if resp.status == 200:
                    return 200, None, await resp.text(errors="replace")
                if resp.status == REDIRECT_STATUS:
                    return REDIRECT_STATUS, resp.headers.get("Location"), ""
                raise FetchError(
                    url,
                    f"HTTP status code: {resp.status}. HTTP status message: {resp.reason}",
                    status=resp.status,
                )
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except (ClientError, LookupError, ValueError) as exc:
            raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc


__all__ = ("Fetcher", "PageFetcher", "RedirectPolicy", "REDIRECT_STATUS")
