# === FILE: domain_crawler/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import Dict, List, Optional, Set
from urllib.parse import urldefrag, urljoin

from aiohttp import ClientSession, ClientTimeout

from domain_crawler.config import CrawlerConfig
from domain_crawler.crawler.domain import extract_domain_name
from domain_crawler.crawler.errors import FetchError
from domain_crawler.crawler.fetcher import Fetcher, PageFetcher
from domain_crawler.crawler.link_extractor import LinkExtractor, make_extractor
from domain_crawler.crawler.models import CrawlFailure, PageData, VisitedSet
from domain_crawler.logger import LOGGER_NAME

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """
    Asynchronous single-domain crawler.

    Pages are processed by ``config.concurrency`` worker tasks fed from one
    queue. A URL enters the queue only after it has been claimed in the
    shared :class:`VisitedSet`, so each URL is fetched at most once.
    """

    def __init__(
        self,
        config: Optional[CrawlerConfig] = None,
        *,
        fetcher: Optional[PageFetcher] = None,
        extractor: Optional[LinkExtractor] = None,
    ) -> None:
        self.config = config or CrawlerConfig()
        self.concurrency: int = self.config.concurrency
        self.fetcher = fetcher
        self.extractor = extractor or make_extractor(self.config.extractor)
        self.session: Optional[ClientSession] = None
        self.external_links: Set[str] = set()
        self.failures: Dict[str, CrawlFailure] = {}
        self.pages_fetched = 0
        self._domain = ""
        self._visited: Optional[VisitedSet] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
            self.fetcher = Fetcher(
                self.session,
                max_redirects=self.config.max_redirects,
                follow=self._claim_redirect,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(
        self,
        url: Optional[str] = None,
        domain: Optional[str] = None,
        visited: Optional[VisitedSet] = None,
    ) -> VisitedSet:
        """
        Crawl everything reachable from ``url`` inside ``domain``.

        ``url`` defaults to ``config.start_url`` and ``domain`` to its domain
        name. Passing an existing ``visited`` set continues a crawl; a ``url``
        already in it returns immediately without any request.
        """
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized, use 'async with AsyncCrawler(...)'")
        url = url or self.config.start_url
        domain = extract_domain_name(url) if domain is None else domain
        visited = VisitedSet() if visited is None else visited
        self._domain, self._visited = domain, visited

        if not await visited.add_if_absent(url):
            self.logger.debug("Already visited: %s", url)
            return visited

        self.logger.info("Starting crawl at %s (domain %r, %d workers)", url, domain, self.concurrency)
        start = time.monotonic()
        queue: asyncio.Queue[str] = asyncio.Queue()
        await queue.put(url)
        workers = [
            asyncio.create_task(self._worker(queue, domain, visited))
            for _ in range(self.concurrency)
        ]
        try:
            await queue.join()
        finally:
            for w in workers:
                w.cancel()
            await asyncio.gather(*workers, return_exceptions=True)

        duration = time.monotonic() - start
        self.logger.info(
            "Finished: %d URLs visited, %d pages fetched in %.2f s",
            len(visited), self.pages_fetched, duration,
        )
        if self.failures:
            self.logger.info("Failed: %d", len(self.failures))
        return visited

    async def _worker(self, queue: asyncio.Queue[str], domain: str, visited: VisitedSet) -> None:
        while True:
            url = await queue.get()
            try:
                await self._process(url, domain, visited, queue)
            except FetchError as exc:
                self.logger.warning("Error occurred while fetching %s", exc)
                self.failures[url] = CrawlFailure(url, exc.message, type(exc).__name__)
            except Exception as exc:
                self.logger.exception("Unexpected error on %s", url)
                self.failures[url] = CrawlFailure(url, str(exc), type(exc).__name__)
            finally:
                queue.task_done()

    async def _claim_redirect(self, target: str) -> bool:
        """Redirect policy: only unvisited in-domain targets are requested, and they get claimed."""
        if extract_domain_name(target) != self._domain:
            self.external_links.add(target)
            return False
        if self._visited is None or not await self._visited.add_if_absent(target):
            self.logger.debug("Redirect target already visited: %s", target)
            return False
        return True

    async def _process(
        self, url: str, domain: str, visited: VisitedSet, queue: asyncio.Queue[str]
    ) -> None:
        page = await self.fetcher.fetch(url)  # type: ignore[union-attr]
        self.pages_fetched += 1
        if not page.content:
            return
        queued = 0
        for link in self._links(page):
            link_domain = extract_domain_name(link)
            if not link_domain:
                continue
            if link_domain != domain:
                self.external_links.add(link)
            elif await visited.add_if_absent(link):
                await queue.put(link)
                queued += 1
        self.logger.debug("Fetched %s, queued %d new links", url, queued)

    def _links(self, page: PageData) -> List[str]:
        links = self.extractor.extract(page.content)
        if self.config.resolve_relative:
            links = [urldefrag(urljoin(page.url, link))[0] for link in links]
        return links
