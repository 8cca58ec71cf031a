# File: domain_crawler/engine.py
"""domain_crawler.engine: runs a crawl and aggregates its results."""

from __future__ import annotations

import asyncio
from typing import Optional

from domain_crawler.aggregator import CrawlReport, aggregate_results
from domain_crawler.config import CrawlerConfig
from domain_crawler.crawler.crawler import AsyncCrawler
from domain_crawler.crawler.domain import extract_domain_name
from domain_crawler.crawler.fetcher import PageFetcher
from domain_crawler.logger import logger

__all__ = ["start_crawl"]


async def start_crawl(
    cfg: CrawlerConfig,
    url: Optional[str] = None,
    *,
    fetcher: Optional[PageFetcher] = None,
) -> CrawlReport:
    """
    Crawl from ``url`` (default ``cfg.start_url``) and return a CrawlReport.

    Raises asyncio.TimeoutError when ``cfg.crawl_timeout`` elapses first;
    the crawler and its HTTP session are shut down in that case.
    """
    start_url = url or cfg.start_url
    domain = extract_domain_name(start_url)

    async with AsyncCrawler(cfg, fetcher=fetcher) as crawler:
        try:
            visited = await asyncio.wait_for(
                crawler.crawl(start_url, domain), timeout=cfg.crawl_timeout
            )
        except asyncio.TimeoutError:
            logger.error("Crawl did not finish within %s seconds", cfg.crawl_timeout)
            raise
        return aggregate_results(crawler, visited, start_url, domain)
