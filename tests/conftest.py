# File: tests/conftest.py
import asyncio
from typing import Awaitable, Callable, Dict, List

import pytest
import pytest_asyncio
from aiohttp import web

from domain_crawler.config import CrawlerConfig
from domain_crawler.crawler.errors import FetchError
from domain_crawler.crawler.models import PageData
from domain_crawler.logger import configure

A = "http://www.example.com/"
B = "http://www.example.com/b"
C = "http://blog.example.com/c"
D = "http://other.org/d"


class SiteGraphFetcher:
    """
    In-memory stand-in for the HTTP fetcher.

    ``pages`` maps URL -> markup; unknown URLs fail like a 404. Every call
    is recorded in ``calls``.
    """

    def __init__(self, pages: Dict[str, str], delay: float = 0.0) -> None:
        self.pages = pages
        self.delay = delay
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        await asyncio.sleep(self.delay)
        if url not in self.pages:
            raise FetchError(url, "HTTP status code: 404. HTTP status message: Not Found", status=404)
        return PageData(url, self.pages[url], requested_url=url)


def anchors(*urls: str) -> str:
    return "".join(f'<a href="{u}">{u}</a>' for u in urls)


@pytest.fixture(autouse=True)
def _fresh_log_handlers():
    """CliRunner swaps sys.stderr; rebuild handlers so later tests log to a live stream."""
    yield
    configure(level="INFO")


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """A valid CrawlerConfig pointing at the mock site."""
    return CrawlerConfig(start_url=A, concurrency=4, timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def small_site() -> SiteGraphFetcher:
    """
    A links to B and C, B links back to A and out of the domain to D,
    C has no links.
    """
    return SiteGraphFetcher(
        {
            A: f"<html><body>{anchors(B)}<a href='{C}'>C</a></body></html>",
            B: f"<html><body>{anchors(A, D)}</body></html>",
            C: "<html><body><p>No links here</p></body></html>",
            D: anchors(A),
        }
    )


@pytest_asyncio.fixture
async def serve_app(unused_tcp_port_factory) -> Callable[[web.Application], Awaitable[str]]:
    """Start aiohttp apps on free ports; returns their base URLs, cleans up afterwards."""
    runners: List[web.AppRunner] = []

    async def _start(app: web.Application) -> str:
        port = unused_tcp_port_factory()
        runner = web.AppRunner(app)
        await runner.setup()
        runners.append(runner)
        await web.TCPSite(runner, "localhost", port).start()
        return f"http://localhost:{port}"

    yield _start
    for runner in runners:
        await runner.cleanup()
