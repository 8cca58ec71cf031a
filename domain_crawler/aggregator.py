# File: domain_crawler/aggregator.py
"""domain_crawler.aggregator: crawl report assembled from a finished crawler."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, TypedDict

from domain_crawler.crawler.crawler import AsyncCrawler
from domain_crawler.crawler.models import VisitedSet


class FailureInfo(TypedDict):
    """A URL whose branch stopped with an error."""

    url: str
    kind: str
    reason: str


@dataclass(slots=True)
class CrawlReport:
    """Result of one crawl: visited URLs, links leaving the domain, failures."""

    start_url: str
    domain: str
    visited: List[str] = field(default_factory=list)
    external_links: List[str] = field(default_factory=list)
    failures: List[FailureInfo] = field(default_factory=list)
    pages_fetched: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_url": self.start_url,
            "domain": self.domain,
            "visited": self.visited,
            "external_links": self.external_links,
            "failures": self.failures,
            "pages_fetched": self.pages_fetched,
        }

    def json(self, *, pretty: bool = False) -> str:
        """Serialize the report to a JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(
    crawler: AsyncCrawler, visited: VisitedSet, start_url: str, domain: str
) -> CrawlReport:
    """Build a :class:`CrawlReport` from a crawler that has finished."""
    failures: List[FailureInfo] = [
        {"url": f.url, "kind": f.kind, "reason": f.reason}
        for f in sorted(crawler.failures.values(), key=lambda f: f.url)
    ]
    return CrawlReport(
        start_url=start_url,
        domain=domain,
        visited=list(visited),
        external_links=sorted(crawler.external_links),
        failures=failures,
        pages_fetched=crawler.pages_fetched,
    )


__all__ = ["CrawlReport", "FailureInfo", "aggregate_results"]
