"""domain_crawler.crawler: fetching, link extraction, domain matching and traversal."""

from domain_crawler.crawler.crawler import AsyncCrawler
from domain_crawler.crawler.domain import extract_domain_name, is_in_domain, same_domain
from domain_crawler.crawler.errors import CrawlerError, FetchError, TooManyRedirects, UrlParseError
from domain_crawler.crawler.fetcher import Fetcher
from domain_crawler.crawler.link_extractor import extract_links, make_extractor
from domain_crawler.crawler.models import CrawlFailure, PageData, VisitedSet

__all__ = [
    "AsyncCrawler",
    "CrawlFailure",
    "CrawlerError",
    "FetchError",
    "Fetcher",
    "PageData",
    "TooManyRedirects",
    "UrlParseError",
    "VisitedSet",
    "extract_domain_name",
    "extract_links",
    "is_in_domain",
    "make_extractor",
    "same_domain",
]
