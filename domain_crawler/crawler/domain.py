# domain_crawler/crawler/domain.py
"""
Domain name helpers: the crawl boundary is the last two labels of a host.
"""
from __future__ import annotations

from urllib.parse import urlparse

from domain_crawler.crawler.errors import UrlParseError
from domain_crawler.logger import logger

__all__ = ("parse_host", "extract_domain_name", "is_in_domain", "same_domain")


def parse_host(url: str) -> str:
    """Return the (lower-cased) host of an absolute URL or raise UrlParseError."""
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError as exc:
        raise UrlParseError(url, str(exc)) from exc
    if not parsed.scheme or not host:
        raise UrlParseError(url)
    return host


def extract_domain_name(url: str) -> str:
    """
    Two-level domain name of ``url``: ``https://www.example.com/a`` -> ``example.com``.

    Hosts with fewer than two labels are returned whole. Returns ``""`` when
    the URL cannot be parsed or has no scheme or host.
    """
    try:
        host = parse_host(url)
    except UrlParseError as exc:
        # relative links land here on every page
        logger.debug("Could not determine domain name: %s", exc)
        return ""
    return ".".join(host.split(".")[-2:])


def is_in_domain(url: str, domain: str) -> bool:
    """True when ``url`` belongs to the (non-empty) domain name ``domain``."""
    return bool(domain) and extract_domain_name(url) == domain


def same_domain(url_a: str, url_b: str) -> bool:
    """True iff both URLs have the same non-empty domain name."""
    return is_in_domain(url_a, extract_domain_name(url_b))
