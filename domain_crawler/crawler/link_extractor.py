# domain_crawler/crawler/link_extractor.py
"""
Link extraction strategies for DomainCrawler.

The default :class:`HrefScanner` is not a markup parser. It looks for the
text ``href``, an ``=`` shortly after it and a quoted value shortly after
that, which tolerates broken or partial markup at the cost of precision:
``href`` in visible text may be picked up, and stylesheet links are
returned just like anchors. Relative references are returned as written.

:class:`SoupLinkExtractor` does the same job with BeautifulSoup and can be
selected through the ``extractor`` config option.
"""
from __future__ import annotations

from typing import List, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

#: Characters after ``href`` searched for ``=``.
EQUALS_WINDOW = 50
#: Characters after ``=`` searched for the opening quote.
QUOTE_WINDOW = 100
QUOTES = ("'", '"')

_HREF = "href"


class LinkExtractor(Protocol):
    def extract(self, content: str) -> List[str]: ...


def extract_links(content: str) -> List[str]:
    """Return ``href`` values found in ``content`` in order of appearance."""
    links: List[str] = []
    offset = 0
    end = len(content)
    while offset < end:
        i = content.find(_HREF, offset)
        if i == -1:
            break

        after = i + len(_HREF)
        eq = content.find("=", after, after + EQUALS_WINDOW)
        if eq == -1:
            offset = after
            continue

        opening = -1
        for pos in range(eq, min(eq + QUOTE_WINDOW, end)):
            if content[pos] in QUOTES:
                opening = pos
                break
        closing = -1 if opening == -1 else content.find(content[opening], opening + 1)
        if closing == -1:
            offset = i + 1
            continue

        links.append(content[opening + 1:closing])
        offset = closing + 1
    return links


class HrefScanner:
    """Bounded-window ``href`` scanner (see :func:`extract_links`)."""

    def extract(self, content: str) -> List[str]:
        return extract_links(content)


class SoupLinkExtractor:
    """Every ``href`` attribute of the document, via BeautifulSoup."""

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def extract(self, content: str) -> List[str]:
        soup = BeautifulSoup(content, self.features)
        links: List[str] = []
        for tag in soup.find_all(href=True):
            if not isinstance(tag, Tag):
                continue
            href_val = tag.get("href")
            if isinstance(href_val, str):
                links.append(href_val)
        return links


_EXTRACTORS = {
    "heuristic": HrefScanner,
    "soup": SoupLinkExtractor,
}


def make_extractor(name: str = "heuristic") -> LinkExtractor:
    """Build the extractor registered under ``name``."""
    try:
        return _EXTRACTORS[name]()
    except KeyError:
        raise ValueError(f"Unknown link extractor: {name!r}") from None


__all__ = (
    "EQUALS_WINDOW",
    "QUOTE_WINDOW",
    "LinkExtractor",
    "HrefScanner",
    "SoupLinkExtractor",
    "extract_links",
    "make_extractor",
)
