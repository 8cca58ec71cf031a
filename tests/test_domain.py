# File: tests/test_domain.py
import pytest

from domain_crawler.crawler.domain import extract_domain_name, is_in_domain, parse_host, same_domain
from domain_crawler.crawler.errors import UrlParseError


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://www.wiprodigital.com", "wiprodigital.com"),
        ("http://www.example.com/path?q=1", "example.com"),
        ("http://example.com", "example.com"),
        ("https://a.b.c.example.co.uk/x", "co.uk"),
        ("http://localhost:8080/page", "localhost"),
        ("ftp://files.example.org/pub", "example.org"),
        ("http://WWW.Example.COM/", "example.com"),
    ],
)
def test_extract_domain_name(url, expected):
    assert extract_domain_name(url) == expected


@pytest.mark.parametrize(
    "url",
    ["not a url", "//s.w.org", "/relative/path", "", "mailto:someone@example.com", "http://[::1"],
)
def test_extract_domain_name_unparsable(url):
    assert extract_domain_name(url) == ""


def test_parse_host_raises():
    with pytest.raises(UrlParseError):
        parse_host("//s.w.org")
    # UrlParseError is also a ValueError
    with pytest.raises(ValueError):
        parse_host("http://[::1")


def test_same_domain_symmetric_and_reflexive():
    a = "http://www.example.com/a"
    b = "https://blog.example.com/b"
    assert same_domain(a, a)
    assert same_domain(a, b)
    assert same_domain(b, a)
    assert not same_domain(a, "http://example.org/")


def test_same_domain_false_for_empty_domains():
    assert not same_domain("not a url", "not a url")
    assert not same_domain("/x", "http://www.example.com/")
    assert not same_domain("http://www.example.com/", "/x")


def test_is_in_domain():
    assert is_in_domain("http://www.example.com/x", "example.com")
    assert not is_in_domain("http://www.example.com/x", "")
    assert not is_in_domain("/x", "example.com")
