# File: domain_crawler/report/__init__.py
"""domain_crawler.report: JSON and HTML renderers for a CrawlReport."""

from domain_crawler.report.html_report import render_html
from domain_crawler.report.json_report import render_json

__all__ = ["render_json", "render_html"]
