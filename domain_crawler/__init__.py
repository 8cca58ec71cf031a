"""
DomainCrawler package initializer.
The command line lives in :mod:`domain_crawler.cli` (console script ``domain-crawler``).
"""
__version__ = "0.1.0"
