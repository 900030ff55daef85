"""Crawl core: link extraction, fetching and the coordinating crawler."""
from sitemapper.crawler.crawler import AsyncCrawler
from sitemapper.crawler.errors import (
    CrawlError,
    FetchError,
    HTMLParseError,
    ParseError,
    TransportError,
    UnsupportedContentError,
)
from sitemapper.crawler.fetcher import Fetcher
from sitemapper.crawler.link_extractor import find_links
from sitemapper.crawler.models import LinkKind, Reference

__all__ = [
    "AsyncCrawler",
    "CrawlError",
    "FetchError",
    "HTMLParseError",
    "ParseError",
    "TransportError",
    "UnsupportedContentError",
    "Fetcher",
    "find_links",
    "LinkKind",
    "Reference",
]
