"""
Sitemapper package initializer.
Defines package version and exposes the crawl API and CLI.
"""
__version__ = "0.1.0"

from sitemapper.aggregator import Page, Sitemap
from sitemapper.config import CrawlerConfig
from sitemapper.scanner import crawl, start_crawl

# Expose CLI entry point
from .cli import cli

__all__ = ["__version__", "Page", "Sitemap", "CrawlerConfig", "crawl", "start_crawl", "cli"]
