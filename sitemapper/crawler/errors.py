# sitemapper/crawler/errors.py
"""
Exceptions raised while fetching and parsing pages.

None of them is fatal to a crawl: the coordinator logs the failure and the
affected page simply contributes no edges.
"""
from __future__ import annotations

from typing import Optional


class CrawlError(Exception):
    """Base class for per-page crawl failures."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class FetchError(CrawlError):
    """Network or transport failure (including per-request timeouts)."""

    def __init__(self, url: str, cause: BaseException) -> None:
        detail = str(cause) or type(cause).__name__
        super().__init__(url, f"request to {url} failed: {detail}")
        self.cause = cause


TransportError = FetchError


class UnsupportedContentError(CrawlError):
    """The response is not an HTML document."""

    def __init__(self, url: str, content_type: Optional[str]) -> None:
        super().__init__(url, f"cannot process non-HTML content ({content_type or 'no content-type'})")
        self.content_type = content_type


class HTMLParseError(CrawlError):
    """The HTML parser rejected the document outright."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(url, f"could not parse HTML from {url}: {cause}")
        self.cause = cause


class ParseError(ValueError):
    """Malformed URL text."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"invalid URL {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


__all__ = (
    "CrawlError",
    "FetchError",
    "TransportError",
    "UnsupportedContentError",
    "HTMLParseError",
    "ParseError",
)
