# sitemapper/crawler/fetcher.py
"""
Fetcher module: performs one HTTP GET per page and hands HTML bodies to the
link extractor.
"""
from __future__ import annotations

import asyncio
from typing import List

from aiohttp import ClientError, ClientSession

from sitemapper.crawler.errors import FetchError, UnsupportedContentError
from sitemapper.crawler.link_extractor import find_links
from sitemapper.crawler.models import Reference

HTML_MIME = "text/html"


class Fetcher:
    """Fetches pages through a caller-supplied aiohttp session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> List[Reference]:
        """
        GET *url* and return the references found in its HTML body.

        Raises FetchError on transport failures and timeouts, and
        UnsupportedContentError when the response is not HTML. The response
        is released on every exit path.
        """
        try:
            async with self.session.get(url) as resp:
                ctype = resp.headers.get("Content-Type", "")
                if not ctype.lower().startswith(HTML_MIME):
                    raise UnsupportedContentError(url, ctype)
                body = await resp.read()
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, exc) from exc

        return find_links(body, url)
