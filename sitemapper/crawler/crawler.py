# === FILE: sitemapper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from collections import defaultdict
from typing import Dict, Optional, Set, cast

from aiohttp import ClientSession, ClientTimeout

from sitemapper.aggregator import Sitemap, build_sitemap
from sitemapper.config import CrawlerConfig
from sitemapper.crawler.errors import CrawlError
from sitemapper.crawler.fetcher import Fetcher
from sitemapper.crawler.models import Bucket, Complete, Dispatch, LinkKind, Message, Track
from sitemapper.utils import host_of, is_same_host

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """
    Single-host crawler.

    One coordinator owns the visited set, the relation buckets and the
    outstanding-job counter; fetch tasks talk to it only through the message
    queue. The crawl ends when the job counter drops back to zero.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        *,
        logger: Optional[logging.Logger] = None,
        session: Optional[ClientSession] = None,
        fetcher: Optional[Fetcher] = None,
    ) -> None:
        self.config = config
        self.root_url: str = config.root_url
        self.root_host: str = host_of(config.root_url)
        self.concurrency: int = config.concurrency
        self.logger = logger if logger is not None else logging.getLogger("Sitemapper")
        self.session: Optional[ClientSession] = session
        self._owns_session = session is None
        self.fetcher: Optional[Fetcher] = fetcher

        self.visited: Set[str] = set()
        self.links: Dict[str, Set[str]] = defaultdict(set)
        self.assets: Dict[str, Set[str]] = defaultdict(set)
        self.failures: Dict[str, str] = {}
        self._jobs = 0
        self._tasks: Set[asyncio.Task[None]] = set()

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            if self.session is None:
                self.session = ClientSession(
                    timeout=ClientTimeout(total=self.config.timeout),
                    headers={"User-Agent": self.config.user_agent},
                )
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> Sitemap:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        self.logger.debug("Starting crawl: %s", self.root_url)
        start = time.monotonic()

        self.visited = set()
        self.links = defaultdict(set)
        self.assets = defaultdict(set)
        self.failures = {}
        self._jobs = 0

        queue: asyncio.Queue[Message] = asyncio.Queue()
        slots = asyncio.Semaphore(self.concurrency)
        await queue.put(Dispatch(None, self.root_url))

        while True:
            message = await queue.get()
            if isinstance(message, Complete):
                self._complete(message)
                if self._jobs == 0:
                    break
            elif isinstance(message, Dispatch):
                await self._dispatch(message, queue, slots)
                if self._jobs == 0:
                    # the root itself was rejected
                    break
            elif isinstance(message, Track):
                self._track(message)

        duration = time.monotonic() - start
        self.logger.debug(
            "Crawl finished: %d pages in %.2f s, %d failed", len(self.visited), duration, len(self.failures)
        )
        return build_sitemap(self.visited, self.links, self.assets)

    async def _dispatch(self, op: Dispatch, queue: asyncio.Queue[Message], slots: asyncio.Semaphore) -> None:
        self.logger.debug("Processing page %r referenced by %r...", op.target, op.source)
        if op.target in self.visited:
            self.logger.debug("Skipping page %r, already visited", op.target)
            return
        if not is_same_host(op.target, self.root_host):
            self.logger.debug("Skipping page %r due to host mismatch", op.target)
            return

        self._jobs += 1
        self.visited.add(op.target)

        await slots.acquire()
        task = asyncio.create_task(self._process(op.source, op.target, queue, slots))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _track(self, op: Track) -> None:
        if op.source is None:
            return
        bucket = self.links if op.bucket is Bucket.LINKS else self.assets
        bucket[op.source].add(op.target)

    def _complete(self, op: Complete) -> None:
        self._jobs -= 1
        if self._jobs < 0:
            raise RuntimeError("job counter went negative")
        if op.error is not None:
            self.failures[op.url] = str(op.error)

    async def _process(
        self,
        source: Optional[str],
        target: str,
        queue: asyncio.Queue[Message],
        slots: asyncio.Semaphore,
    ) -> None:
        fetcher = cast(Fetcher, self.fetcher)
        error: Optional[Exception] = None
        try:
            references = await fetcher.fetch(target)
        except CrawlError as exc:
            self.logger.warning("could not process URL %r: %s", target, exc)
            error = exc
        except Exception as exc:
            self.logger.exception("unexpected error while processing URL %r", target)
            error = exc
        else:
            queue.put_nowait(Track(Bucket.LINKS, source, target))
            for ref in references:
                if ref.kind is LinkKind.ASSET:
                    queue.put_nowait(Track(Bucket.ASSETS, target, ref.url))
                else:
                    queue.put_nowait(Track(Bucket.LINKS, target, ref.url))
                    queue.put_nowait(Dispatch(target, ref.url))
        finally:
            queue.put_nowait(Complete(target, error))
            slots.release()
