# === FILE: sitemapper/scanner.py ===
"""
Точка входа библиотеки: запуск обхода и получение карты сайта.
"""
from __future__ import annotations

import logging
from typing import Optional

from aiohttp import ClientSession

from sitemapper.aggregator import Sitemap
from sitemapper.config import CrawlerConfig
from sitemapper.crawler.crawler import AsyncCrawler


async def start_crawl(
    cfg: CrawlerConfig,
    *,
    logger: Optional[logging.Logger] = None,
    session: Optional[ClientSession] = None,
) -> Sitemap:
    """
    Запускает асинхронный краулер в контексте и возвращает Sitemap.

    Parameters
    ----------
    cfg : CrawlerConfig
        Конфигурация обхода.
    logger : logging.Logger, optional
        Логгер для отладочных сообщений и предупреждений.
    session : aiohttp.ClientSession, optional
        Собственный HTTP-клиент; краулер его не закрывает.
    """
    async with AsyncCrawler(cfg, logger=logger, session=session) as crawler:
        return await crawler.crawl()


async def crawl(
    root_url: str,
    *,
    concurrency: int = 8,
    timeout: float = 30.0,
    logger: Optional[logging.Logger] = None,
    session: Optional[ClientSession] = None,
) -> Sitemap:
    """Обходит сайт начиная с root_url и возвращает Sitemap."""
    cfg = CrawlerConfig(root_url=root_url, concurrency=concurrency, timeout=timeout)
    return await start_crawl(cfg, logger=logger, session=session)


__all__ = ["start_crawl", "crawl"]
