# File: tests/conftest.py
from collections.abc import AsyncIterator
from typing import Dict

import pytest
from aiohttp import web

from sitemapper.config import CrawlerConfig


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


def html_app(pages: Dict[str, str], hits: Dict[str, int] | None = None) -> web.Application:
    """
    Build an app serving each path in *pages* as an HTML document.
    Requests are counted per path in *hits* when given.
    """
    app = web.Application()

    def make_handler(path: str, body: str):
        async def handler(_):
            if hits is not None:
                hits[path] = hits.get(path, 0) + 1
            return web.Response(text=body, content_type="text/html")

        return handler

    for path, body in pages.items():
        app.router.add_get(path, make_handler(path, body))
    return app


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """Return a basic valid CrawlerConfig for crawler tests."""
    return CrawlerConfig(
        root_url="http://example.com",
        concurrency=4,
        timeout=2.0,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def example_html() -> str:
    """The reference page used by the link extraction tests."""
    return """
<html>
  <head>
    <link rel="stylesheet" type="text/css" href="http://example.com/base.css" />
    <link rel="stylesheet" type="text/css" href="../buttons.css" />
  </head>
  <body>
    <h1>Some web page</h1>
    <a href="https://golang.org"><img src="https://golang.org/doc/gopher/frontpage.png"/></a>
    <script src="scripts.js"></script>
  </body>
</html>
"""
