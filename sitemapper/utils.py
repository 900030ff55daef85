# File: sitemapper/utils.py
"""sitemapper.utils: разбор, разрешение и сравнение URL для краулера."""

from __future__ import annotations

import re
from typing import Sequence
from urllib.parse import SplitResult, quote, urldefrag, urljoin, urlsplit, urlunsplit

from sitemapper.crawler.errors import ParseError

__all__: Sequence[str] = (
    "parse_url",
    "canonical_url",
    "resolve_url",
    "host_of",
    "is_same_host",
)

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# зарезервированные символы и '%' не трогаем, чтобы не экранировать повторно
_PATH_SAFE = "/:@!$&'()*+,;=%"
_QUERY_SAFE = _PATH_SAFE + "?"


def parse_url(raw: str) -> SplitResult:
    """Разбирает URL, бросает ParseError для синтаксически некорректных значений.

    Экранирование проверяется только в пути и фрагменте: query остаётся как есть.
    """
    if _CONTROL_RE.search(raw):
        raise ParseError(raw, "invalid control character")
    try:
        parts = urlsplit(raw)
        # .port валидирует номер порта лениво
        parts.port
    except ValueError as exc:
        raise ParseError(raw, str(exc)) from exc
    if _BAD_ESCAPE_RE.search(parts.path) or _BAD_ESCAPE_RE.search(parts.fragment):
        raise ParseError(raw, "invalid percent-escape")
    return parts


def canonical_url(parts: SplitResult) -> str:
    """Собирает URL обратно, экранируя символы, которые нельзя оставлять как есть."""
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            quote(parts.path, safe=_PATH_SAFE),
            quote(parts.query, safe=_QUERY_SAFE),
            quote(parts.fragment, safe=_QUERY_SAFE),
        )
    )


def resolve_url(raw: str, base: str) -> str:
    """Возвращает канонический абсолютный URL: raw, если задана схема, иначе относительно base."""
    parts = parse_url(raw)
    if parts.scheme:
        return canonical_url(parts)
    if not raw:
        # пустая ссылка указывает на сам документ, без фрагмента base
        return canonical_url(urlsplit(urldefrag(base).url))
    return canonical_url(urlsplit(urljoin(base, raw)))


def host_of(url: str) -> str:
    """Возвращает host[:port] в нижнем регистре, без userinfo."""
    return urlsplit(url).netloc.rpartition("@")[2].lower()


def is_same_host(url: str, host: str) -> bool:
    """Проверяет, что URL указывает на тот же хост (с учётом порта)."""
    try:
        return host_of(url) == host.lower()
    except ValueError:
        return False
