# File: sitemapper/aggregator.py
"""sitemapper.aggregator: сборка итоговой карты сайта из накопленных связей."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Set


@dataclass(slots=True)
class Page:
    """Исходящие ссылки страницы: ссылки на другие страницы и ресурсы (css, js, картинки)."""

    links: List[str] = field(default_factory=list)
    assets: List[str] = field(default_factory=list)


class Sitemap(Dict[str, Page]):
    """Отображение URL посещённой страницы -> Page."""

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {loc: asdict(page) for loc, page in self.items()}

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление карты сайта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def build_sitemap(
    visited: Iterable[str],
    links: Mapping[str, Set[str]],
    assets: Mapping[str, Set[str]],
) -> Sitemap:
    """Строит Sitemap: по записи на каждый посещённый URL, списки отсортированы.

    Порядок ключей и содержимое списков не зависят от порядка завершения задач.
    """
    sitemap = Sitemap()
    for loc in sorted(set(visited)):
        sitemap[loc] = Page(
            links=sorted(links.get(loc, ())),
            assets=sorted(assets.get(loc, ())),
        )
    return sitemap


__all__ = ["Page", "Sitemap", "build_sitemap"]
