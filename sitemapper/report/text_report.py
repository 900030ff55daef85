# sitemapper/report/text_report.py

"""
Текстовый отчёт: для каждой страницы её URL, ссылки и ресурсы.
"""
from typing import List

import click

from sitemapper.aggregator import Sitemap


def render_text(sitemap: Sitemap) -> str:
    """Форматирует карту сайта в порядке, в котором её отдаёт контейнер."""
    lines: List[str] = []
    for loc, page in sitemap.items():
        lines.append(loc)
        lines.append(" * links: ")
        lines.extend(f"    - {link}" for link in page.links)
        lines.append(" * assets: ")
        lines.extend(f"    - {asset}" for asset in page.assets)
        lines.append("")
    return "\n".join(lines)


def pretty_print(sitemap: Sitemap) -> None:
    """Печатает текстовый отчёт в stdout."""
    click.echo(render_text(sitemap))
