# File: sitemapper/report/__init__.py
"""sitemapper.report: вывод карты сайта (текст, JSON и HTML) для CLI и тестов."""

from __future__ import annotations

from sitemapper.report.html_report import render_html
from sitemapper.report.json_report import render_json
from sitemapper.report.text_report import pretty_print, render_text

__all__ = ["render_json", "render_html", "render_text", "pretty_print"]
