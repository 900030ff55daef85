# sitemapper/report/json_report.py

"""
Генерация JSON-отчёта для проекта Sitemapper.

Сериализация объекта Sitemap в файл.
"""
import json
from pathlib import Path

from sitemapper.aggregator import Sitemap


def render_json(sitemap: Sitemap, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет карту сайта в формате JSON по указанному пути.

    :param sitemap: объект Sitemap, результат обхода
    :param output_path: путь к JSON-файлу
    :param pretty: форматировать с отступом 2
    :return: Path сохранённого файла

    Пример:
    ```python
    from sitemapper.report.json_report import render_json
    report_path = render_json(sitemap, 'reports/sitemap.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(sitemap.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
