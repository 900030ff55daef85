#!/usr/bin/env python3
"""
Точка входа для запуска краулера Sitemapper через командную строку.

Команды:
  crawl     Обойти сайт и вывести/сохранить карту сайта
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --start URL         Корневой URL обхода
  --concurrency INT   Максимум одновременных запросов
  --timeout SEC       Таймаут одного запроса (секунд)
  --verbose           Печатать отладочную информацию
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON-отчёт (отступ 2)

Пример:
  sitemapper crawl --start http://example.com --concurrency 4 --json sitemap.json --pretty
"""
import sys
import asyncio
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from sitemapper import __version__
from sitemapper.config import load_config
from sitemapper.logger import init_logging, logger, null_logger
from sitemapper.scanner import start_crawl
from sitemapper.report.json_report import render_json
from sitemapper.report.html_report import render_html
from sitemapper.report.text_report import pretty_print

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='Sitemapper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд Sitemapper CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option('--start', '-s', 'start', default=None, help='Корневой URL обхода.')
@click.option(
    '--concurrency', '-n', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Максимум одновременных запросов.'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут одного запроса (секунд).')
@click.option('--verbose', is_flag=True, help='Печатать отладочную информацию.')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (встроенный шаблон, если не указана)'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-отчёт (отступ 2)')
@click.pass_context
def crawl(ctx, start, concurrency, timeout, verbose, json_output, html_output, template_dir, pretty):
    """Обойти сайт и сгенерировать карту сайта."""
    try:
        cfg = ctx.obj['config'].override(root_url=start, concurrency=concurrency, timeout=timeout)
    except ValidationError as e:
        print_error(f'Неверные параметры обхода: {e}')

    if verbose:
        logger.setLevel(logging.DEBUG)
        crawl_logger = logger
    else:
        crawl_logger = null_logger()

    try:
        sitemap = asyncio.run(start_crawl(cfg, logger=crawl_logger))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    # Без файлов отчёта печатаем в stdout
    if not json_output and not html_output:
        pretty_print(sitemap)
        return

    if json_output:
        try:
            saved_json = render_json(sitemap, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(sitemap, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
