# === FILE: page_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа PageScout для командной строки.

Команды:
  crawl     Обойти граф ссылок от seed-адреса и вывести/сохранить отчёт
  signals   Извлечь заголовок, h1/h2 и ключевые слова одной страницы
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Дополнительно:
  --version, -v       Показать версию PageScout

Пример:
  page-scout crawl https://es.wikipedia.org/wiki/Wikipedia:Portada --depth 1 --json report.json
"""
import json
import sys
from pathlib import Path

import click

from page_scout import __version__
from page_scout.aggregator import aggregate_results
from page_scout.config import load_config
from page_scout.engine import build_crawl_graph, extract_signals
from page_scout.errors import ScoutError
from page_scout.logger import DEFAULT_FORMAT, init_logging, logger
from page_scout.report.html_report import render_html
from page_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def resolve_address(cfg, address):
    target = address or cfg.seed
    if not target:
        print_error('Не указан адрес: передайте его аргументом или задайте seed в конфиге')
    return target


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageScout, version %(version)s')
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
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд PageScout CLI."""
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
@click.argument('seed', required=False)
@click.option(
    '--depth', '-d', 'max_depth',
    type=click.IntRange(min=0),
    default=None,
    help='Максимальная глубина обхода (override max_depth)'
)
@click.option(
    '--concurrency', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Число параллельных загрузчиков (1 - строгий порядок BFS)'
)
@click.option(
    '--signals', 'with_signals', is_flag=True,
    help='Добавить в отчёт сигналы seed-страницы'
)
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
    help='Папка с шаблоном report.html.j2 (по умолчанию встроенный)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def crawl(ctx, seed, max_depth, concurrency, with_signals, json_output, html_output, template_dir, pretty):
    """Обойти граф ссылок и сгенерировать отчёт."""
    cfg = ctx.obj['config']
    if concurrency is not None:
        cfg = cfg.model_copy(update={'concurrency': concurrency})
    target = resolve_address(cfg, seed)
    depth = cfg.max_depth if max_depth is None else max_depth
    logger.info('Запуск обхода: %s (глубина %d)', target, depth)

    try:
        result = build_crawl_graph(target, depth, cfg)
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    signals = None
    if with_signals:
        try:
            signals = extract_signals(target, cfg)
        except ScoutError as e:
            click.secho(f'Сигналы не получены: {e}', fg='yellow', err=True)

    report = aggregate_results(result, signals)

    # Если не сохраняем в файл, печатаем в stdout
    if not json_output and not html_output:
        click.echo(report.json(pretty=pretty))
        return

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('signals', context_settings=CONTEXT_SETTINGS)
@click.argument('address', required=False)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=0),
    default=None,
    help='Вывести только первые N ключевых слов'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def signals(ctx, address, limit, pretty):
    """Извлечь заголовок, h1/h2 и ключевые слова страницы."""
    cfg = ctx.obj['config']
    target = resolve_address(cfg, address)
    try:
        page = extract_signals(target, cfg)
    except ScoutError as e:
        print_error(f'Ошибка извлечения ключевых слов из {target}: {e.reason}')

    data = page.as_dict()
    if limit is not None:
        data['keywords'] = data['keywords'][:limit]
    click.echo(json.dumps(data, ensure_ascii=False, indent=2 if pretty else None))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
