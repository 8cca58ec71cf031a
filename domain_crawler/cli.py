# === FILE: domain_crawler/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of DomainCrawler.

Commands:
  crawl [URL]   Crawl every page of URL's domain and print/save the result
  config        Show the effective configuration

Common options:
  --config PATH       Path to a YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only when omitted)
  --log-format FORMAT Logging format string

crawl options:
  --concurrency INT     Pages fetched in parallel
  --max-redirects INT   Longest 301 chain followed
  --crawl-timeout SEC   Deadline for the whole crawl
  --extractor NAME      heuristic | soup
  --resolve-relative    Resolve relative links against the page URL
  --json PATH           Save a JSON report
  --html PATH           Save an HTML report
  --template DIR        Directory with report.html.j2
  --pretty              Print the report as indented JSON instead of plain lines

Example:
  domain-crawler crawl https://www.example.com/ --concurrency 4 --json crawl.json
"""
import sys
import asyncio
from pathlib import Path

import click
from pydantic import ValidationError

from domain_crawler import __version__
from domain_crawler.config import CrawlerConfig, load_config
from domain_crawler.crawler.domain import extract_domain_name
from domain_crawler.engine import start_crawl
from domain_crawler.logger import DEFAULT_FORMAT, init_logging
from domain_crawler.report.html_report import render_html
from domain_crawler.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='DomainCrawler, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """DomainCrawler command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option('--concurrency', type=click.IntRange(min=1), default=None,
              help='Pages fetched in parallel (override config)')
@click.option('--max-redirects', 'max_redirects', type=click.IntRange(min=0), default=None,
              help='Longest chain of 301 redirects followed (override config)')
@click.option('--crawl-timeout', 'crawl_timeout', type=float, default=None,
              help='Deadline for the whole crawl (seconds)')
@click.option('--extractor', type=click.Choice(['heuristic', 'soup']), default=None,
              help='Link extraction strategy')
@click.option('--resolve-relative/--no-resolve-relative', 'resolve_relative', default=None,
              help='Resolve relative links against the page URL')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to a file'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save an HTML report to a file'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory with Jinja2 templates (packaged template by default)'
)
@click.option('--pretty', is_flag=True, help='Print the whole report as indented JSON')
@click.pass_context
def crawl(ctx, url, concurrency, max_redirects, crawl_timeout, extractor, resolve_relative,
          json_output, html_output, template_dir, pretty):
    """Crawl all pages of URL's domain and list the visited URLs."""
    base: CrawlerConfig = ctx.obj['config']
    overrides = {
        'start_url': url,
        'concurrency': concurrency,
        'max_redirects': max_redirects,
        'crawl_timeout': crawl_timeout,
        'extractor': extractor,
        'resolve_relative': resolve_relative,
    }
    try:
        cfg = CrawlerConfig(**{**base.model_dump(), **{k: v for k, v in overrides.items() if v is not None}})
    except ValidationError as e:
        print_error(f'Invalid options: {e}')

    click.echo(f'Starting crawl at "{cfg.start_url}"')
    click.echo(f'Limiting crawl to the domain "{extract_domain_name(cfg.start_url)}"')
    try:
        report = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {cfg.crawl_timeout} seconds')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(report, json_output)}')
        except OSError as e:
            print_error(f'Failed to save JSON report: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(report, template_dir, html_output)}')
        except Exception as e:
            print_error(f'Failed to save HTML report: {e}')

    if json_output or html_output:
        return

    if pretty:
        click.echo(report.json(pretty=True))
        return

    click.echo('LINKS')
    for link in report.visited:
        click.echo(f' {link}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
