"""Run command - executes a benchmark and saves its reports."""

import asyncio
import sys

import click

from crawlbench.benchmark.results import OutputFormat, ReportWriter
from crawlbench.benchmark.runner import run_benchmarks
from crawlbench.commands.scenarios_cmd import build_registry, print_scenarios
from crawlbench.config import load_settings, resolve_config
from crawlbench.models.benchmark_models import BenchmarkConfig
from crawlbench.models.constants import CrawlerType
from crawlbench.scenarios import Scenario, ScenarioNotFoundError
from crawlbench.utils.env import EnvVarError


def _print_header(config: BenchmarkConfig, crawler: str) -> None:
    click.echo("=" * 60)
    click.echo("  CRAWLER BENCHMARK: Playwright vs BeautifulSoup")
    click.echo("=" * 60)
    click.echo(f"URL:        {config.url}")
    click.echo(f"Max Pages:  {config.max_pages}")
    click.echo(f"Max Depth:  {config.max_depth}")
    click.echo(f"Iterations: {config.iterations}")
    click.echo(f"Timeout:    {config.timeout}ms")
    click.echo(f"Crawler:    {crawler}")
    click.echo("=" * 60)


def run_benchmark(
    url: str | None = None,
    max_pages: int | None = None,
    max_depth: int | None = None,
    iterations: int | None = None,
    timeout: int | None = None,
    crawler: str | None = None,
    scenario_name: str | None = None,
    scenarios_file: str | None = None,
    results_dir: str | None = None,
    fmt: str = "text",
    save: bool = True,
    list_only: bool = False,
) -> None:
    """Resolve configuration, run every iteration, then save and print reports.

    Failed iterations are part of the report and do not change the exit
    status. Configuration problems raise ``click.ClickException``.
    """
    registry = build_registry(scenarios_file)
    if list_only:
        print_scenarios(registry)
        return

    scenario: Scenario | None = None
    if scenario_name:
        try:
            scenario = registry.get(scenario_name)
        except ScenarioNotFoundError as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"Using scenario: {scenario.name} ({scenario.description})")

    try:
        settings = load_settings(results_dir)
        config = resolve_config(
            url=url,
            max_pages=max_pages,
            max_depth=max_depth,
            iterations=iterations,
            timeout=timeout,
            scenario=scenario,
        )
        selection = crawler or settings.default_crawler
        crawler_types = CrawlerType.parse_selection(selection)
    except (EnvVarError, ValueError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    _print_header(config, selection)

    report = asyncio.run(run_benchmarks(config, crawler_types, settings=settings))
    writer = ReportWriter(report)

    if save:
        json_path, text_path = writer.save(settings.results_dir)
        click.echo("\n" + "=" * 60)
        click.echo("Benchmark completed!")
        click.echo(f"JSON report: {json_path}")
        click.echo(f"Text report: {text_path}")
        click.echo("=" * 60)

    click.echo()
    writer.emit(sys.stdout, OutputFormat(fmt))

    summary = writer.summary_line()
    if summary:
        click.echo(f"\nSummary: {summary}")

    failed = sum(1 for r in report.results if r.metrics.pages_failed)
    if failed:
        click.echo(f"\n{failed} of {len(report.results)} iterations failed")
