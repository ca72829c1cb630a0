"""Compare command - re-renders a saved benchmark report."""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from crawlbench.benchmark.results import (
    OutputFormat,
    ReportWriter,
    find_latest_report,
    load_report,
)
from crawlbench.config import load_settings
from crawlbench.errors import CrawlbenchError
from crawlbench.utils.env import EnvVarError


def _locate(report_path: str | None, results_dir: str | None) -> Path:
    if report_path is not None:
        return Path(report_path)
    try:
        settings = load_settings(results_dir)
    except (EnvVarError, ValidationError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    try:
        return find_latest_report(settings.results_dir)
    except CrawlbenchError as e:
        raise click.ClickException(str(e)) from e


def run_compare(
    report_path: str | None = None,
    results_dir: str | None = None,
    fmt: str = "text",
) -> None:
    """Print a saved report, by default the newest one in the results directory.

    Raises:
        click.ClickException: If no report exists or it cannot be read.
    """
    path = _locate(report_path, results_dir)
    try:
        report = load_report(path)
    except CrawlbenchError as e:
        raise click.ClickException(str(e)) from e
    except ValidationError as e:
        raise click.ClickException(f"Invalid benchmark report {path}: {e}") from e

    click.echo(f"Report: {path}\n")
    ReportWriter(report).emit(sys.stdout, OutputFormat(fmt))

    if report.comparison is None:
        click.echo("\nNo comparison available: the report covers a single crawler.")
