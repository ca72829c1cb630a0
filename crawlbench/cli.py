#!/usr/bin/env python3
"""crawlbench CLI - benchmark browser and HTTP crawlers side by side."""

import click

from crawlbench.models.constants import SELECTION_CHOICES
from crawlbench.utils.env import get_env
from crawlbench.utils.logger import Logger

FORMAT_CHOICES = ["text", "json", "yaml"]


@click.group()
def crawlbench():
    """Timing and memory benchmarks for Playwright and BeautifulSoup crawlers."""
    if not Logger.is_configured():
        Logger.configure(
            level=get_env("CRAWLBENCH_LOG_LEVEL", default="INFO"),
            output="stderr",
            timestamps=True,
        )


@crawlbench.command()
@click.option("--url", "-u", default=None, help="Start URL to benchmark")
@click.option(
    "--max-pages",
    "-p",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum pages per crawl",
)
@click.option(
    "--max-depth",
    "-d",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum link depth",
)
@click.option(
    "--iterations",
    "-i",
    type=click.IntRange(min=1),
    default=None,
    help="Iterations per crawler (default: 1)",
)
@click.option(
    "--timeout",
    "-t",
    type=click.IntRange(min=1),
    default=None,
    help="Per-request timeout in milliseconds (default: 30000)",
)
@click.option(
    "--crawler",
    "-c",
    type=click.Choice(SELECTION_CHOICES, case_sensitive=False),
    default=None,
    help="Crawler(s) to run (default: both, or BENCHMARK_CRAWLER)",
)
@click.option("--scenario", "-s", default=None, help="Named scenario preset")
@click.option(
    "--list-scenarios",
    "list_only",
    is_flag=True,
    help="List available scenarios and exit",
)
@click.option(
    "--scenarios-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with extra scenarios",
)
@click.option(
    "--results-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for saved reports (default: results, or RESULTS_DIR)",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default="text",
    help="Stdout format for the report",
)
@click.option("--no-save", is_flag=True, help="Do not write report files")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def run(
    url,
    max_pages,
    max_depth,
    iterations,
    timeout,
    crawler,
    scenario,
    list_only,
    scenarios_file,
    results_dir,
    fmt,
    no_save,
    verbose,
):
    r"""Run a crawler benchmark.

    \b
    Examples:
      crawlbench run                                # both crawlers, defaults
      crawlbench run -u https://example.com -i 3    # 3 iterations each
      crawlbench run -c beautifulsoup -p 20 -d 3    # one crawler
      crawlbench run -s documentation               # scenario preset
      crawlbench run --list-scenarios               # list presets
      crawlbench run -f json --no-save              # JSON to stdout only
    """
    from crawlbench.commands.run_cmd import run_benchmark

    if verbose:
        Logger.set_level("DEBUG")

    run_benchmark(
        url=url,
        max_pages=max_pages,
        max_depth=max_depth,
        iterations=iterations,
        timeout=timeout,
        crawler=crawler.lower() if crawler else None,
        scenario_name=scenario,
        scenarios_file=scenarios_file,
        results_dir=results_dir,
        fmt=fmt.lower(),
        save=not no_save,
        list_only=list_only,
    )


@crawlbench.command()
@click.option(
    "--scenarios-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with extra scenarios",
)
def scenarios(scenarios_file):
    """List the available scenario presets."""
    from crawlbench.commands.scenarios_cmd import run_scenarios

    run_scenarios(scenarios_file)


@crawlbench.command()
@click.argument("report", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--results-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Where to look for the latest report (default: results, or RESULTS_DIR)",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default="text",
    help="Output format",
)
def compare(report, results_dir, fmt):
    """Show a saved report (the latest one when REPORT is omitted)."""
    from crawlbench.commands.compare_cmd import run_compare

    run_compare(report_path=report, results_dir=results_dir, fmt=fmt.lower())


@crawlbench.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display crawlbench version information."""
    from crawlbench.commands.version_cmd import run_version

    if verbose:
        Logger.set_level("DEBUG")

    run_version(verbose=verbose)


if __name__ == "__main__":
    crawlbench()
