"""Cross-crawler comparison of averaged benchmark results."""

from collections.abc import Sequence

from crawlbench.benchmark.aggregate import average_result
from crawlbench.models.benchmark_models import BenchmarkResult, ComparisonResult
from crawlbench.models.constants import CrawlerType
from crawlbench.utils.logger import Logger


def split_by_crawler(
    results: Sequence[BenchmarkResult],
) -> dict[CrawlerType, list[BenchmarkResult]]:
    """Group results by crawler type, keeping their original order."""
    grouped: dict[CrawlerType, list[BenchmarkResult]] = {c: [] for c in CrawlerType}
    for result in results:
        grouped[result.crawler_type].append(result)
    return grouped


def compare_results(results: Sequence[BenchmarkResult]) -> ComparisonResult | None:
    """Compare the averaged playwright and beautifulsoup results.

    Returns:
        The comparison, or None unless both crawlers have at least one
        result.
    """
    grouped = split_by_crawler(results)
    browser_runs = grouped[CrawlerType.PLAYWRIGHT]
    soup_runs = grouped[CrawlerType.BEAUTIFULSOUP]
    if not browser_runs or not soup_runs:
        return None

    browser = average_result(browser_runs)
    soup = average_result(soup_runs)

    speedup: float | None
    if soup.metrics.duration > 0:
        speedup = browser.metrics.duration / soup.metrics.duration
    else:
        Logger.ensure_configured()
        Logger.get("benchmark.comparison").warning(
            "beautifulsoup average duration is "
            f"{soup.metrics.duration}ms; speedup is undefined"
        )
        speedup = None

    return ComparisonResult(
        playwright=browser,
        beautifulsoup=soup,
        speedup=speedup,
        memory_difference=soup.metrics.memory_used - browser.metrics.memory_used,
        pages_difference=soup.metrics.pages_processed
        - browser.metrics.pages_processed,
    )
