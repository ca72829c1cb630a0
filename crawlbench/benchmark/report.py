"""Assembly of the final benchmark report."""

from collections.abc import Sequence
from datetime import UTC, datetime

from crawlbench.benchmark.comparison import compare_results
from crawlbench.models.benchmark_models import (
    BenchmarkConfig,
    BenchmarkReport,
    BenchmarkResult,
)


def generate_report(
    results: Sequence[BenchmarkResult],
    config: BenchmarkConfig,
) -> BenchmarkReport:
    """Combine raw results and their comparison into a report.

    The comparison is attached only when both crawlers produced results.
    Nothing is written to disk here; see ``ReportWriter`` for that.
    """
    return BenchmarkReport(
        timestamp=datetime.now(UTC).isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        ),
        config=config,
        results=list(results),
        comparison=compare_results(results),
    )
