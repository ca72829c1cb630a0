"""Averaging of per-iteration benchmark results."""

import math
from collections.abc import Sequence

from crawlbench.errors import EmptyAggregationInputError
from crawlbench.models.benchmark_models import BenchmarkMetrics, BenchmarkResult


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` places with halves going up (2.5 -> 3, 0.125 -> 0.13)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def average_results(results: Sequence[BenchmarkResult]) -> BenchmarkMetrics:
    """Average the metrics of same-crawler iterations.

    Durations and page counts are rounded to integers independently, memory
    to two decimals. Errors from every iteration are concatenated in order,
    duplicates included. The time span runs from the first result's start
    to the last result's end, by list position.

    Args:
        results: Non-empty list of results for one crawler.

    Returns:
        The averaged metrics.

    Raises:
        EmptyAggregationInputError: If ``results`` is empty.
    """
    if not results:
        raise EmptyAggregationInputError()

    count = len(results)
    metrics = [r.metrics for r in results]

    errors: list[str] = []
    for m in metrics:
        errors.extend(m.errors)

    return BenchmarkMetrics(
        start_time=metrics[0].start_time,
        end_time=metrics[-1].end_time,
        duration=int(round_half_up(sum(m.duration for m in metrics) / count)),
        pages_processed=int(
            round_half_up(sum(m.pages_processed for m in metrics) / count)
        ),
        pages_failed=int(round_half_up(sum(m.pages_failed for m in metrics) / count)),
        memory_used=round_half_up(sum(m.memory_used for m in metrics) / count, 2),
        errors=errors,
    )


def average_result(results: Sequence[BenchmarkResult]) -> BenchmarkResult:
    """Return the first result with its metrics replaced by the average.

    Raises:
        EmptyAggregationInputError: If ``results`` is empty.
    """
    averaged = average_results(results)
    return results[0].model_copy(update={"metrics": averaged})
