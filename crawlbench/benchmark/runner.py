"""Sequential execution of benchmark iterations.

Usage:
    from crawlbench.benchmark.runner import BenchmarkRunner
    from crawlbench.config import resolve_config

    config = resolve_config(url="https://example.com", iterations=3)
    runner = BenchmarkRunner(config, "both")

    results = asyncio.run(runner.run())

    # Or run and assemble the report in one go:
    report = asyncio.run(run_benchmarks(config, "both"))
"""

import time
from collections.abc import Sequence
from functools import partial

from crawlbench.benchmark.report import generate_report
from crawlbench.benchmark.sampler import MemoryReader, MemorySampler, process_memory_mb
from crawlbench.config import Settings
from crawlbench.crawlers.factory import CrawlerFactory, create_crawler
from crawlbench.models.benchmark_models import (
    BenchmarkConfig,
    BenchmarkMetrics,
    BenchmarkReport,
    BenchmarkResult,
    CrawlerOptions,
    PageRecord,
)
from crawlbench.models.constants import CrawlerType
from crawlbench.utils.logger import Logger

CrawlerSelection = str | CrawlerType | Sequence[str | CrawlerType]


def _normalize_selection(selection: CrawlerSelection) -> list[CrawlerType]:
    """Canonical, de-duplicated crawler order (playwright first)."""
    if isinstance(selection, str):
        requested = CrawlerType.parse_selection(selection)
    else:
        requested = []
        for item in selection:
            requested.extend(CrawlerType.parse_selection(item))
    return [c for c in CrawlerType if c in requested]


def _now_ms() -> int:
    return int(time.time() * 1000)


class BenchmarkRunner:
    """Runs every (crawler, iteration) pair of a benchmark, one at a time.

    Each iteration gets a new crawler from ``crawler_factory`` and its own
    memory sampler. A crawler that raises produces a failed result and the
    run moves on; anything that goes wrong in the harness itself propagates.

    Example:
        >>> runner = BenchmarkRunner(config, [CrawlerType.BEAUTIFULSOUP])
        >>> runner.expand_runs()
        [(<CrawlerType.BEAUTIFULSOUP: 'beautifulsoup'>, 0)]
        >>> results = await runner.run()
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        crawler_types: CrawlerSelection,
        settings: Settings | None = None,
        crawler_factory: CrawlerFactory = create_crawler,
        reader: MemoryReader | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Resolved benchmark parameters.
            crawler_types: "playwright", "beautifulsoup", "both", or a list of
                crawler types.
            settings: Harness settings; defaults to ``Settings()``.
            crawler_factory: Builds a crawler for a type. Tests pass fakes.
            reader: Memory reading in MB. Defaults to the process RSS.

        Raises:
            ValueError: If no crawler is selected or a name is unknown.
        """
        self.config = config
        self.crawler_types = _normalize_selection(crawler_types)
        if not self.crawler_types:
            raise ValueError("At least one crawler type must be selected")

        self.settings = settings or Settings()
        self._crawler_factory = crawler_factory
        self._reader: MemoryReader = reader or partial(
            process_memory_mb, self.settings.include_child_processes
        )
        Logger.ensure_configured()
        self._log = Logger.get("benchmark.runner")

    def expand_runs(self) -> list[tuple[CrawlerType, int]]:
        """Planned (crawler, iteration) pairs in execution order."""
        return [
            (crawler_type, iteration)
            for crawler_type in self.crawler_types
            for iteration in range(self.config.iterations)
        ]

    def _options(self, crawler_type: CrawlerType) -> CrawlerOptions:
        return CrawlerOptions(
            max_pages=self.config.max_pages,
            max_depth=self.config.max_depth,
            timeout=self.config.timeout,
            max_concurrency=self.settings.max_concurrency(crawler_type),
        )

    async def run_iteration(
        self, crawler_type: CrawlerType, iteration: int
    ) -> BenchmarkResult:
        """Run one timed, memory-profiled crawl.

        Always returns a complete result. If the crawl raises, the result has
        ``pages_processed=0``, ``pages_failed=1``, the error message and no
        pages, but its duration and memory are still measured.
        """
        label = f"[{crawler_type.value.upper()}]"
        self._log.info(
            f"{label} Starting iteration {iteration + 1}/{self.config.iterations}"
        )

        crawler = self._crawler_factory(crawler_type, self.settings)
        options = self._options(crawler_type)
        sampler = MemorySampler(
            interval_seconds=self.settings.sample_interval_ms / 1000,
            reader=self._reader,
        )

        baseline = sampler.read()
        sampler.reset(baseline)
        start_time = _now_ms()
        started = time.perf_counter()
        sampler.start()

        pages: list[PageRecord] = []
        errors: list[str] = []
        try:
            data = await crawler.crawl(self.config.url, options)
            pages = list(data.items)
        except Exception as e:
            errors.append(str(e) or type(e).__name__)
        finally:
            await sampler.stop()

        sampler.sample()
        duration = max(0, round((time.perf_counter() - started) * 1000))
        memory_used = sampler.delta(baseline)

        if errors:
            self._log.error(
                f"{label} Iteration {iteration + 1} failed after {duration}ms: "
                f"{errors[0]}"
            )
        else:
            self._log.info(
                f"{label} Completed in {duration}ms, processed {len(pages)} pages"
            )
        self._log.debug(
            f"{label} Memory baseline {baseline:.2f}MB, peak {sampler.peak:.2f}MB, "
            f"used {memory_used:.2f}MB"
        )

        return BenchmarkResult(
            crawler_type=crawler_type,
            config=self.config,
            metrics=BenchmarkMetrics(
                start_time=start_time,
                end_time=start_time + duration,
                duration=duration,
                pages_processed=len(pages),
                pages_failed=1 if errors else 0,
                memory_used=memory_used,
                errors=errors,
            ),
            results=pages,
            iteration=iteration,
        )

    async def run(self) -> list[BenchmarkResult]:
        """Run every planned iteration sequentially.

        Returns:
            One result per (crawler, iteration), in ``expand_runs()`` order.
        """
        self._log.info(
            f"Running {len(self.crawler_types)} crawler(s) x "
            f"{self.config.iterations} iteration(s) against {self.config.url}"
        )
        results: list[BenchmarkResult] = []
        for crawler_type, iteration in self.expand_runs():
            results.append(await self.run_iteration(crawler_type, iteration))
        return results


async def run_benchmarks(
    config: BenchmarkConfig,
    crawler_types: CrawlerSelection,
    settings: Settings | None = None,
    crawler_factory: CrawlerFactory = create_crawler,
    reader: MemoryReader | None = None,
) -> BenchmarkReport:
    """Run all iterations and assemble the report."""
    runner = BenchmarkRunner(
        config,
        crawler_types,
        settings=settings,
        crawler_factory=crawler_factory,
        reader=reader,
    )
    results = await runner.run()
    return generate_report(results, config)
