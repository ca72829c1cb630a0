"""Shared fixtures: canned results and fake crawlers for the benchmark tests."""

import asyncio
import logging

import pytest

from crawlbench.config import Settings
from crawlbench.models.benchmark_models import (
    BenchmarkConfig,
    BenchmarkMetrics,
    BenchmarkResult,
    CrawlerOptions,
    CrawlMetadata,
    ExtractedData,
    PageMetadata,
    PageRecord,
)
from crawlbench.models.constants import CrawlerType
from crawlbench.utils.logger import Logger

CONFIG = BenchmarkConfig(
    url="https://site.test/",
    max_pages=5,
    max_depth=1,
    iterations=1,
    timeout=1000,
)


@pytest.fixture(autouse=True)
def reset_logger():
    """Give every test a fresh logger bound to its own captured streams."""
    yield
    root = logging.getLogger(Logger._root_name)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    Logger._configured = False


@pytest.fixture
def config() -> BenchmarkConfig:
    return CONFIG


@pytest.fixture
def fast_settings(tmp_path) -> Settings:
    """Settings with a 1ms sampling interval and a temporary results dir."""
    return Settings(results_dir=tmp_path / "results", sample_interval_ms=1)


def page(url: str, title: str = "") -> PageRecord:
    return PageRecord(
        url=url,
        title=title,
        html_content="<html></html>",
        metadata=PageMetadata(status_code=200, timestamp="2024-01-01T00:00:00Z"),
    )


def build_result(
    crawler_type: CrawlerType,
    duration: int = 1000,
    pages: int = 1,
    memory: float = 10.0,
    errors: list[str] | None = None,
    iteration: int = 0,
    start_time: int = 1_700_000_000_000,
    failed: int = 0,
) -> BenchmarkResult:
    return BenchmarkResult(
        crawler_type=crawler_type,
        config=CONFIG,
        metrics=BenchmarkMetrics(
            start_time=start_time,
            end_time=start_time + duration,
            duration=duration,
            pages_processed=pages,
            pages_failed=failed,
            memory_used=memory,
            errors=errors or [],
        ),
        results=[],
        iteration=iteration,
    )


@pytest.fixture
def make_result():
    return build_result


class FakeCrawler:
    """Crawler double: returns canned pages or raises, after an optional delay."""

    def __init__(
        self,
        crawler_type: CrawlerType,
        pages: int = 2,
        error: BaseException | None = None,
        delay: float = 0.0,
        calls: list | None = None,
    ) -> None:
        self.crawler_type = crawler_type
        self.pages = pages
        self.error = error
        self.delay = delay
        self.calls = calls if calls is not None else []

    async def crawl(
        self, url: str, options: CrawlerOptions | None = None
    ) -> ExtractedData:
        self.calls.append((self.crawler_type, url, options))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        items = [page(f"{url}p{i}", f"Page {i}") for i in range(self.pages)]
        return ExtractedData(
            items=items,
            metadata=CrawlMetadata(
                original_url=url,
                total_pages=len(items),
                completed_at="2024-01-01T00:00:00Z",
                execution_time=0,
            ),
        )

    async def scrap(
        self, urls: list[str], options: CrawlerOptions | None = None
    ) -> ExtractedData:
        return await self.crawl(urls[0], options)


class FakeCrawlerFactory:
    """Stand-in for ``create_crawler`` that records every crawler it builds."""

    def __init__(self, **behaviour: dict) -> None:
        self.behaviour = behaviour
        self.calls: list = []
        self.created: list[FakeCrawler] = []

    def __call__(
        self, crawler_type: CrawlerType, settings: Settings | None = None
    ) -> FakeCrawler:
        crawler = FakeCrawler(
            crawler_type, calls=self.calls, **self.behaviour.get(crawler_type.value, {})
        )
        self.created.append(crawler)
        return crawler


@pytest.fixture
def fake_factory():
    return FakeCrawlerFactory
