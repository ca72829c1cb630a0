"""Glue between the ``Crawler`` protocol and crawlee's crawler classes.

crawlee owns the request queue, link discovery, depth and page limits, and
concurrency. An adapter only builds the crawlee crawler for one call, turns
each handled page into a ``PageRecord`` and returns what it collected.
Every call gets its own in-memory request queue, which is dropped when the
call returns, so repeated crawls of the same URL start from scratch.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

from crawlee import ConcurrencySettings
from crawlee.crawlers import BasicCrawler, BasicCrawlingContext
from crawlee.storage_clients import MemoryStorageClient
from crawlee.storages import RequestQueue

from crawlbench.crawlers.base import CrawlError, merge_options
from crawlbench.models.benchmark_models import (
    CrawlerOptions,
    CrawlMetadata,
    ExtractedData,
    PageMetadata,
    PageRecord,
)
from crawlbench.utils.logger import Logger


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(UTC).isoformat()


def crawlee_options(options: CrawlerOptions) -> dict[str, Any]:
    """Keyword arguments shared by every crawlee crawler we build."""
    concurrency = options.max_concurrency or 1
    return {
        "max_requests_per_crawl": options.max_pages,
        "max_crawl_depth": options.max_depth,
        "concurrency_settings": ConcurrencySettings(
            max_concurrency=concurrency,
            desired_concurrency=concurrency,
        ),
        "request_handler_timeout": timedelta(milliseconds=options.timeout or 30000),
        "configure_logging": False,
    }


class PageCollector:
    """Pages and start-URL failure gathered during one crawl."""

    def __init__(self, max_pages: int) -> None:
        self.max_pages = max_pages
        self.records: list[PageRecord] = []
        self.start_failure: str | None = None
        self._urls: set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.records) >= self.max_pages

    def add(
        self, url: str, title: str, html: str, status_code: int, depth: int
    ) -> PageRecord | None:
        """Record a page, or return None if it is a repeat or over the limit."""
        if self.full or url in self._urls:
            return None
        self._urls.add(url)
        record = PageRecord(
            url=url,
            title=title,
            html_content=html,
            metadata=PageMetadata(
                status_code=status_code,
                timestamp=utc_timestamp(),
                depth=depth,
            ),
        )
        self.records.append(record)
        return record

    def fail(self, depth: int, reason: str) -> None:
        if depth == 0 and self.start_failure is None:
            self.start_failure = reason

    def result(self, original_url: str, started: float) -> ExtractedData:
        return ExtractedData(
            items=list(self.records),
            metadata=CrawlMetadata(
                original_url=original_url,
                total_pages=len(self.records),
                completed_at=utc_timestamp(),
                execution_time=int((time.perf_counter() - started) * 1000),
            ),
        )


class CrawleeAdapter(ABC):
    """Base for crawlers that delegate the actual crawling to crawlee.

    Subclasses build the crawlee crawler and read title, HTML and status
    from its crawling context; the crawl bookkeeping lives here.
    """

    log_name = "crawlers"

    def __init__(self, max_concurrency: int) -> None:
        self.max_concurrency = max_concurrency
        Logger.ensure_configured()
        self._log = Logger.get(self.log_name)

    @abstractmethod
    def _build(
        self,
        options: CrawlerOptions,
        queue: RequestQueue,
        storage: MemoryStorageClient,
    ) -> BasicCrawler:
        """Return a crawlee crawler configured for one call."""

    @abstractmethod
    async def _extract(self, context: Any) -> tuple[str, str, int]:
        """Return ``(title, html, status_code)`` for the page in ``context``."""

    async def _handle(
        self, context: Any, collector: PageCollector, follow: bool
    ) -> None:
        request = context.request
        url = request.loaded_url or request.url
        if collector.full:
            self._log.debug(f"Reached max pages limit, skipping {url}")
            return

        title, html, status_code = await self._extract(context)
        record = collector.add(url, title, html, status_code, request.crawl_depth)
        if record is None:
            self._log.debug(f"Skipping already processed URL: {url}")
            return
        self._log.debug(
            f"Processed page {len(collector.records)}: {record.url} - {record.title}"
        )

        if follow and not collector.full:
            await context.enqueue_links(strategy="same-domain")

    async def _failed(
        self,
        context: BasicCrawlingContext,
        error: Exception,
        collector: PageCollector,
    ) -> None:
        reason = str(error) or type(error).__name__
        self._log.warning(f"Error processing {context.request.url}: {reason}")
        collector.fail(context.request.crawl_depth, reason)

    async def _run(
        self, urls: list[str], options: CrawlerOptions, follow: bool
    ) -> PageCollector:
        collector = PageCollector(options.max_pages or len(urls))
        storage = MemoryStorageClient()
        queue = await RequestQueue.open(
            name=f"crawlbench-{uuid4().hex}", storage_client=storage
        )
        crawler = self._build(options, queue, storage)

        @crawler.router.default_handler
        async def handle(context: BasicCrawlingContext) -> None:
            await self._handle(context, collector, follow)

        @crawler.failed_request_handler
        async def failed(context: BasicCrawlingContext, error: Exception) -> None:
            await self._failed(context, error, collector)

        try:
            await crawler.run(urls)
        finally:
            await queue.drop()
        return collector

    async def crawl(
        self, url: str, options: CrawlerOptions | None = None
    ) -> ExtractedData:
        """Crawl same-domain links breadth-first from ``url``.

        Raises:
            CrawlError: If the start URL fails and no page was collected.
        """
        opts = merge_options(options, self.max_concurrency)
        started = time.perf_counter()
        self._log.info(
            f"Starting crawl of {url} "
            f"(max_pages={opts.max_pages}, max_depth={opts.max_depth})"
        )
        collector = await self._run([url], opts, follow=True)
        if not collector.records and collector.start_failure is not None:
            raise CrawlError(url, collector.start_failure)
        data = collector.result(url, started)
        self._log.info(f"Crawl completed. Processed {data.metadata.total_pages} pages")
        return data

    async def scrap(
        self, urls: list[str], options: CrawlerOptions | None = None
    ) -> ExtractedData:
        """Fetch each URL once without following links; failures are skipped."""
        opts = merge_options(options, self.max_concurrency).model_copy(
            update={"max_pages": max(len(urls), 1), "max_depth": 0}
        )
        started = time.perf_counter()
        self._log.info(f"Starting scrape of {len(urls)} URLs")
        collector = await self._run(urls, opts, follow=False)
        data = collector.result(urls[0] if urls else "", started)
        self._log.info(f"Scrape completed. Processed {data.metadata.total_pages} pages")
        return data
