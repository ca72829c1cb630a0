"""Headless-browser crawler: crawlee's PlaywrightCrawler on Chromium."""

from typing import Any

from crawlee.crawlers import PlaywrightCrawler as CrawleePlaywrightCrawler
from crawlee.crawlers import PlaywrightCrawlingContext
from crawlee.storage_clients import MemoryStorageClient
from crawlee.storages import RequestQueue

from crawlbench.crawlers.crawlee_adapter import CrawleeAdapter, crawlee_options
from crawlbench.models.benchmark_models import CrawlerOptions

CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]


class PlaywrightCrawler(CrawleeAdapter):
    """Renders every page in Chromium before extracting it.

    crawlee launches the browser when a ``crawl``/``scrap`` call starts and
    closes it when the call returns, whether or not it succeeded.
    """

    log_name = "crawlers.playwright"

    def __init__(
        self,
        max_concurrency: int = 5,
        headless: bool = True,
        executable_path: str | None = None,
    ) -> None:
        super().__init__(max_concurrency)
        self.headless = headless
        self.executable_path = executable_path

    def launch_options(self) -> dict[str, Any]:
        """Chromium launch options; Playwright's own build unless a path is set."""
        options: dict[str, Any] = {"args": list(CHROMIUM_ARGS)}
        if self.executable_path:
            options["executable_path"] = self.executable_path
        return options

    def _build(
        self,
        options: CrawlerOptions,
        queue: RequestQueue,
        storage: MemoryStorageClient,
    ) -> CrawleePlaywrightCrawler:
        return CrawleePlaywrightCrawler(
            browser_type="chromium",
            headless=self.headless,
            browser_launch_options=self.launch_options(),
            request_manager=queue,
            storage_client=storage,
            **crawlee_options(options),
        )

    async def _extract(
        self, context: PlaywrightCrawlingContext
    ) -> tuple[str, str, int]:
        title = await context.page.title()
        html = await context.page.content()
        status_code = context.response.status if context.response is not None else 200
        return title, html, status_code
