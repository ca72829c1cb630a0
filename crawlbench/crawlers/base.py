"""Contract shared by the crawler implementations under benchmark."""

from typing import Protocol, runtime_checkable

from crawlbench.models.benchmark_models import CrawlerOptions, ExtractedData

DEFAULT_MAX_PAGES = 10
DEFAULT_MAX_DEPTH = 2
DEFAULT_TIMEOUT_MS = 30000


class CrawlError(Exception):
    """Raised when a crawl cannot produce any page at all."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to crawl {url}: {reason}")


@runtime_checkable
class Crawler(Protocol):
    """What the benchmark runner needs from a crawler.

    Both operations may be slow and may raise; the runner records a raised
    exception as a failed iteration.
    """

    async def crawl(
        self, url: str, options: CrawlerOptions | None = None
    ) -> ExtractedData:
        """Follow same-domain links from ``url`` within the option bounds."""
        ...

    async def scrap(
        self, urls: list[str], options: CrawlerOptions | None = None
    ) -> ExtractedData:
        """Fetch exactly the given URLs without following links."""
        ...


def merge_options(
    options: CrawlerOptions | None, max_concurrency: int
) -> CrawlerOptions:
    """Fill unset options with crawler defaults."""
    defaults = CrawlerOptions(
        max_pages=DEFAULT_MAX_PAGES,
        max_depth=DEFAULT_MAX_DEPTH,
        timeout=DEFAULT_TIMEOUT_MS,
        max_concurrency=max_concurrency,
    )
    if options is None:
        return defaults
    return defaults.model_copy(update=options.model_dump(exclude_none=True))
