"""Build crawler instances by type."""

from collections.abc import Callable

from crawlbench.config import Settings
from crawlbench.crawlers.base import Crawler
from crawlbench.crawlers.playwright_crawler import PlaywrightCrawler
from crawlbench.crawlers.soup_crawler import SoupCrawler
from crawlbench.models.constants import CrawlerType

CrawlerFactory = Callable[[CrawlerType, Settings | None], Crawler]


def _playwright(settings: Settings) -> Crawler:
    return PlaywrightCrawler(
        max_concurrency=settings.playwright_max_concurrency,
        headless=settings.headless,
        executable_path=settings.chromium_executable_path,
    )


def _beautifulsoup(settings: Settings) -> Crawler:
    return SoupCrawler(max_concurrency=settings.beautifulsoup_max_concurrency)


_BUILDERS: dict[CrawlerType, Callable[[Settings], Crawler]] = {
    CrawlerType.PLAYWRIGHT: _playwright,
    CrawlerType.BEAUTIFULSOUP: _beautifulsoup,
}


def create_crawler(
    crawler_type: CrawlerType | str, settings: Settings | None = None
) -> Crawler:
    """Return a fresh crawler of the given type.

    Raises:
        ValueError: If ``crawler_type`` is not a known crawler.
    """
    try:
        builder = _BUILDERS[CrawlerType(crawler_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown crawler type: {crawler_type}") from None
    return builder(settings or Settings())
