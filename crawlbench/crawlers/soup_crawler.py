"""HTTP crawler: crawlee's BeautifulSoupCrawler, no JavaScript executed."""

from crawlee.crawlers import BeautifulSoupCrawler, BeautifulSoupCrawlingContext
from crawlee.storage_clients import MemoryStorageClient
from crawlee.storages import RequestQueue

from crawlbench.crawlers.crawlee_adapter import CrawleeAdapter, crawlee_options
from crawlbench.models.benchmark_models import CrawlerOptions

PARSER = "html.parser"


class SoupCrawler(CrawleeAdapter):
    """Plain HTTP fetch plus BeautifulSoup parsing."""

    log_name = "crawlers.beautifulsoup"

    def __init__(self, max_concurrency: int = 10) -> None:
        super().__init__(max_concurrency)

    def _build(
        self,
        options: CrawlerOptions,
        queue: RequestQueue,
        storage: MemoryStorageClient,
    ) -> BeautifulSoupCrawler:
        return BeautifulSoupCrawler(
            parser=PARSER,
            request_manager=queue,
            storage_client=storage,
            **crawlee_options(options),
        )

    async def _extract(
        self, context: BeautifulSoupCrawlingContext
    ) -> tuple[str, str, int]:
        soup = context.soup
        title = soup.title.get_text(strip=True) if soup.title else ""
        return title, str(soup), context.http_response.status_code
