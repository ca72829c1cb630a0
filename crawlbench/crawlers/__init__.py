"""Crawler implementations under benchmark."""

from crawlbench.crawlers.base import Crawler, CrawlError, merge_options
from crawlbench.crawlers.crawlee_adapter import CrawleeAdapter
from crawlbench.crawlers.factory import CrawlerFactory, create_crawler
from crawlbench.crawlers.playwright_crawler import PlaywrightCrawler
from crawlbench.crawlers.soup_crawler import SoupCrawler

__all__ = [
    "CrawlError",
    "CrawleeAdapter",
    "Crawler",
    "CrawlerFactory",
    "PlaywrightCrawler",
    "SoupCrawler",
    "create_crawler",
    "merge_options",
]
