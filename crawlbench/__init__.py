"""crawlbench - timing and memory benchmarks for web crawlers."""

from crawlbench.version.crawlbench_version import CRAWLBENCH_VERSION, Version

__version__ = str(CRAWLBENCH_VERSION)
__version_info__ = CRAWLBENCH_VERSION

__all__ = [
    "CRAWLBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
