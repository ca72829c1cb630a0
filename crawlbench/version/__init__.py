from crawlbench.version.crawlbench_version import CRAWLBENCH_VERSION, Version

__all__ = ["CRAWLBENCH_VERSION", "Version"]
