"""Pydantic models for configuration, measurements and reports."""

from crawlbench.models.benchmark_models import (
    BenchmarkConfig,
    BenchmarkMetrics,
    BenchmarkReport,
    BenchmarkResult,
    ComparisonResult,
    CrawlerOptions,
    CrawlMetadata,
    ExtractedData,
    PageMetadata,
    PageRecord,
)
from crawlbench.models.constants import BOTH, SELECTION_CHOICES, CrawlerType

__all__ = [
    "BOTH",
    "SELECTION_CHOICES",
    "BenchmarkConfig",
    "BenchmarkMetrics",
    "BenchmarkReport",
    "BenchmarkResult",
    "ComparisonResult",
    "CrawlMetadata",
    "CrawlerOptions",
    "CrawlerType",
    "ExtractedData",
    "PageMetadata",
    "PageRecord",
]
