"""Pydantic models for benchmark configuration, measurements and reports.

Attribute names are snake_case; the JSON form uses camelCase aliases
(``maxPages``, ``memoryUsed``, ``crawlerType``...) so saved reports keep the
established report layout. Every model is frozen.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from crawlbench.models.constants import CrawlerType


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready, camelCase representation."""
        return self.model_dump(mode="json", by_alias=True)


# ============================================================================
# Inputs
# ============================================================================


class BenchmarkConfig(_Model):
    """Fully resolved parameters for one benchmark run."""

    url: str = Field(..., min_length=1, description="Start URL to crawl")
    max_pages: int = Field(..., gt=0, description="Maximum pages per crawl")
    max_depth: int = Field(..., gt=0, description="Maximum link depth")
    iterations: int = Field(1, ge=1, description="Iterations per crawler")
    timeout: int = Field(..., gt=0, description="Per-request timeout in ms")


class CrawlerOptions(_Model):
    """Options handed to a crawler's ``crawl``/``scrap`` call."""

    max_pages: int | None = Field(None, gt=0)
    max_depth: int | None = Field(None, ge=0)
    timeout: int | None = Field(None, gt=0, description="Timeout in ms")
    max_concurrency: int | None = Field(None, gt=0)


# ============================================================================
# Crawler output
# ============================================================================


class PageMetadata(_Model):
    """Per-page metadata; crawlers may attach extra keys."""

    model_config = ConfigDict(extra="allow")

    status_code: int = Field(200, description="HTTP status of the page")
    timestamp: str = Field(..., description="ISO-8601 time the page was processed")


class PageRecord(_Model):
    """One page extracted by a crawler."""

    url: str
    title: str = ""
    html_content: str = ""
    metadata: PageMetadata


class CrawlMetadata(_Model):
    """Summary a crawler returns alongside its pages."""

    original_url: str
    total_pages: int = Field(..., ge=0)
    completed_at: str
    execution_time: int = Field(..., ge=0, description="Crawl time in ms")


class ExtractedData(_Model):
    """Return value of ``Crawler.crawl`` and ``Crawler.scrap``."""

    items: list[PageRecord] = Field(default_factory=list)
    metadata: CrawlMetadata


# ============================================================================
# Measurements
# ============================================================================


class BenchmarkMetrics(_Model):
    """Measurements of one iteration, or the average of several."""

    start_time: int = Field(..., description="Epoch milliseconds")
    end_time: int = Field(..., description="Epoch milliseconds")
    duration: int = Field(..., ge=0, description="Elapsed milliseconds")
    pages_processed: int = Field(..., ge=0)
    pages_failed: int = Field(..., ge=0)
    memory_used: float = Field(..., ge=0, description="Peak memory delta in MB")
    errors: list[str] = Field(default_factory=list)


class BenchmarkResult(_Model):
    """Complete record of one iteration of one crawler."""

    crawler_type: CrawlerType
    config: BenchmarkConfig
    metrics: BenchmarkMetrics
    results: list[PageRecord] = Field(default_factory=list)
    iteration: int = Field(..., ge=0, description="0-based iteration index")


class ComparisonResult(_Model):
    """Averaged result per crawler plus the derived relative metrics."""

    playwright: BenchmarkResult
    beautifulsoup: BenchmarkResult
    speedup: float | None = Field(
        ...,
        description=(
            "playwright duration / beautifulsoup duration; "
            "None when the divisor is not positive"
        ),
    )
    memory_difference: float = Field(
        ..., description="beautifulsoup memory minus playwright memory (MB)"
    )
    pages_difference: int = Field(
        ..., description="beautifulsoup pages minus playwright pages"
    )


class BenchmarkReport(_Model):
    """Top-level artifact handed to the report writer."""

    timestamp: str = Field(..., description="ISO-8601 generation time")
    config: BenchmarkConfig
    results: list[BenchmarkResult]
    comparison: ComparisonResult | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form; ``comparison`` is left out when absent."""
        exclude = {"comparison"} if self.comparison is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude)
