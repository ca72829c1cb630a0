"""One-shot resolution of benchmark configuration.

Everything the harness needs from the environment is read here, once,
before a run starts. The benchmark core only ever sees the resulting
``BenchmarkConfig`` and ``Settings`` objects.

Precedence for benchmark parameters (highest first):
    explicit argument (CLI flag) > scenario preset > environment > default
"""

from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from crawlbench.models.benchmark_models import BenchmarkConfig
from crawlbench.models.constants import BOTH, CrawlerType
from crawlbench.scenarios import Scenario
from crawlbench.utils.env import get_env

DEFAULT_URL = "https://example.com"
DEFAULT_MAX_PAGES = 10
DEFAULT_MAX_DEPTH = 2
DEFAULT_ITERATIONS = 1
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_RESULTS_DIR = "results"
DEFAULT_SAMPLE_INTERVAL_MS = 100
DEFAULT_PLAYWRIGHT_CONCURRENCY = 5
DEFAULT_BEAUTIFULSOUP_CONCURRENCY = 10

T = TypeVar("T")


class Settings(BaseModel):
    """Harness settings that are not part of the benchmark parameters."""

    model_config = ConfigDict(frozen=True)

    results_dir: Path = Field(Path(DEFAULT_RESULTS_DIR))
    default_crawler: str = Field(BOTH, description="playwright, beautifulsoup or both")
    playwright_max_concurrency: int = Field(DEFAULT_PLAYWRIGHT_CONCURRENCY, gt=0)
    beautifulsoup_max_concurrency: int = Field(
        DEFAULT_BEAUTIFULSOUP_CONCURRENCY, gt=0
    )
    sample_interval_ms: int = Field(DEFAULT_SAMPLE_INTERVAL_MS, gt=0)
    include_child_processes: bool = True
    headless: bool = True
    chromium_executable_path: str | None = None

    def max_concurrency(self, crawler_type: CrawlerType) -> int:
        """Concurrency cap for the given crawler."""
        if crawler_type is CrawlerType.PLAYWRIGHT:
            return self.playwright_max_concurrency
        return self.beautifulsoup_max_concurrency


def load_settings(results_dir: str | Path | None = None) -> Settings:
    """Build Settings from the environment.

    Args:
        results_dir: Overrides ``RESULTS_DIR`` when given.

    Raises:
        EnvVarTypeError: If a numeric or boolean variable does not parse.
        pydantic.ValidationError: If a value is out of range.
    """
    return Settings(
        results_dir=Path(
            results_dir or get_env("RESULTS_DIR", default=DEFAULT_RESULTS_DIR)
        ),
        default_crawler=get_env("BENCHMARK_CRAWLER", default=BOTH),
        playwright_max_concurrency=get_env(
            "CRAWLER_MAX_CONCURRENCY_PLAYWRIGHT",
            default=DEFAULT_PLAYWRIGHT_CONCURRENCY,
            as_type=int,
        ),
        beautifulsoup_max_concurrency=get_env(
            "CRAWLER_MAX_CONCURRENCY_BEAUTIFULSOUP",
            default=DEFAULT_BEAUTIFULSOUP_CONCURRENCY,
            as_type=int,
        ),
        sample_interval_ms=get_env(
            "BENCHMARK_SAMPLE_INTERVAL_MS",
            default=DEFAULT_SAMPLE_INTERVAL_MS,
            as_type=int,
        ),
        include_child_processes=get_env(
            "BENCHMARK_INCLUDE_CHILDREN", default=True, as_type=bool
        ),
        headless=get_env("PLAYWRIGHT_HEADLESS", default=True, as_type=bool),
        chromium_executable_path=get_env("PLAYWRIGHT_CHROMIUM_EXECUTABLE_PATH"),
    )


def _pick(value: T | None, env_name: str, default: T, as_type: type[T]) -> T:
    if value is not None:
        return value
    return get_env(env_name, default=default, as_type=as_type, log=True)


def resolve_config(
    url: str | None = None,
    max_pages: int | None = None,
    max_depth: int | None = None,
    iterations: int | None = None,
    timeout: int | None = None,
    scenario: Scenario | None = None,
) -> BenchmarkConfig:
    """Merge arguments, scenario preset, environment and defaults.

    Raises:
        EnvVarTypeError: If a numeric variable does not parse.
        pydantic.ValidationError: If the merged values are invalid
            (e.g. ``iterations=0``).
    """
    if scenario is not None:
        url = url if url is not None else scenario.url
        max_pages = max_pages if max_pages is not None else scenario.max_pages
        max_depth = max_depth if max_depth is not None else scenario.max_depth

    return BenchmarkConfig(
        url=_pick(url, "BENCHMARK_URL", DEFAULT_URL, str),
        max_pages=_pick(max_pages, "BENCHMARK_MAX_PAGES", DEFAULT_MAX_PAGES, int),
        max_depth=_pick(max_depth, "BENCHMARK_MAX_DEPTH", DEFAULT_MAX_DEPTH, int),
        iterations=_pick(
            iterations, "BENCHMARK_ITERATIONS", DEFAULT_ITERATIONS, int
        ),
        timeout=_pick(timeout, "BENCHMARK_TIMEOUT", DEFAULT_TIMEOUT_MS, int),
    )
