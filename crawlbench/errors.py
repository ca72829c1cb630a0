"""Exceptions raised by the benchmark harness itself.

Provider failures are not represented here: a crawl that raises is
recorded as a failed iteration, never re-raised past the runner.
"""


class CrawlbenchError(Exception):
    """Base exception for harness-level errors."""

    pass


class EmptyAggregationInputError(CrawlbenchError):
    """Raised when averaging is requested over zero benchmark results."""

    def __init__(self) -> None:
        super().__init__("Cannot average an empty list of benchmark results")


class ReportNotFoundError(CrawlbenchError):
    """Raised when no saved benchmark report can be located."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"No benchmark report found in {location}")
