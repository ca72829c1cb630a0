"""Benchmark report emission and loading.

Supports multiple output formats: JSON, YAML, and plain text.

Usage:
    from crawlbench.benchmark.results import ReportWriter, OutputFormat

    writer = ReportWriter(report)

    # Emit to different formats
    writer.emit("report.json", OutputFormat.JSON)
    writer.emit("report.yaml", OutputFormat.YAML)
    writer.emit(sys.stdout, OutputFormat.TEXT)

    # Persist the JSON and text reports side by side
    json_path, text_path = writer.save("results")
"""

import json
import sys
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from crawlbench.errors import ReportNotFoundError
from crawlbench.models.benchmark_models import (
    BenchmarkReport,
    BenchmarkResult,
    ComparisonResult,
)

REPORT_PREFIX = "benchmark-"


class OutputFormat(Enum):
    """Supported output formats for benchmark reports."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"  # Human-readable text for stdout


def _speedup_text(comparison: ComparisonResult) -> str:
    speedup = comparison.speedup
    if speedup is None:
        return "Speedup: n/a"
    faster = "beautifulsoup" if speedup > 1 else "playwright"
    return f"Speedup: {speedup:.2f}x ({faster} faster)"


def _metrics_block(output: StringIO, title: str, result: BenchmarkResult) -> None:
    metrics = result.metrics
    output.write(f"{title}:\n")
    output.write(f"  Duration: {metrics.duration}ms\n")
    output.write(f"  Pages: {metrics.pages_processed}\n")
    output.write(f"  Memory: {metrics.memory_used:.2f}MB\n")
    if metrics.pages_failed:
        output.write(f"  Failed: {metrics.pages_failed}\n")
    for error in metrics.errors:
        output.write(f"  Error: {error}\n")
    output.write("\n")


class ReportWriter:
    """Renders a ``BenchmarkReport`` and writes it to files or streams.

    Example:
        >>> writer = ReportWriter(report)
        >>> writer.emit(sys.stdout, OutputFormat.TEXT)
        >>> writer.save(Path("results"))
    """

    def __init__(self, report: BenchmarkReport) -> None:
        self.report = report

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit the report to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        if format == OutputFormat.JSON:
            content = self.to_json(indent)
        elif format == OutputFormat.YAML:
            content = self.to_yaml(indent)
        elif format == OutputFormat.TEXT:
            content = self.to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def to_json(self, indent: int = 2) -> str:
        """Serialize the report as camelCase JSON."""
        return json.dumps(self.report.to_dict(), indent=indent)

    def to_yaml(self, indent: int = 2) -> str:
        """Serialize the report as YAML, keeping field order."""
        result: str = yaml.safe_dump(
            self.report.to_dict(),
            indent=indent,
            default_flow_style=False,
            sort_keys=False,
        )
        return result

    def to_text(self) -> str:
        """Render the report for humans.

        With a comparison, the averaged metrics of each crawler are shown
        followed by the speedup; otherwise every iteration is listed.
        """
        output = StringIO()
        report = self.report
        config = report.config

        output.write("=" * 60 + "\n")
        output.write("Crawler Benchmark Report\n")
        output.write("=" * 60 + "\n\n")
        output.write(f"Timestamp: {report.timestamp}\n")
        output.write(f"URL: {config.url}\n")
        output.write(f"Max Pages: {config.max_pages}\n")
        output.write(f"Max Depth: {config.max_depth}\n")
        output.write(f"Iterations: {config.iterations}\n\n")

        comparison = report.comparison
        if comparison is not None:
            output.write("=" * 60 + "\n")
            output.write("Comparison Results\n")
            output.write("=" * 60 + "\n\n")

            _metrics_block(output, "Playwright", comparison.playwright)
            _metrics_block(output, "BeautifulSoup", comparison.beautifulsoup)

            pw = comparison.playwright.metrics
            soup = comparison.beautifulsoup.metrics
            output.write(_speedup_text(comparison) + "\n")
            output.write(f"Time Difference: {abs(pw.duration - soup.duration)}ms\n")
            output.write(f"Memory Difference: {comparison.memory_difference:.2f}MB\n")
            output.write(f"Pages Difference: {comparison.pages_difference}\n")
        else:
            output.write("=" * 60 + "\n")
            output.write("Results\n")
            output.write("=" * 60 + "\n\n")

            for result in report.results:
                title = (
                    f"{result.crawler_type.value.upper()} "
                    f"(Iteration {result.iteration + 1})"
                )
                _metrics_block(output, title, result)

        return output.getvalue()

    def summary_line(self) -> str | None:
        """One-line comparison summary, or None without a comparison."""
        comparison = self.report.comparison
        if comparison is None:
            return None

        def part(name: str, result: BenchmarkResult) -> str:
            m = result.metrics
            return (
                f"{name}: {m.duration}ms | {m.pages_processed} pages | "
                f"{m.memory_used:.2f}MB"
            )

        return " || ".join(
            [
                part("playwright", comparison.playwright),
                part("beautifulsoup", comparison.beautifulsoup),
                _speedup_text(comparison),
            ]
        )

    def report_stem(self) -> str:
        """File name stem derived from the report timestamp."""
        safe = self.report.timestamp.replace(":", "-").replace(".", "-")
        return f"{REPORT_PREFIX}{safe}"

    def save(self, results_dir: str | Path) -> tuple[Path, Path]:
        """Write ``<stem>.json`` and ``<stem>.txt`` into ``results_dir``.

        The directory is created if needed.

        Returns:
            Paths of the JSON and text reports.
        """
        directory = Path(results_dir)
        directory.mkdir(parents=True, exist_ok=True)

        stem = self.report_stem()
        json_path = directory / f"{stem}.json"
        text_path = directory / f"{stem}.txt"
        self.emit(json_path, OutputFormat.JSON)
        self.emit(text_path, OutputFormat.TEXT)
        return json_path, text_path

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()


def find_latest_report(results_dir: str | Path) -> Path:
    """Newest saved JSON report in ``results_dir``.

    Report names embed an ISO timestamp, so the lexically last name is the
    newest.

    Raises:
        ReportNotFoundError: If the directory holds no report.
    """
    directory = Path(results_dir)
    candidates = (
        sorted(directory.glob(f"{REPORT_PREFIX}*.json")) if directory.is_dir() else []
    )
    if not candidates:
        raise ReportNotFoundError(str(directory))
    return candidates[-1]


def load_report(path: str | Path) -> BenchmarkReport:
    """Read a saved JSON report back into a ``BenchmarkReport``.

    Raises:
        ReportNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If the file is not a valid report.
    """
    path = Path(path)
    if not path.is_file():
        raise ReportNotFoundError(str(path))
    return BenchmarkReport.model_validate_json(path.read_text())
