"""Benchmark engine: sampling, iteration runs, aggregation and reporting."""

from crawlbench.benchmark.aggregate import average_result, average_results
from crawlbench.benchmark.comparison import compare_results, split_by_crawler
from crawlbench.benchmark.report import generate_report
from crawlbench.benchmark.results import (
    OutputFormat,
    ReportWriter,
    find_latest_report,
    load_report,
)
from crawlbench.benchmark.runner import BenchmarkRunner, run_benchmarks
from crawlbench.benchmark.sampler import MemorySampler, process_memory_mb

__all__ = [
    "BenchmarkRunner",
    "MemorySampler",
    "OutputFormat",
    "ReportWriter",
    "average_result",
    "average_results",
    "compare_results",
    "find_latest_report",
    "generate_report",
    "load_report",
    "process_memory_mb",
    "run_benchmarks",
    "split_by_crawler",
]
