"""Tests for report rendering, saving and loading."""

import json
from io import StringIO

import pytest
import yaml

from crawlbench.benchmark.report import generate_report
from crawlbench.benchmark.results import (
    OutputFormat,
    ReportWriter,
    find_latest_report,
    load_report,
)
from crawlbench.errors import ReportNotFoundError
from crawlbench.models.constants import CrawlerType

PW = CrawlerType.PLAYWRIGHT
SOUP = CrawlerType.BEAUTIFULSOUP


@pytest.fixture
def compared_report(config, make_result):
    return generate_report(
        [
            make_result(PW, duration=3000, pages=5, memory=40.0),
            make_result(SOUP, duration=1200, pages=5, memory=10.0),
        ],
        config,
    )


@pytest.fixture
def single_report(config, make_result):
    return generate_report(
        [
            make_result(PW, duration=100, pages=2, iteration=0),
            make_result(
                PW, duration=50, pages=0, iteration=1, failed=1, errors=["timed out"]
            ),
        ],
        config,
    )


class TestText:
    """Human-readable rendering."""

    def test_header(self, compared_report, config):
        text = ReportWriter(compared_report).to_text()

        assert f"Timestamp: {compared_report.timestamp}" in text
        assert f"URL: {config.url}" in text
        assert f"Max Pages: {config.max_pages}" in text
        assert f"Max Depth: {config.max_depth}" in text
        assert f"Iterations: {config.iterations}" in text

    def test_comparison_section(self, compared_report):
        text = ReportWriter(compared_report).to_text()

        assert "Comparison Results" in text
        assert "Duration: 3000ms" in text
        assert "Duration: 1200ms" in text
        assert "Speedup: 2.50x (beautifulsoup faster)" in text
        assert "Time Difference: 1800ms" in text
        assert "Memory Difference: -30.00MB" in text

    def test_playwright_faster(self, config, make_result):
        report = generate_report(
            [make_result(PW, duration=500), make_result(SOUP, duration=1000)], config
        )

        assert "(playwright faster)" in ReportWriter(report).to_text()

    def test_undefined_speedup(self, config, make_result):
        report = generate_report(
            [make_result(PW, duration=500), make_result(SOUP, duration=0)], config
        )

        assert "Speedup: n/a" in ReportWriter(report).to_text()

    def test_per_iteration_listing(self, single_report):
        text = ReportWriter(single_report).to_text()

        assert "Comparison Results" not in text
        assert "PLAYWRIGHT (Iteration 1)" in text
        assert "PLAYWRIGHT (Iteration 2)" in text
        assert "Error: timed out" in text


class TestEmit:
    """Machine-readable emission."""

    def test_json_stream(self, compared_report):
        output = StringIO()

        ReportWriter(compared_report).emit(output, OutputFormat.JSON)

        data = json.loads(output.getvalue())
        assert data["comparison"]["speedup"] == 2.5
        assert data["results"][0]["crawlerType"] == "playwright"

    def test_yaml_file(self, single_report, tmp_path):
        path = tmp_path / "report.yaml"

        ReportWriter(single_report).emit(path, OutputFormat.YAML)

        data = yaml.safe_load(path.read_text())
        assert "comparison" not in data
        assert data["config"]["maxPages"] == single_report.config.max_pages

    def test_summary_line(self, compared_report, single_report):
        summary = ReportWriter(compared_report).summary_line()

        assert summary is not None
        assert "playwright: 3000ms | 5 pages | 40.00MB" in summary
        assert "beautifulsoup: 1200ms" in summary
        assert ReportWriter(single_report).summary_line() is None


class TestSaveLoad:
    """Persisting reports to the results directory."""

    def test_save_writes_json_and_text(self, compared_report, tmp_path):
        results_dir = tmp_path / "nested" / "results"

        json_path, text_path = ReportWriter(compared_report).save(results_dir)

        assert json_path.parent == results_dir
        assert json_path.name.startswith("benchmark-")
        assert json_path.suffix == ".json"
        assert text_path.suffix == ".txt"
        assert ":" not in json_path.name
        assert json_path.stem.count(".") == 0
        assert "Comparison Results" in text_path.read_text()

    def test_load_round_trip(self, compared_report, tmp_path):
        json_path, _ = ReportWriter(compared_report).save(tmp_path)

        assert load_report(json_path) == compared_report

    def test_latest_report(self, compared_report, tmp_path):
        (tmp_path / "benchmark-2020-01-01T00-00-00-000Z.json").write_text("{}")
        json_path, _ = ReportWriter(compared_report).save(tmp_path)

        assert find_latest_report(tmp_path) == json_path

    def test_missing_reports(self, tmp_path):
        with pytest.raises(ReportNotFoundError):
            find_latest_report(tmp_path / "absent")
        with pytest.raises(ReportNotFoundError):
            load_report(tmp_path / "absent.json")
