"""Tests for the crawlbench command-line interface."""

import pytest
from click.testing import CliRunner

from crawlbench.benchmark.report import generate_report
from crawlbench.benchmark.results import ReportWriter
from crawlbench.cli import crawlbench
from crawlbench.commands import run_cmd
from crawlbench.models.constants import CrawlerType
from crawlbench.version import CRAWLBENCH_VERSION


@pytest.fixture
def cli():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("RESULTS_DIR", "BENCHMARK_URL", "BENCHMARK_CRAWLER"):
        monkeypatch.delenv(name, raising=False)


def test_version(cli):
    result = cli.invoke(crawlbench, ["version"])

    assert result.exit_code == 0
    assert f"crawlbench {CRAWLBENCH_VERSION}" in result.output


def test_version_verbose(cli):
    result = cli.invoke(crawlbench, ["version", "-v"])

    assert result.exit_code == 0
    assert CRAWLBENCH_VERSION.hash in result.output


def test_scenarios_lists_presets(cli):
    result = cli.invoke(crawlbench, ["scenarios"])

    assert result.exit_code == 0
    for name in ("simple-static", "medium-site", "documentation"):
        assert name in result.output


def test_run_list_scenarios_with_file(cli, tmp_path):
    path = tmp_path / "extra.yaml"
    path.write_text(
        "scenarios:\n"
        "  - name: blog\n"
        "    url: https://blog.example.com\n"
        "    max_pages: 3\n"
        "    max_depth: 1\n"
    )

    result = cli.invoke(
        crawlbench, ["run", "--list-scenarios", "--scenarios-file", str(path)]
    )

    assert result.exit_code == 0
    assert "blog" in result.output
    assert "Total: 4 scenarios" in result.output


def test_run_unknown_scenario_fails(cli):
    result = cli.invoke(crawlbench, ["run", "-s", "nope", "--no-save"])

    assert result.exit_code != 0
    assert "Unknown scenario 'nope'" in result.output


def test_run_rejects_zero_iterations(cli):
    result = cli.invoke(crawlbench, ["run", "-i", "0"])

    assert result.exit_code != 0


def test_run_with_fake_crawlers(cli, tmp_path, monkeypatch, fake_factory):
    """A full run saves both reports and prints the comparison."""
    factory = fake_factory(playwright={"pages": 3}, beautifulsoup={"pages": 3})
    real_run_benchmarks = run_cmd.run_benchmarks

    def patched(config, crawler_types, settings=None):
        return real_run_benchmarks(
            config,
            crawler_types,
            settings=settings,
            crawler_factory=factory,
            reader=lambda: 50.0,
        )

    monkeypatch.setattr(run_cmd, "run_benchmarks", patched)
    results_dir = tmp_path / "out"

    result = cli.invoke(
        crawlbench,
        [
            "run",
            "-u",
            "https://site.test/",
            "-p",
            "3",
            "-d",
            "1",
            "-i",
            "2",
            "--results-dir",
            str(results_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Benchmark completed!" in result.output
    assert "Comparison Results" in result.output
    assert "Summary: playwright:" in result.output
    assert len(list(results_dir.glob("benchmark-*.json"))) == 1
    assert len(list(results_dir.glob("benchmark-*.txt"))) == 1
    assert [c[0] for c in factory.calls] == [
        CrawlerType.PLAYWRIGHT,
        CrawlerType.PLAYWRIGHT,
        CrawlerType.BEAUTIFULSOUP,
        CrawlerType.BEAUTIFULSOUP,
    ]


def test_run_failures_keep_exit_code(cli, tmp_path, monkeypatch, fake_factory):
    """Failed iterations are reported but the command still succeeds."""
    factory = fake_factory(beautifulsoup={"error": OSError("connection refused")})
    real_run_benchmarks = run_cmd.run_benchmarks

    def patched(config, crawler_types, settings=None):
        return real_run_benchmarks(
            config, crawler_types, settings=settings, crawler_factory=factory
        )

    monkeypatch.setattr(run_cmd, "run_benchmarks", patched)

    result = cli.invoke(
        crawlbench,
        ["run", "-c", "beautifulsoup", "--no-save", "-f", "json"],
    )

    assert result.exit_code == 0, result.output
    assert "1 of 1 iterations failed" in result.output
    assert "connection refused" in result.output


def test_compare_latest(cli, tmp_path, config, make_result):
    report = generate_report(
        [
            make_result(CrawlerType.PLAYWRIGHT, duration=3000),
            make_result(CrawlerType.BEAUTIFULSOUP, duration=1000),
        ],
        config,
    )
    ReportWriter(report).save(tmp_path)

    result = cli.invoke(crawlbench, ["compare", "--results-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "Speedup: 3.00x (beautifulsoup faster)" in result.output


def test_compare_explicit_report_as_json(cli, tmp_path, config, make_result):
    report = generate_report([make_result(CrawlerType.PLAYWRIGHT)], config)
    json_path, _ = ReportWriter(report).save(tmp_path)

    result = cli.invoke(crawlbench, ["compare", str(json_path), "-f", "json"])

    assert result.exit_code == 0, result.output
    assert "No comparison available" in result.output
    assert '"crawlerType": "playwright"' in result.output


def test_compare_without_reports(cli, tmp_path):
    result = cli.invoke(crawlbench, ["compare", "--results-dir", str(tmp_path)])

    assert result.exit_code != 0
    assert "No benchmark report found" in result.output


def test_compare_invalid_report(cli, tmp_path):
    path = tmp_path / "benchmark-broken.json"
    path.write_text("{not json")

    result = cli.invoke(crawlbench, ["compare", str(path)])

    assert result.exit_code != 0
    assert "Invalid benchmark report" in result.output
