"""Tests for the playwright / beautifulsoup comparison."""

import pytest

from crawlbench.benchmark.comparison import compare_results, split_by_crawler
from crawlbench.models.constants import CrawlerType

PW = CrawlerType.PLAYWRIGHT
SOUP = CrawlerType.BEAUTIFULSOUP


def test_reference_comparison(make_result):
    """3000ms/40MB vs 1200ms/10MB with 5 pages each."""
    results = [
        make_result(PW, duration=3000, pages=5, memory=40.0),
        make_result(SOUP, duration=1200, pages=5, memory=10.0),
    ]

    comparison = compare_results(results)

    assert comparison is not None
    assert comparison.speedup == pytest.approx(2.5)
    assert comparison.memory_difference == -30.0
    assert comparison.pages_difference == 0


def test_single_crawler_has_no_comparison(make_result):
    """Only one crawler ran, so nothing is compared."""
    results = [make_result(PW), make_result(PW, iteration=1)]
    assert compare_results(results) is None
    assert compare_results([make_result(SOUP)]) is None
    assert compare_results([]) is None


def test_comparison_uses_averages(make_result):
    """Each side is averaged before the ratios are taken."""
    results = [
        make_result(PW, duration=1000, pages=4, iteration=0),
        make_result(PW, duration=3000, pages=6, iteration=1),
        make_result(SOUP, duration=500, pages=8, iteration=0),
        make_result(SOUP, duration=1500, pages=10, iteration=1),
    ]

    comparison = compare_results(results)

    assert comparison is not None
    assert comparison.playwright.metrics.duration == 2000
    assert comparison.beautifulsoup.metrics.duration == 1000
    assert comparison.speedup == pytest.approx(2.0)
    assert comparison.pages_difference == 4


def test_zero_duration_divisor_gives_no_speedup(make_result):
    """A zero beautifulsoup duration yields speedup None instead of raising."""
    results = [
        make_result(PW, duration=100),
        make_result(SOUP, duration=0),
    ]

    comparison = compare_results(results)

    assert comparison is not None
    assert comparison.speedup is None


def test_memory_difference_keeps_precision(make_result):
    """Memory difference is the plain subtraction of the averages."""
    results = [
        make_result(PW, memory=10.0),
        make_result(SOUP, memory=10.3),
    ]

    comparison = compare_results(results)

    assert comparison is not None
    assert comparison.memory_difference == 10.3 - 10.0
    assert comparison.memory_difference == pytest.approx(0.3)


def test_split_by_crawler_keeps_order(make_result):
    """Grouping keeps every type and the original order within a type."""
    a0 = make_result(PW, iteration=0)
    b0 = make_result(SOUP, iteration=0)
    a1 = make_result(PW, iteration=1)

    grouped = split_by_crawler([a0, b0, a1])

    assert grouped[PW] == [a0, a1]
    assert grouped[SOUP] == [b0]
    assert split_by_crawler([a0])[SOUP] == []
