"""Tests for the crawlbench version information."""

from datetime import datetime

import crawlbench
from crawlbench.version.crawlbench_version import CRAWLBENCH_VERSION, Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2023, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2023"
    assert v.full_version() == "1.2.3 (hash: abcdef12, date: 2023-01-01)"


def test_package_version():
    """The package exposes the current version and a source hash."""
    assert isinstance(CRAWLBENCH_VERSION, Version)
    assert crawlbench.__version__ == str(CRAWLBENCH_VERSION)
    assert len(CRAWLBENCH_VERSION.hash) == 64
