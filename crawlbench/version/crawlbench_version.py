import hashlib
import os
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """
    Semantic version of crawlbench plus a fingerprint of the installed sources.

    The hash lets two saved reports be traced back to the same harness code.
    """

    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version, short hash and release date on one line."""
        return f"{self} (hash: {self.hash_short()}, date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def hash_short(self, length: int = 8) -> str:
        return self.hash[:length]

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        return self.date.strftime(fmt)


def _compute_source_hash() -> str:
    """SHA256 over every source file of the crawlbench package, in path order."""
    package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    hasher = hashlib.sha256()

    for root, dirs, files in os.walk(package_dir):
        dirs[:] = sorted(d for d in dirs if d not in ("__pycache__", ".pytest_cache"))
        for name in sorted(files):
            if not name.endswith(".py"):
                continue
            path = os.path.join(root, name)
            hasher.update(os.path.relpath(path, package_dir).encode())
            try:
                with open(path, "rb") as f:
                    hasher.update(f.read())
            except OSError:
                continue

    return hasher.hexdigest()


CRAWLBENCH_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    hash=_compute_source_hash(),
    date=datetime(2026, 10, 19),
)
