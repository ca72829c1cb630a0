"""Named benchmark scenarios (target URL plus crawl bounds).

Usage:
    from crawlbench.scenarios import ScenarioRegistry

    registry = ScenarioRegistry()
    scenario = registry.get("simple-static")

    # Extra scenarios from a YAML file:
    registry.load_file("scenarios.yaml")

Scenario file format:
    scenarios:
      - name: blog
        url: https://blog.example.com
        max_pages: 15
        max_depth: 2
        description: Personal blog with pagination
"""

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped, unused-ignore]
from pydantic import BaseModel, ConfigDict, Field

from crawlbench.errors import CrawlbenchError


class Scenario(BaseModel):
    """A reusable crawl target."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    max_pages: int = Field(..., gt=0)
    max_depth: int = Field(..., gt=0)
    description: str = ""


BUILTIN_SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        name="simple-static",
        url="https://example.com",
        max_pages=5,
        max_depth=1,
        description="Simple static website with minimal JavaScript",
    ),
    Scenario(
        name="medium-site",
        url="https://httpbin.org",
        max_pages=10,
        max_depth=2,
        description="Medium complexity site with multiple pages",
    ),
    Scenario(
        name="documentation",
        url="https://crawlee.dev",
        max_pages=20,
        max_depth=2,
        description="Documentation site with structured content",
    ),
)


class ScenarioRegistryError(CrawlbenchError):
    """Base exception for scenario registry errors."""

    pass


class ScenarioNameCollisionError(ScenarioRegistryError):
    """Raised when two scenarios share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Scenario name collision: '{name}' is already registered")


class ScenarioNotFoundError(ScenarioRegistryError):
    """Raised when a requested scenario is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown scenario '{name}'. Available: {', '.join(available)}"
        )


class ScenarioFileError(ScenarioRegistryError):
    """Raised when a scenario file cannot be read or has the wrong shape."""

    pass


class ScenarioRegistry:
    """Lookup table of scenarios, seeded with the built-in presets."""

    def __init__(self, include_builtin: bool = True) -> None:
        self._scenarios: dict[str, Scenario] = {}
        if include_builtin:
            for scenario in BUILTIN_SCENARIOS:
                self.register(scenario)

    def register(self, scenario: Scenario) -> None:
        """Add a scenario.

        Raises:
            ScenarioNameCollisionError: If the name is taken.
        """
        if scenario.name in self._scenarios:
            raise ScenarioNameCollisionError(scenario.name)
        self._scenarios[scenario.name] = scenario

    def load_file(self, path: str | Path) -> list[Scenario]:
        """Register every scenario listed in a YAML file.

        Returns:
            The scenarios that were added.

        Raises:
            ScenarioFileError: If the file is missing, unparsable or invalid.
            ScenarioNameCollisionError: If a name is already registered.
        """
        path = Path(path)
        if not path.exists():
            raise ScenarioFileError(f"Scenario file not found: {path}")

        try:
            data: Any = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise ScenarioFileError(f"Error parsing {path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("scenarios"), list):
            raise ScenarioFileError(f"{path} must contain a 'scenarios' list")

        loaded: list[Scenario] = []
        for entry in data["scenarios"]:
            try:
                scenario = Scenario.model_validate(entry)
            except ValueError as e:
                raise ScenarioFileError(f"Invalid scenario in {path}: {e}") from e
            self.register(scenario)
            loaded.append(scenario)
        return loaded

    def get(self, name: str) -> Scenario:
        """Return the scenario called ``name``.

        Raises:
            ScenarioNotFoundError: If it is not registered.
        """
        try:
            return self._scenarios[name]
        except KeyError:
            raise ScenarioNotFoundError(name, self.names()) from None

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._scenarios)

    def all(self) -> list[Scenario]:
        """Registered scenarios in registration order."""
        return list(self._scenarios.values())

    def __contains__(self, name: str) -> bool:
        return name in self._scenarios

    def __len__(self) -> int:
        return len(self._scenarios)


def get_scenario(name: str) -> Scenario | None:
    """Return a built-in scenario by name, or None."""
    for scenario in BUILTIN_SCENARIOS:
        if scenario.name == name:
            return scenario
    return None
