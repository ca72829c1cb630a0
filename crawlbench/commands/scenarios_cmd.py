"""Scenarios command - lists the named benchmark presets."""

from pathlib import Path

import click

from crawlbench.scenarios import ScenarioRegistry, ScenarioRegistryError


def build_registry(scenarios_file: str | Path | None = None) -> ScenarioRegistry:
    """Built-in scenarios plus any loaded from ``scenarios_file``.

    Raises:
        click.ClickException: If the file cannot be loaded.
    """
    registry = ScenarioRegistry()
    if scenarios_file:
        try:
            registry.load_file(scenarios_file)
        except ScenarioRegistryError as e:
            raise click.ClickException(str(e)) from e
    return registry


def print_scenarios(registry: ScenarioRegistry) -> None:
    click.echo("\nAvailable scenarios:\n")
    for scenario in registry.all():
        click.echo(f"  {scenario.name}")
        if scenario.description:
            click.echo(f"    {scenario.description}")
        click.echo(f"    URL: {scenario.url}")
        click.echo(
            f"    Max Pages: {scenario.max_pages}, Max Depth: {scenario.max_depth}\n"
        )
    click.echo(f"Total: {len(registry)} scenarios")


def run_scenarios(scenarios_file: str | None = None) -> None:
    print_scenarios(build_registry(scenarios_file))
