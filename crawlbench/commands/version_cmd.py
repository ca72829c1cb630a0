"""
Version command - displays crawlbench version information
"""

import click

from crawlbench.version import CRAWLBENCH_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display crawlbench version information.

    Args:
        verbose: If True, show the full source hash and release date
    """
    if not verbose:
        click.echo(f"crawlbench {CRAWLBENCH_VERSION}")
        return

    click.echo(f"crawlbench version {CRAWLBENCH_VERSION.full_version()}")
    click.echo("\nDetailed version information:")
    click.echo(f"  Semantic Version: {CRAWLBENCH_VERSION}")
    click.echo(f"  Release Date:     {CRAWLBENCH_VERSION.date_string()}")
    click.echo(f"  Source Hash:      {CRAWLBENCH_VERSION.hash}")
