"""Paths command - show how a property list is normalized."""

import click

from ...core.paths import normalize_properties


@click.command()
@click.argument("properties")
def paths(properties):
    """Print the normalized paths of PROPERTIES, one per line.

    Examples:
        filter-content paths "first.name  last..name"
        # first.name
        # last.name
    """
    normalized = normalize_properties(properties)
    if not normalized:
        click.echo("No property paths found", err=True)
        return

    for path in normalized:
        click.echo(str(path))
