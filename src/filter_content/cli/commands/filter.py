"""Filter command - keep records whose properties match a query."""

import sys

import click

from ...context import pass_context
from ...core.engine import run_filter
from ...core.streaming import read_ndjson, write_ndjson


@click.command()
@click.argument("source", required=False, type=click.Path(dir_okay=False))
@click.option(
    "-p",
    "--properties",
    default=None,
    help="Space-delimited, dot-notated properties to match against "
    "(defaults to the `properties` setting).",
)
@click.option(
    "-q",
    "--query",
    default="",
    help="Regular expression to look for. Empty passes every record through.",
)
@pass_context
def filter(ctx, source, properties, query):
    """Filter NDJSON records by QUERY against PROPERTIES.

    A record is kept when any value at any of the properties contains a
    match for the query. Use @each to look inside arrays.

    Examples:
        # Records whose name contains "Ali"
        filter-content filter people.ndjson -p name -q Ali

        # Records with a "red" tag, reading stdin
        cat items.ndjson | filter-content filter -p "tags.@each" -q red

        # Several properties at once
        filter-content filter items.ndjson -p "name owner.email" -q example
    """
    try:
        if source:
            with open(source, encoding="utf-8") as input_stream:
                records = read_ndjson(input_stream)
        else:
            records = read_ndjson(sys.stdin)

        if properties is None:
            properties = ctx.settings.properties

        report = run_filter(records, properties, query, ctx.settings)

        for error in report.errors:
            click.echo(f"Warning: {error}", err=True)

        write_ndjson(report.items, sys.stdout)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
