"""filter-content CLI main entry point with global options."""

import sys

import click

from .. import config
from ..context import FilterContext, configure_logging
from ..core.errors import ConfigError


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Settings file (overrides $FILTER_CONTENT_CONFIG)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, config_path, verbose):
    """filter-content - filter NDJSON records by query against dot-notated properties."""
    ctx.ensure_object(FilterContext)
    configure_logging(verbose)
    ctx.obj.verbose = verbose

    try:
        ctx.obj.settings = config.use(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


# Register commands at module level so tests can import cli with commands attached
from .commands.filter import filter
from .commands.paths import paths

cli.add_command(filter)
cli.add_command(paths)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
