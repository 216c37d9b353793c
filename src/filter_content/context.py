"""CLI context for passing state between commands."""

import logging

import click

from .models import Settings

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class FilterContext:
    def __init__(self):
        self.settings = Settings()
        self.verbose = False


pass_context = click.make_pass_decorator(FilterContext, ensure=True)


def configure_logging(verbose: bool) -> None:
    """Send package logs to stderr at DEBUG when verbose.

    Without ``verbose`` the package stays silent; the CLI echoes reported
    errors itself.
    """
    logger = logging.getLogger("filter_content")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    if not verbose:
        logger.setLevel(logging.NOTSET)
        return

    handler = logging.StreamHandler(click.get_text_stream("stderr"))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
