"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from filter_content import config
from filter_content.cli import cli


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch, tmp_path):
    """Keep tests away from any real settings file.

    Settings resolution walks up from the working directory and reads
    $FILTER_CONTENT_CONFIG, so each test runs in an empty temporary
    directory with the variable unset and the settings cache cleared.
    """
    monkeypatch.delenv(config.CONFIG_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    config.reset()
    yield
    config.reset()


@pytest.fixture(autouse=True)
def clear_log_handlers():
    """Drop stderr handlers the CLI installs with -v."""
    yield
    logger = logging.getLogger("filter_content")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["filter", "-p", "name", "-q", "Ali"], input_data=ndjson)
        result = invoke(["paths", "first.name last.name"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def people_ndjson(test_data):
    """Provide path to people.ndjson test file."""
    return test_data / "people.ndjson"


@pytest.fixture
def sample_ndjson():
    """Provide sample NDJSON data as string."""
    return (
        '{"name":"Alice","age":30,"tags":["red","blue"]}\n'
        '{"name":"Bob","age":25,"tags":["green"]}\n'
    )


@pytest.fixture
def people():
    """Provide people records with nested and array properties."""
    return [
        {
            "name": {"first": "Alice", "last": "Smith"},
            "age": 30,
            "active": True,
            "tags": ["red", "blue"],
            "pets": [{"name": "Rex", "kind": "dog"}, {"name": "Tom", "kind": "cat"}],
        },
        {
            "name": {"first": "Bob", "last": "Jones"},
            "age": 25,
            "active": False,
            "tags": ["green"],
            "pets": [],
        },
        {
            "name": {"first": "Carol", "last": "Redding"},
            "age": 41,
            "active": True,
            "tags": [],
            "pets": [{"name": "Goldie", "kind": "fish"}],
        },
    ]
