"""Pytest configuration and fixtures for CLI tests."""

import json

import pytest
from click.testing import CliRunner


@pytest.fixture
def json_store(tmp_path):
    """Path of the JSON store used by CLI tests."""
    return tmp_path / "cli.json"


@pytest.fixture
def sqlite_store(tmp_path):
    """Path of the SQLite store used by CLI tests."""
    return tmp_path / "cli.sqlite"


@pytest.fixture
def read_json_store(json_store):
    """Read back the JSON store as a plain dict."""
    return lambda: json.loads(json_store.read_text())


@pytest.fixture
def cli_runner():
    """Click CLI test runner with custom invoke method."""

    class SnippetsCliRunner(CliRunner):
        def invoke(self, args, **kwargs):  # type: ignore
            """Invoke the snippets CLI when given a plain argument list."""
            from snippets.cli.main import cli

            if isinstance(args, list):
                return super().invoke(cli, args, **kwargs)
            return super().invoke(args, **kwargs)

    return SnippetsCliRunner()
