"""Pytest configuration and fixtures."""

import pytest

from snippets.cli.config import LOG_LEVEL_ENV, STORAGE_ENV


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate environment variables and working directory for each test.

    Config files in the user's home or the real working directory must not
    leak into tests, and the default JSON store lands in a temp directory.
    """
    monkeypatch.delenv(STORAGE_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
