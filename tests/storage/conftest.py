"""Shared fixtures for storage tests."""

import pytest

from snippets.core.models import Snippet


@pytest.fixture
def sample_snippet():
    """A valid sample snippet for testing."""
    return Snippet(name="greet", code="print(1)", created_at="2024-01-01T00:00:00Z")


@pytest.fixture
def sample_snippets():
    """A few snippets with varied names and bodies."""
    return [
        Snippet(name="greet", code="print(1)", created_at="2024-01-01T00:00:00Z"),
        Snippet(
            name="Cool Rust pattern",
            code='fn main() {\n    println!("hi");\n}\n',
            created_at="2024-02-03T04:05:06Z",
        ),
        Snippet(
            name="unicode/κλειδί:1",
            code="# αβγδ\n\tTab and \"quotes\"\n",
            created_at="2024-03-01T12:00:00Z",
        ),
    ]


@pytest.fixture
def json_path(tmp_path):
    """Location of a fresh JSON store."""
    return tmp_path / "snippets.json"


@pytest.fixture
def sqlite_path(tmp_path):
    """Location of a fresh SQLite store."""
    return tmp_path / "snippets.sqlite"
