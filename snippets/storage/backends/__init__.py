"""Pluggable storage backends.

Both backends implement the same save/get/delete contract:

- **FileBackend**: a single JSON file rewritten atomically on every change
- **SQLiteBackend**: one table row per snippet, upserted by name
"""

from .base import BaseBackend
from .filesystem import FileBackend
from .sqlite import SQLiteBackend

__all__ = [
    "BaseBackend",
    "FileBackend",
    "SQLiteBackend",
]
