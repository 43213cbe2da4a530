"""Storage layer for snippets.

Select a backend from a ``KIND:location`` specifier and use it through
the common contract:

    with create_backend("SQLITE:snippets.sqlite") as backend:
        backend.save(Snippet(name="greet", code="print(1)", created_at=now_iso()))
        snippet = backend.get("greet")
        backend.delete("greet")

All failures are raised as subclasses of StorageError.
"""

from .backends import BaseBackend, FileBackend, SQLiteBackend
from .exceptions import (
    StorageConfigError,
    StorageCorruptionError,
    StorageError,
    StorageInitError,
    StorageIOError,
    StorageSerializationError,
)
from .selector import DEFAULT_STORAGE, StorageKind, create_backend, parse_specifier

__all__ = [
    "DEFAULT_STORAGE",
    "BaseBackend",
    "FileBackend",
    "SQLiteBackend",
    "StorageConfigError",
    "StorageCorruptionError",
    "StorageError",
    "StorageIOError",
    "StorageInitError",
    "StorageKind",
    "StorageSerializationError",
    "create_backend",
    "parse_specifier",
]
