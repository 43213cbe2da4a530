"""SQLite storage backend."""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import msgspec

from snippets.core.models import Snippet

from ..exceptions import (
    StorageCorruptionError,
    StorageError,
    StorageInitError,
    StorageIOError,
    StorageSerializationError,
)
from .base import BaseBackend

SCHEMA = """
    CREATE TABLE IF NOT EXISTS snippets (
        name TEXT PRIMARY KEY,
        code TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
"""


class SQLiteBackend(BaseBackend):
    """SQLite-based storage with one row per snippet.

    The connection runs in autocommit mode, so every statement is its own
    transaction and the engine handles locking between processes.
    """

    kind = "SQLITE"

    # Seconds to wait on a database locked by another process
    LOCK_TIMEOUT = 30.0

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self.conn: sqlite3.Connection | None = None
        self.initialize()

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the connection, ensuring it is still open."""
        if self.conn is None:
            raise StorageIOError(
                f"SQLite storage at {self.db_path} is closed",
                backend=self.kind,
                location=str(self.db_path),
            )
        return self.conn

    def initialize(self) -> None:
        """Open the database and create the schema."""
        try:
            self.conn = sqlite3.connect(
                str(self.db_path),
                timeout=self.LOCK_TIMEOUT,
                isolation_level=None,
            )
            self.conn.row_factory = sqlite3.Row
            self.conn.execute(SCHEMA)
        except (sqlite3.Error, ValueError) as e:
            self.close()
            raise StorageInitError(
                f"Failed to open SQLite database at {self.db_path}: {e}",
                operation="initialize",
                backend=self.kind,
                location=str(self.db_path),
            ) from e

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Map sqlite3 exceptions onto the storage error hierarchy."""
        try:
            yield
        except StorageError:
            raise
        except UnicodeEncodeError as e:
            raise StorageSerializationError(
                f"Failed to encode snippet for SQLite: {e}",
                operation=operation,
                backend=self.kind,
                location=str(self.db_path),
            ) from e
        except sqlite3.OperationalError as e:
            raise StorageIOError(
                f"Failed to {operation} snippet in SQLite at {self.db_path}: {e}",
                operation=operation,
                backend=self.kind,
                location=str(self.db_path),
            ) from e
        except (sqlite3.DatabaseError, msgspec.ValidationError) as e:
            raise StorageCorruptionError(
                str(self.db_path),
                str(e),
                operation=operation,
                backend=self.kind,
            ) from e

    def save(self, snippet: Snippet) -> None:
        """Insert a snippet, or replace code and timestamp of an existing one."""
        with self._translate_errors("save"):
            self.connection.execute(
                """
                INSERT INTO snippets (name, code, created_at)
                VALUES (:name, :code, :created_at)
                ON CONFLICT(name) DO UPDATE SET
                    code = excluded.code,
                    created_at = excluded.created_at
            """,
                snippet.to_dict(),
            )

    def get(self, name: str) -> Snippet | None:
        """Read a snippet by primary key."""
        with self._translate_errors("get"):
            cursor = self.connection.execute(
                "SELECT name, code, created_at FROM snippets WHERE name = ?", (name,)
            )
            row = cursor.fetchone()

            if row:
                return Snippet.from_dict(dict(row))
            return None

    def delete(self, name: str) -> None:
        """Delete a snippet by primary key."""
        with self._translate_errors("delete"):
            self.connection.execute("DELETE FROM snippets WHERE name = ?", (name,))

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None
