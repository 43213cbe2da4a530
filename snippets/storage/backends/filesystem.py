"""JSON file storage backend.

All snippets live in a single JSON object keyed by name. Every operation
reads the whole file, and every mutation rewrites it through a temporary
file in the same directory that is then renamed over the target, so a
reader never sees a partially written file.

Concurrent writers in separate processes are not coordinated: two
overlapping read-modify-write cycles lose one of the updates (the last
writer wins for the whole file). This is an accepted limitation of the
format. Use the SQLite backend when several processes write at once.
"""

import os
import tempfile
from pathlib import Path

import msgspec

from snippets.core.models import Snippet

from ..exceptions import (
    StorageCorruptionError,
    StorageInitError,
    StorageIOError,
    StorageSerializationError,
)
from .base import BaseBackend

_decoder = msgspec.json.Decoder(dict[str, Snippet])
_encoder = msgspec.json.Encoder(order="sorted")


class FileBackend(BaseBackend):
    """Snippet storage in one human-readable JSON file."""

    kind = "JSON"

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.initialize()

    def initialize(self) -> None:
        """Check that the location can hold the storage file.

        The file itself is created by the first write.
        """
        if "\x00" in str(self.path):
            raise StorageInitError(
                f"JSON storage path contains a null byte: {self.path!r}",
                operation="initialize",
                backend=self.kind,
                location=str(self.path),
            )
        if self.path.is_dir():
            raise StorageInitError(
                f"JSON storage path is a directory: {self.path}",
                operation="initialize",
                backend=self.kind,
                location=str(self.path),
            )
        parent = self.path.parent
        if not parent.is_dir():
            raise StorageInitError(
                f"Directory for JSON storage does not exist: {parent}",
                operation="initialize",
                backend=self.kind,
                location=str(self.path),
            )

    def _load(self, operation: str) -> dict[str, Snippet]:
        """Load the full name-to-snippet mapping."""
        try:
            content = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageIOError(
                f"Failed to read JSON storage from {self.path}: {e}",
                operation=operation,
                backend=self.kind,
                location=str(self.path),
            ) from e

        if not content.strip():
            return {}

        try:
            snippets = _decoder.decode(content)
        except msgspec.DecodeError as e:
            raise StorageCorruptionError(
                str(self.path),
                str(e),
                operation=operation,
                backend=self.kind,
            ) from e

        for key, snippet in snippets.items():
            if key != snippet.name:
                raise StorageCorruptionError(
                    str(self.path),
                    f"key {key!r} does not match snippet name {snippet.name!r}",
                    operation=operation,
                    backend=self.kind,
                )
        return snippets

    def _file_mode(self) -> int:
        """Permission bits for the rewritten file.

        An existing file keeps its mode; a new one gets the umask default.
        """
        try:
            return self.path.stat().st_mode & 0o777
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def _store(self, snippets: dict[str, Snippet], operation: str) -> None:
        """Encode the mapping and atomically replace the storage file."""
        try:
            data = msgspec.json.format(_encoder.encode(snippets), indent=2)
        except (msgspec.EncodeError, UnicodeEncodeError) as e:
            raise StorageSerializationError(
                f"Failed to serialize snippets to JSON: {e}",
                operation=operation,
                backend=self.kind,
                location=str(self.path),
            ) from e

        temp_path = None
        try:
            temp_fd, temp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            temp_path = Path(temp_name)
            with open(temp_fd, "wb") as f:
                f.write(data)
                f.write(b"\n")

            os.chmod(temp_path, self._file_mode())
            temp_path.replace(self.path)
        except OSError as e:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StorageIOError(
                f"Failed to write JSON storage to {self.path}: {e}",
                operation=operation,
                backend=self.kind,
                location=str(self.path),
            ) from e

    def save(self, snippet: Snippet) -> None:
        """Insert or replace a snippet and rewrite the file."""
        snippets = self._load("save")
        snippets[snippet.name] = snippet
        self._store(snippets, "save")

    def get(self, name: str) -> Snippet | None:
        """Look up a snippet by name."""
        return self._load("get").get(name)

    def delete(self, name: str) -> None:
        """Remove a snippet if present and rewrite the file."""
        snippets = self._load("delete")
        snippets.pop(name, None)
        self._store(snippets, "delete")

    def close(self) -> None:
        """No resources to close for the file backend."""
        pass
