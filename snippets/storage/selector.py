"""Backend selection from a storage specifier.

A specifier has the form ``KIND:location``, for example
``JSON:/home/me/snippets.json`` or ``SQLITE:/var/lib/snippets.sqlite``.
Only the first ``:`` separates the kind, so locations may contain colons.
The specifier is always passed in explicitly; this module never reads
the environment.
"""

from enum import Enum

from .backends.base import BaseBackend
from .backends.filesystem import FileBackend
from .backends.sqlite import SQLiteBackend
from .exceptions import StorageConfigError

DEFAULT_STORAGE = "JSON:snippets.json"
SEPARATOR = ":"


class StorageKind(str, Enum):
    """Supported storage engines."""

    JSON = "JSON"
    SQLITE = "SQLITE"


def parse_specifier(spec: str) -> tuple[StorageKind, str]:
    """Split a specifier into its storage kind and location.

    Raises:
        StorageConfigError: If the separator is missing, the kind is not
            recognized (matching is case-sensitive), or the location is empty
            or contains a null byte.
    """
    kind, sep, location = spec.partition(SEPARATOR)
    if not sep:
        raise StorageConfigError(
            f"Malformed storage specifier {spec!r}: expected KIND:location, "
            "e.g. JSON:/path/to/snippets.json or SQLITE:/path/to/snippets.sqlite",
            value=spec,
        )

    try:
        storage_kind = StorageKind(kind)
    except ValueError:
        supported = ", ".join(k.value for k in StorageKind)
        raise StorageConfigError(
            f"Unsupported storage type: {kind} (expected one of {supported})",
            value=kind,
        ) from None

    if not location:
        raise StorageConfigError(
            f"Storage specifier {spec!r} has an empty location", value=spec
        )
    if "\x00" in location:
        raise StorageConfigError(
            f"Storage location {location!r} contains a null byte", value=location
        )

    return storage_kind, location


def create_backend(spec: str) -> BaseBackend:
    """Construct the backend described by ``spec``.

    Raises:
        StorageConfigError: If the specifier is invalid.
        StorageInitError: If the backend cannot be set up.
    """
    kind, location = parse_specifier(spec)

    if kind is StorageKind.JSON:
        return FileBackend(location)
    return SQLiteBackend(location)
