"""Core data model for stored snippets.

A snippet is a named body of code together with the time it was saved.
The name is the identity of a snippet in every storage backend; saving
under an existing name replaces the previous snippet entirely.

Key components:
- Snippet: Immutable record persisted by the storage backends
- now_iso: Timestamp helper producing the ``created_at`` format
"""

from datetime import datetime, timezone

import msgspec

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class Snippet(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable named snippet.

    ``created_at`` is stored as text (ISO-8601, second precision, UTC) and
    is assigned by whoever creates the snippet, never by a backend.
    """

    name: str
    code: str
    created_at: str

    def __post_init__(self):
        """Reject snippets without a name.

        Raised during decoding too, where msgspec reports it as a
        validation error.
        """
        if not self.name:
            raise ValueError("Snippet name must not be empty")

    def to_dict(self) -> dict[str, str]:
        """Convert to a plain dictionary."""
        return msgspec.to_builtins(self)

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "Snippet":
        """Create a snippet from a dictionary."""
        return msgspec.convert(data, cls)


def now_iso(now: datetime | None = None) -> str:
    """Format the current UTC time (or ``now``) as a snippet timestamp."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)
