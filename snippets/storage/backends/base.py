"""Base storage backend interface."""

from abc import ABC, abstractmethod
from typing import ClassVar

from snippets.core.models import Snippet


class BaseBackend(ABC):
    """Abstract base class for snippet storage backends.

    Operations are independent of each other; there is no required call
    order. A backend owns its storage resource until ``close()`` is called,
    and can be used as a context manager to guarantee that.
    """

    kind: ClassVar[str]

    @abstractmethod
    def save(self, snippet: Snippet) -> None:
        """Insert or fully replace the snippet stored under ``snippet.name``."""
        pass

    @abstractmethod
    def get(self, name: str) -> Snippet | None:
        """Return the snippet stored under ``name``, or None if absent."""
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """Delete the snippet stored under ``name``. Missing names are a no-op."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release backend resources."""
        pass

    def __enter__(self) -> "BaseBackend":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
