"""Exception classes for the storage layer.

Every backend reports failures through this hierarchy so callers can
handle them without knowing which engine is in use. Not-found is never
an error: ``get`` returns ``None`` and ``delete`` succeeds.
"""


class StorageError(Exception):
    """Base exception for storage-related errors."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        backend: str | None = None,
        location: str | None = None,
    ):
        """Initialize with message and optional failure context."""
        self.operation = operation
        self.backend = backend
        self.location = location
        super().__init__(message)


class StorageConfigError(StorageError, ValueError):
    """Raised when a storage specifier is malformed or names an unknown kind."""

    def __init__(self, message: str, *, value: str | None = None):
        """Initialize with message and the offending value."""
        self.value = value
        super().__init__(message)


class StorageInitError(StorageError):
    """Raised when a backend cannot be set up."""

    pass


class StorageIOError(StorageError):
    """Raised when the storage medium cannot be read or written."""

    pass


class StorageSerializationError(StorageError):
    """Raised when a snippet cannot be encoded for storage."""

    pass


class StorageCorruptionError(StorageError):
    """Raised when persisted content cannot be decoded."""

    def __init__(self, location: str, details: str = "", **context):
        """Initialize with location and details."""
        message = f"Storage corruption detected at {location}"
        if details:
            message += f": {details}"
        super().__init__(message, location=location, **context)
