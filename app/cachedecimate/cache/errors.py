"""Exceptions raised by the cache eviction domain.

Only FilesystemAccessError is fatal. EntryReadError and DeletionError
describe per-file failures that the scanner and operator recover from
locally by logging and skipping.
"""


class DecimateError(Exception):
    """Base exception for cache eviction errors.

    Attributes:
        path: Filesystem path the error relates to, if any.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class FilesystemAccessError(DecimateError):
    """Raised when the volume or the cache root cannot be read."""


class EntryReadError(DecimateError):
    """Metadata for a single entry found during the walk could not be read."""


class DeletionError(DecimateError):
    """A selected victim file could not be removed."""
