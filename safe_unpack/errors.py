"""
Custom exception classes for safe-unpack.
"""

from typing import Optional


class SafeUnpackError(Exception):
    """Base exception class for safe-unpack errors."""
    pass


class ConfigValidationError(SafeUnpackError):
    """Raised when extraction limits are not usable."""
    pass


class ExtractionError(SafeUnpackError):
    """Base class for every failure of an ``unpack`` call."""
    pass


class DirectoryCreationError(ExtractionError):
    """Raised when the target root or an intermediate directory cannot be created."""
    pass


class PathTraversalError(ExtractionError):
    """Raised when an entry resolves outside the target directory."""

    def __init__(self, entry_name: str) -> None:
        super().__init__(f"Potential path traversal attack: {entry_name!r}")
        self.entry_name = entry_name


class SizeLimitExceededError(ExtractionError):
    """Raised when the cumulative extracted size goes over the limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            f"Exceeded the maximum extracted size limit of {limit} bytes, it might be a zip bomb"
        )
        self.limit = limit


class TooManyEntriesError(ExtractionError):
    """Raised when the archive holds more entries than allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            f"Too many entries to unpack (limit {limit}), it might be a zip bomb"
        )
        self.limit = limit


class DeletionError(ExtractionError):
    """Raised when cleanup cannot remove a file or directory.

    When raised while rolling back a failed extraction, ``original_error``
    holds the exception that triggered the rollback.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
        self.original_error: Optional[BaseException] = None


class ArchiveOpenError(ExtractionError):
    """Raised when the archive cannot be opened for reading."""
    pass
