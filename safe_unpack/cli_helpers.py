"""Shared CLI helpers for safe-unpack commands."""

import sys
from typing import Optional

from safe_unpack.constants import ExitCodes
from safe_unpack.errors import (
    ArchiveOpenError,
    ConfigValidationError,
    DeletionError,
    DirectoryCreationError,
    PathTraversalError,
    SizeLimitExceededError,
    TooManyEntriesError,
)


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to safe-unpack exit codes."""
    if isinstance(exc, DirectoryCreationError):
        return ExitCodes.DIRECTORY_CREATION_FAILED
    if isinstance(exc, PathTraversalError):
        return ExitCodes.PATH_TRAVERSAL
    if isinstance(exc, SizeLimitExceededError):
        return ExitCodes.SIZE_LIMIT_EXCEEDED
    if isinstance(exc, TooManyEntriesError):
        return ExitCodes.TOO_MANY_ENTRIES
    if isinstance(exc, DeletionError):
        return ExitCodes.DELETION_FAILED
    if isinstance(exc, ArchiveOpenError):
        return ExitCodes.ARCHIVE_OPEN_FAILED
    if isinstance(exc, ConfigValidationError):
        return ExitCodes.INVALID_CONFIG
    return None
