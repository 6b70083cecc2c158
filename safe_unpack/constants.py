"""
Constants and exit codes for safe-unpack.
"""

DEFAULT_MAX_ENTRIES = 10000
DEFAULT_MAX_EXTRACTED_BYTES = 1024 * 1024 * 1024
DEFAULT_COPY_CHUNK_BYTES = 8192

MAX_ENTRIES_ENV = "SAFE_UNPACK_MAX_ENTRIES"
MAX_EXTRACTED_BYTES_ENV = "SAFE_UNPACK_MAX_EXTRACTED_BYTES"
COPY_CHUNK_BYTES_ENV = "SAFE_UNPACK_COPY_CHUNK_BYTES"
LOG_LEVEL_ENV = "SAFE_UNPACK_LOG_LEVEL"


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    EXTRACTION_FAILED = 1
    DIRECTORY_CREATION_FAILED = 2
    PATH_TRAVERSAL = 3
    SIZE_LIMIT_EXCEEDED = 4
    TOO_MANY_ENTRIES = 5
    DELETION_FAILED = 6
    ARCHIVE_OPEN_FAILED = 7
    INVALID_CONFIG = 8
