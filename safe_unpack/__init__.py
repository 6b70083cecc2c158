"""safe-unpack - guarded ZIP extraction.

Provides:
* `unpack` / `ArchiveExtractor` for all-or-nothing extraction with path
  containment, entry-count and extracted-size limits
* `delete_all` for iterative removal of arbitrarily deep directory trees
* Thin CLI wrapper (`safe-unpack`)
"""

from ._version import __version__
from .logging_config import configure_logging  # noqa: F401
from .config import ExtractionLimits  # noqa: F401
from .cleanup import delete_all  # noqa: F401
from .extractor import ArchiveExtractor, ExtractionState, unpack  # noqa: F401
from .errors import (  # noqa: F401
    ArchiveOpenError,
    ConfigValidationError,
    DeletionError,
    DirectoryCreationError,
    ExtractionError,
    PathTraversalError,
    SafeUnpackError,
    SizeLimitExceededError,
    TooManyEntriesError,
)

__all__ = [
    "__version__",
    "configure_logging",
    "ExtractionLimits",
    "delete_all",
    "ArchiveExtractor",
    "ExtractionState",
    "unpack",
    "SafeUnpackError",
    "ConfigValidationError",
    "ExtractionError",
    "DirectoryCreationError",
    "PathTraversalError",
    "SizeLimitExceededError",
    "TooManyEntriesError",
    "DeletionError",
    "ArchiveOpenError",
]
