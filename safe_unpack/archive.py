"""ZIP archive reader used by the extractor.

Parsing and decompression stay with :mod:`zipfile`; this module only adapts
it to the small reader interface the extractor consumes.
"""

from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Union

from .errors import ArchiveOpenError


@dataclass(frozen=True)
class ArchiveEntry:
    """A single member as listed by the archive."""

    name: str
    is_dir: bool
    size: Optional[int] = None
    info: Any = field(default=None, compare=False, repr=False)


class ZipArchiveReader:
    """Read-only view over a ZIP archive."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        try:
            self._zip = zipfile.ZipFile(self.path, "r")
        except (OSError, zipfile.BadZipFile) as exc:
            raise ArchiveOpenError(f"Failed to open archive {self.path}: {exc}") from exc

    def entries(self) -> Iterator[ArchiveEntry]:
        """Yield entries lazily, in central-directory order."""
        for info in self._zip.infolist():
            yield ArchiveEntry(name=info.filename, is_dir=info.is_dir(), size=info.file_size, info=info)

    def open(self, entry: ArchiveEntry) -> IO[bytes]:
        return self._zip.open(entry.info if entry.info is not None else entry.name, "r")

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "ZipArchiveReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
