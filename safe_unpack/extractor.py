"""
Guarded archive extraction.

Expands a ZIP archive into a target directory while enforcing:
* path containment (no entry may resolve outside the target root)
* a maximum number of entries
* a maximum number of decompressed bytes, checked while streaming

Extraction is all-or-nothing: on any failure the target directory is
removed before the original error reaches the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .archive import ArchiveEntry, ZipArchiveReader
from .cleanup import delete_all
from .config import ExtractionLimits
from .errors import (
    DeletionError,
    DirectoryCreationError,
    PathTraversalError,
    SizeLimitExceededError,
    TooManyEntriesError,
)
from .logging_config import get_logger

PathLike = Union[str, Path]


@dataclass
class ExtractionState:
    """Counters for a single ``unpack`` call."""

    files_processed: int = 0
    total_bytes_written: int = 0


def _make_dirs(path: Path, message: str) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(f"{message}: {path}") from exc


def resolve_inside(root: Path, entry_name: str) -> Path:
    """Return the canonical path of ``entry_name`` joined onto ``root``.

    Raises:
        PathTraversalError: the canonical path is neither ``root`` itself nor
            below it.
    """
    canonical_root = root.resolve()
    candidate = (root / entry_name).resolve()
    if candidate != canonical_root and canonical_root not in candidate.parents:
        raise PathTraversalError(entry_name)
    return candidate


class ArchiveExtractor:
    """Extracts archives under a fixed set of limits."""

    def __init__(
        self,
        limits: Optional[ExtractionLimits] = None,
        reader_factory: Callable[[Path], ZipArchiveReader] = ZipArchiveReader,
    ) -> None:
        self.limits = limits or ExtractionLimits()
        self._reader_factory = reader_factory
        self._log = get_logger(__name__)

    def unpack(self, archive: PathLike, target: PathLike) -> ExtractionState:
        """Extract ``archive`` into ``target``.

        The target directory (and missing ancestors) is created when absent.

        Returns:
            The final counters of the extraction.

        Raises:
            DirectoryCreationError: the target cannot be created; the archive
                is not opened and nothing is cleaned up.
            ArchiveOpenError: the archive cannot be read; an existing target
                is left untouched.
            PathTraversalError, SizeLimitExceededError, TooManyEntriesError:
                the archive is rejected.
            DeletionError: rollback itself failed; ``original_error`` holds
                the error that triggered it.
        """
        archive_path = Path(archive)
        target_path = Path(target)

        created = not target_path.exists()
        if created:
            _make_dirs(target_path, "Failed to create target directory")
        elif not target_path.is_dir():
            raise DirectoryCreationError(f"Target exists and is not a directory: {target_path}")

        # Entries are written below the canonical root, so that is what a
        # rollback has to remove when the target is a symlink.
        root = target_path.resolve()

        try:
            reader = self._reader_factory(archive_path)
        except Exception:
            # Nothing has been written yet; only undo the directory we made.
            if created:
                delete_all(root)
            raise

        state = ExtractionState()
        with reader:
            try:
                for entry in reader.entries():
                    self._extract_entry(reader, entry, root, state)
            except Exception as exc:
                self._rollback(root, exc)
                raise

        self._log.info(
            "Extracted %d entries (%d bytes) from %s into %s",
            state.files_processed, state.total_bytes_written, archive_path, target_path,
        )
        return state

    def _rollback(self, root: Path, exc: Exception) -> None:
        self._log.warning("Extraction failed (%s); removing %s", exc, root)
        try:
            delete_all(root)
        except DeletionError as cleanup_exc:
            cleanup_exc.original_error = exc
            raise cleanup_exc from exc

    def _extract_entry(self, reader, entry: ArchiveEntry, target: Path, state: ExtractionState) -> None:
        destination = resolve_inside(target, entry.name)

        if entry.is_dir:
            if not destination.exists():
                _make_dirs(destination, "Failed to create directory")
        else:
            parent = destination.parent
            if not parent.exists():
                _make_dirs(parent, "Failed to create parent directory")
            self._copy_entry(reader, entry, destination, state)

        self._log.debug("Extracted %s", entry.name)

        state.files_processed += 1
        if state.files_processed > self.limits.max_entries:
            raise TooManyEntriesError(self.limits.max_entries)

    def _copy_entry(self, reader, entry: ArchiveEntry, destination: Path, state: ExtractionState) -> None:
        chunk_size = self.limits.copy_chunk_bytes
        with reader.open(entry) as source, open(destination, "wb") as output:
            while True:
                chunk = source.read(chunk_size)
                if not chunk:
                    break
                output.write(chunk)
                state.total_bytes_written += len(chunk)
                if state.total_bytes_written > self.limits.max_extracted_bytes:
                    raise SizeLimitExceededError(self.limits.max_extracted_bytes)


def unpack(archive: PathLike, target: PathLike, limits: Optional[ExtractionLimits] = None) -> ExtractionState:
    """Extract ``archive`` into ``target`` using ``limits`` or the environment defaults."""
    return ArchiveExtractor(limits or ExtractionLimits.from_env()).unpack(archive, target)


__all__ = ["ArchiveExtractor", "ExtractionState", "resolve_inside", "unpack"]
