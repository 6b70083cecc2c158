"""Extraction limits and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    COPY_CHUNK_BYTES_ENV,
    DEFAULT_COPY_CHUNK_BYTES,
    DEFAULT_MAX_ENTRIES,
    DEFAULT_MAX_EXTRACTED_BYTES,
    MAX_ENTRIES_ENV,
    MAX_EXTRACTED_BYTES_ENV,
)
from .errors import ConfigValidationError


def env_int(key: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    """Read an integer variable; unset or empty means ``default``.

    Raises:
        ConfigValidationError: the variable is set but is not an integer.
    """
    value = (os.environ if environ is None else environ).get(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigValidationError(f"{key} must be an integer, got {value!r}") from exc


@dataclass(frozen=True)
class ExtractionLimits:
    """Resource limits applied to a single ``unpack`` call."""

    max_entries: int = DEFAULT_MAX_ENTRIES
    max_extracted_bytes: int = DEFAULT_MAX_EXTRACTED_BYTES
    copy_chunk_bytes: int = DEFAULT_COPY_CHUNK_BYTES

    def __post_init__(self) -> None:
        for name in ("max_entries", "max_extracted_bytes", "copy_chunk_bytes"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigValidationError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExtractionLimits":
        """Build limits from ``SAFE_UNPACK_*`` variables; unset ones keep their defaults."""
        return cls(
            max_entries=env_int(MAX_ENTRIES_ENV, DEFAULT_MAX_ENTRIES, environ),
            max_extracted_bytes=env_int(MAX_EXTRACTED_BYTES_ENV, DEFAULT_MAX_EXTRACTED_BYTES, environ),
            copy_chunk_bytes=env_int(COPY_CHUNK_BYTES_ENV, DEFAULT_COPY_CHUNK_BYTES, environ),
        )
