"""Shared fixtures: ZIP archives built on the fly."""

from __future__ import annotations

import os
import sys
import zipfile
from pathlib import Path
from typing import Iterable, Tuple, Union

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

Member = Tuple[str, Union[str, bytes, None]]


def build_zip(path: Path, members: Iterable[Member]) -> Path:
    """Write a ZIP at ``path``; a ``None`` payload marks a directory entry."""
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, payload in members:
            if payload is None:
                zf.writestr(zipfile.ZipInfo(name if name.endswith("/") else name + "/"), b"")
            else:
                zf.writestr(name, payload)
    return path


@pytest.fixture
def make_zip(tmp_path):
    def _make(members: Iterable[Member], name: str = "archive.zip") -> Path:
        return build_zip(tmp_path / name, members)

    return _make
