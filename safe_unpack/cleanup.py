"""Iterative removal of directory trees.

Trees left behind by a failed extraction may be arbitrarily deep, so the
walk keeps its own stack instead of recursing.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from .errors import DeletionError
from .logging_config import get_logger

_log = get_logger(__name__)


def _unlink(path: Path) -> None:
    try:
        path.unlink()
    except OSError as exc:
        raise DeletionError(f"Failed to delete file: {path}", str(path)) from exc


def _rmdir(path: Path) -> None:
    try:
        path.rmdir()
    except OSError as exc:
        raise DeletionError(f"Failed to delete directory: {path}", str(path)) from exc


def _children(path: Path) -> List[Path]:
    try:
        return list(path.iterdir())
    except OSError as exc:
        raise DeletionError(f"Failed to list directory: {path}", str(path)) from exc


def delete_all(directory: Union[str, Path]) -> None:
    """Delete ``directory`` and everything below it.

    Children are removed before their parents. Symbolic links are removed
    as links and never followed. Does nothing if ``directory`` is absent.

    Raises:
        DeletionError: a path could not be listed or removed; the tree may
            be partially deleted.
    """
    root = Path(directory)
    if root.is_symlink() or (root.exists() and not root.is_dir()):
        _unlink(root)
        return
    if not root.exists():
        return

    removed = 0
    stack: List[Path] = [root]
    while stack:
        current = stack.pop()
        children = _children(current)
        if children:
            # Revisit once the children are gone.
            stack.append(current)
            for child in children:
                if child.is_dir() and not child.is_symlink():
                    stack.append(child)
                else:
                    _unlink(child)
                    removed += 1
        else:
            _rmdir(current)
            removed += 1

    _log.debug("Deleted %s (%d paths)", root, removed)


__all__ = ["delete_all"]
