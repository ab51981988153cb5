"""Filesystem helpers used by fs-toolkit.

Thin wrappers that delegate to an injected :class:`~fs_toolkit.filesystem.FileSystem`,
falling back to the shared local implementation.
"""
from __future__ import annotations

import os
from pathlib import Path

from ..filesystem import FileSystem, PathLike, default_filesystem
from ..resolver import resolve_unique_path


def _fs(filesystem: FileSystem | None) -> FileSystem:
    return filesystem or default_filesystem()


def exists(path: PathLike, *, filesystem: FileSystem | None = None) -> bool:
    return _fs(filesystem).exists(path)


def remove(path: PathLike, *, filesystem: FileSystem | None = None) -> None:
    _fs(filesystem).remove(path)


def ensure_dir(path: PathLike, *, filesystem: FileSystem | None = None) -> Path:
    """Ensure that *path* exists as a directory and return it."""

    return _fs(filesystem).ensure_dir(path)


def ensure_file(path: PathLike, *, filesystem: FileSystem | None = None) -> Path:
    """Ensure that *path* exists as a file, leaving existing content alone."""

    return _fs(filesystem).ensure_file(path)


def read_file(
    path: PathLike,
    encoding: str | None = "utf-8",
    *,
    filesystem: FileSystem | None = None,
) -> str | bytes:
    return _fs(filesystem).read_file(path, encoding)


def write_file(
    path: PathLike,
    data: str | bytes,
    encoding: str = "utf-8",
    *,
    filesystem: FileSystem | None = None,
) -> Path:
    return _fs(filesystem).write_file(path, data, encoding)


def search_file(
    filename: str,
    start_dir: PathLike = ".",
    *,
    filesystem: FileSystem | None = None,
) -> Path | None:
    """Look for *filename* in *start_dir* and then in each parent directory.

    Returns the first absolute match, or ``None`` once the filesystem root has
    been checked without success.
    """

    fs = _fs(filesystem)
    current = Path(os.path.abspath(start_dir))
    while True:
        candidate = Path(os.path.abspath(current / filename))
        if fs.exists(candidate):
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def unique_path(path: PathLike, *, filesystem: FileSystem | None = None) -> Path:
    """Return *path* or, if it is taken, the next ``<base>-<N><ext>`` sibling."""

    return resolve_unique_path(path, filesystem=filesystem)


__all__ = [
    "ensure_dir",
    "ensure_file",
    "exists",
    "read_file",
    "remove",
    "search_file",
    "unique_path",
    "write_file",
]
