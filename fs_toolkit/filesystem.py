"""Filesystem capability surface used by the fs-toolkit helpers.

Every helper receives a :class:`FileSystem` instead of touching the disk
directly. :class:`LocalFileSystem` talks to the operating system and
:class:`MemoryFileSystem` keeps everything in dictionaries, which is handy for
tests and dry runs.
"""
from __future__ import annotations

import errno
import logging
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

from .logger import log_event

LOGGER_NAME = "fs_toolkit.filesystem"

PathLike = str | os.PathLike[str]


class DirectoryAccessError(OSError):
    """Raised when a directory listing cannot be produced."""


def _os_error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


class FileSystem(ABC):
    """Minimal set of filesystem operations the helpers rely on."""

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Return whether a file or directory exists at *path*.

        Never raises: any access problem is reported as ``False``.
        """

    @abstractmethod
    def list_entries(self, directory: PathLike) -> list[str]:
        """Return the entry names of *directory* (files and directories).

        Raises:
            DirectoryAccessError: if the directory is absent or unreadable.
        """

    @abstractmethod
    def remove(self, path: PathLike) -> None:
        """Delete a file or a whole directory tree. Missing paths are ignored."""

    @abstractmethod
    def ensure_dir(self, path: PathLike) -> Path:
        """Create *path* and its parents when absent."""

    @abstractmethod
    def ensure_file(self, path: PathLike) -> Path:
        """Create an empty file (and its parents) when absent."""

    @abstractmethod
    def read_file(self, path: PathLike, encoding: str | None = "utf-8") -> str | bytes:
        """Return the file contents, or raw bytes when *encoding* is ``None``."""

    @abstractmethod
    def write_file(
        self, path: PathLike, data: str | bytes, encoding: str = "utf-8"
    ) -> Path:
        """Write *data*, creating parent directories and replacing old content."""


class LocalFileSystem(FileSystem):
    """:class:`FileSystem` backed by the operating system."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def exists(self, path: PathLike) -> bool:
        try:
            return os.access(path, os.F_OK)
        except (OSError, ValueError):
            return False

    def list_entries(self, directory: PathLike) -> list[str]:
        try:
            return os.listdir(directory)
        except OSError as exc:
            log_event(
                self.logger,
                level=logging.DEBUG,
                action="fs.list_failed",
                message=f"Cannot list {directory}: {exc.strerror}",
                extra={"path": os.fspath(directory)},
            )
            raise DirectoryAccessError(exc.errno, exc.strerror, os.fspath(directory)) from exc

    def remove(self, path: PathLike) -> None:
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            try:
                target.unlink()
            except FileNotFoundError:
                return
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="fs.remove",
            message=f"Removed {target}",
            extra={"path": str(target)},
        )

    def ensure_dir(self, path: PathLike) -> Path:
        target = Path(path)
        target.mkdir(parents=True, exist_ok=True)
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="fs.ensure_dir",
            message=f"Ensured directory {target}",
            extra={"path": str(target)},
        )
        return target

    def ensure_file(self, path: PathLike) -> Path:
        target = Path(path)
        if target.is_file():
            return target
        if target.is_dir():
            raise _os_error(IsADirectoryError, errno.EISDIR, str(target))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.touch(exist_ok=True)
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="fs.ensure_file",
            message=f"Created {target}",
            extra={"path": str(target)},
        )
        return target

    def read_file(self, path: PathLike, encoding: str | None = "utf-8") -> str | bytes:
        target = Path(path)
        if encoding is None:
            return target.read_bytes()
        return target.read_text(encoding=encoding)

    def write_file(
        self, path: PathLike, data: str | bytes, encoding: str = "utf-8"
    ) -> Path:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, bytes):
            size = target.write_bytes(data)
        else:
            size = target.write_text(data, encoding=encoding)
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="fs.write",
            message=f"Wrote {target}",
            extra={"path": str(target), "size": size},
        )
        return target


class MemoryFileSystem(FileSystem):
    """In-memory :class:`FileSystem` keyed by absolute path strings."""

    def __init__(self) -> None:
        root = os.path.abspath(os.sep)
        self.files: dict[str, bytes] = {}
        self.dirs: set[str] = {root}

    @staticmethod
    def _key(path: PathLike) -> str:
        return os.path.abspath(os.fspath(path))

    def _children(self, key: str) -> list[str]:
        names = []
        for entry in (*self.files, *self.dirs):
            if entry != key and os.path.dirname(entry) == key:
                names.append(os.path.basename(entry))
        return sorted(names)

    def exists(self, path: PathLike) -> bool:
        try:
            key = self._key(path)
        except (TypeError, ValueError):
            return False
        return key in self.files or key in self.dirs

    def list_entries(self, directory: PathLike) -> list[str]:
        key = self._key(directory)
        if key not in self.dirs:
            code = errno.ENOTDIR if key in self.files else errno.ENOENT
            raise _os_error(DirectoryAccessError, code, key)
        return self._children(key)

    def remove(self, path: PathLike) -> None:
        key = self._key(path)
        if key in self.files:
            del self.files[key]
            return
        if key not in self.dirs:
            return
        prefix = key.rstrip(os.sep) + os.sep
        self.files = {name: data for name, data in self.files.items() if not name.startswith(prefix)}
        self.dirs = {name for name in self.dirs if not name.startswith(prefix)}
        if os.path.dirname(key) == key:
            # the root itself always stays
            self.dirs.add(key)
        else:
            self.dirs.discard(key)

    def ensure_dir(self, path: PathLike) -> Path:
        key = self._key(path)
        if key in self.files:
            raise _os_error(FileExistsError, errno.EEXIST, key)
        missing = []
        current = key
        while current not in self.dirs:
            if current in self.files:
                raise _os_error(NotADirectoryError, errno.ENOTDIR, current)
            missing.append(current)
            current = os.path.dirname(current)
        self.dirs.update(missing)
        return Path(key)

    def ensure_file(self, path: PathLike) -> Path:
        key = self._key(path)
        if key in self.dirs:
            raise _os_error(IsADirectoryError, errno.EISDIR, key)
        if key not in self.files:
            self.ensure_dir(os.path.dirname(key))
            self.files[key] = b""
        return Path(key)

    def read_file(self, path: PathLike, encoding: str | None = "utf-8") -> str | bytes:
        key = self._key(path)
        if key in self.dirs:
            raise _os_error(IsADirectoryError, errno.EISDIR, key)
        if key not in self.files:
            raise _os_error(FileNotFoundError, errno.ENOENT, key)
        data = self.files[key]
        return data if encoding is None else data.decode(encoding)

    def write_file(
        self, path: PathLike, data: str | bytes, encoding: str = "utf-8"
    ) -> Path:
        key = self._key(path)
        if key in self.dirs:
            raise _os_error(IsADirectoryError, errno.EISDIR, key)
        self.ensure_dir(os.path.dirname(key))
        self.files[key] = data if isinstance(data, bytes) else data.encode(encoding)
        return Path(key)


_default: LocalFileSystem | None = None


def default_filesystem() -> LocalFileSystem:
    """Return the shared :class:`LocalFileSystem` used when none is injected."""

    global _default
    if _default is None:
        _default = LocalFileSystem()
    return _default


__all__ = [
    "DirectoryAccessError",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "default_filesystem",
]
