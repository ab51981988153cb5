"""fs-toolkit package exports."""

from .filesystem import (
    DirectoryAccessError,
    FileSystem,
    LocalFileSystem,
    MemoryFileSystem,
    default_filesystem,
)
from .resolver import UniquePathResolver, resolve_unique_path
from .utils.fs import (
    ensure_dir,
    ensure_file,
    exists,
    read_file,
    remove,
    search_file,
    unique_path,
    write_file,
)

__all__ = [
    "DirectoryAccessError",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "UniquePathResolver",
    "default_filesystem",
    "ensure_dir",
    "ensure_file",
    "exists",
    "read_file",
    "remove",
    "resolve_unique_path",
    "search_file",
    "unique_path",
    "write_file",
]
