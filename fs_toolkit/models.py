"""Dataclasses describing paths during unique-name resolution."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class PathParts:
    """An absolutized path split into directory, base name and extension."""

    directory: Path
    base_name: str
    extension: str
    absolute: Path

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "PathParts":
        """Decompose *path* after lexical absolutization.

        Only the final extension is stripped, so ``foo-1.txt`` has the base
        name ``foo-1``.
        """

        absolute = Path(os.path.abspath(os.fspath(path)))
        base_name, extension = os.path.splitext(absolute.name)
        return cls(
            directory=absolute.parent,
            base_name=base_name,
            extension=extension,
            absolute=absolute,
        )

    def with_serial(self, serial: int) -> Path:
        return self.directory / f"{self.base_name}-{serial}{self.extension}"


@dataclass(slots=True, frozen=True)
class CandidateMatch:
    """A sibling entry named ``<base>-<digits><ext>``."""

    name: str
    serial: int


__all__ = ["CandidateMatch", "PathParts"]
