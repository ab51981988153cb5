"""Collision-free path generation.

``resolve_unique_path("/data/foo.txt")`` returns ``/data/foo.txt`` when nothing
lives there yet. Otherwise the sibling listing is scanned for names of the form
``foo-<N>.txt`` and ``/data/foo-<max N + 1>.txt`` is returned. Gaps in the
series are never reused.

Only the final extension is stripped from the name, so resolving
``foo-1.txt`` starts a nested ``foo-1-<N>.txt`` series. The probe, the listing
and the caller's eventual write are not atomic; callers that race on the same
directory must create the returned path exclusively.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from .filesystem import FileSystem, PathLike, default_filesystem
from .logger import log_event
from .models import CandidateMatch, PathParts

LOGGER_NAME = "fs_toolkit.resolver"


class UniquePathResolver:
    """Find a path that does not collide with an existing entry."""

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.filesystem = filesystem or default_filesystem()
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    def resolve(self, path: PathLike) -> Path:
        parts = PathParts.from_path(path)
        if not self.filesystem.exists(parts.absolute):
            return parts.absolute

        listing = self.filesystem.list_entries(parts.directory)
        if not listing:
            return parts.absolute

        matches = sorted(_match_candidates(parts, listing), key=lambda match: match.serial)
        highest = matches[-1].serial if matches else 0
        resolved = parts.with_serial(highest + 1)
        log_event(
            self.logger,
            level=logging.DEBUG,
            action="unique.collision",
            message=f"{parts.absolute} exists, using {resolved.name}",
            extra={"path": str(parts.absolute), "resolved": str(resolved), "matches": len(matches)},
        )
        return resolved


def _match_candidates(parts: PathParts, names: list[str]) -> list[CandidateMatch]:
    pattern = re.compile(
        re.escape(parts.base_name) + r"-([0-9]+)" + re.escape(parts.extension)
    )
    matches = []
    for name in names:
        found = pattern.fullmatch(name)
        if found:
            matches.append(CandidateMatch(name=name, serial=int(found.group(1))))
    return matches


def resolve_unique_path(path: PathLike, *, filesystem: FileSystem | None = None) -> Path:
    """Functional shortcut for :meth:`UniquePathResolver.resolve`."""

    return UniquePathResolver(filesystem).resolve(path)


__all__ = ["UniquePathResolver", "resolve_unique_path"]
