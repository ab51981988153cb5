"""Configuration for fs-toolkit command line runs."""

from __future__ import annotations

import codecs
import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

ENV_PREFIX = "FS_TOOLKIT_"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class OptionsError(Exception):
    """Raised when a configuration file or override is invalid."""

    message: str
    key: str | None = None

    def __str__(self) -> str:
        if self.key:
            return f"{self.message} (key: {self.key})"
        return self.message


@dataclass
class ToolkitOptions:
    """Settings shared by the CLI handlers."""

    encoding: str = "utf-8"
    log_level: str = "INFO"
    log_path: Optional[Path] = None

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def load_options(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ToolkitOptions:
    """Build :class:`ToolkitOptions` from an optional JSON file and the environment.

    Environment variables (``FS_TOOLKIT_ENCODING``, ``FS_TOOLKIT_LOG_LEVEL``,
    ``FS_TOOLKIT_LOG_PATH``) win over values from the file.
    """

    raw: dict[str, Any] = {}
    if path is not None:
        raw.update(_read_config(Path(path)))

    environ = os.environ if env is None else env
    for field_ in fields(ToolkitOptions):
        value = environ.get(ENV_PREFIX + field_.name.upper())
        if value:
            raw[field_.name] = value

    return _build(raw)


def _read_config(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise OptionsError(f"Config file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise OptionsError(f"Cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise OptionsError(f"Invalid config JSON at line {exc.lineno}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise OptionsError("Config file must contain a JSON object")

    known = {field_.name for field_ in fields(ToolkitOptions)}
    for key in data:
        if key not in known:
            raise OptionsError("Unknown option", key=key)
    return data


def _build(raw: Mapping[str, Any]) -> ToolkitOptions:
    options = ToolkitOptions()

    encoding = raw.get("encoding", options.encoding)
    try:
        codecs.lookup(str(encoding))
    except LookupError as exc:
        raise OptionsError(f"Unknown encoding: {encoding!r}", key="encoding") from exc
    options.encoding = str(encoding)

    level = str(raw.get("log_level", options.log_level)).upper()
    if level not in _LEVELS:
        raise OptionsError(f"Unknown log level: {level!r}", key="log_level")
    options.log_level = level

    log_path = raw.get("log_path")
    if log_path:
        options.log_path = Path(str(log_path)).expanduser()
    return options


__all__ = ["OptionsError", "ToolkitOptions", "load_options"]
