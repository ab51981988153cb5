"""Structured logging utilities for fs-toolkit."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOGGER_NAME = "fs_toolkit"
_LOG_FORMAT = "%(message)s"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 3


def _sanitize(value: str) -> str:
    """Replace the home directory prefix with ``~/``."""

    home_str = str(Path.home())
    if not value.startswith(home_str):
        return value
    remainder = value[len(home_str):]
    if not remainder:
        return "~"
    if remainder[0] in ("/", "\\"):
        return f"~/{remainder[1:]}"
    return value


def configure_logging(
    log_path: Path | None = None,
    *,
    level: int = logging.INFO,
) -> logging.Logger:
    """Configure and return the package logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        if log_path:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
        else:
            for handler in logger.handlers:
                handler.setLevel(level)
            return logger

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            log_path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
    else:
        handler = logging.StreamHandler()

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def next_log_path(prefix: str) -> Path:
    """Return a fresh log file path under ``~/.fs_toolkit/logs``."""

    stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return Path.home() / ".fs_toolkit" / "logs" / f"{prefix}-{stamp}.log"


def _prepare_payload(data: dict[str, Any]) -> dict[str, Any]:
    sanitized: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            sanitized[key] = _sanitize(value)
        elif isinstance(value, dict):
            sanitized[key] = _prepare_payload(value)
        elif isinstance(value, (list, tuple)):
            sanitized[key] = [
                _sanitize(item) if isinstance(item, str) else item for item in value
            ]
        else:
            sanitized[key] = value
    return sanitized


def log_event(
    logger: logging.Logger,
    *,
    level: int,
    action: str,
    message: str,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit a single JSON log line for *action*."""

    if not logger.isEnabledFor(level):
        return

    payload: dict[str, Any] = {
        "ts": _utcnow_iso(),
        "level": logging.getLevelName(level),
        "action": action,
        "message": _sanitize(message),
    }
    if extra:
        payload.update(_prepare_payload(extra))

    logger.log(level, json.dumps(payload, ensure_ascii=False))


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["LOGGER_NAME", "configure_logging", "log_event", "next_log_path"]
