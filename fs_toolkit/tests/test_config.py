from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from fs_toolkit.config import OptionsError, ToolkitOptions, load_options


def write_config(tmp_path: Path, payload) -> Path:
    path = tmp_path / "fs_toolkit.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_defaults_without_file_or_env() -> None:
    options = load_options(env={})
    assert options == ToolkitOptions()
    assert options.level == logging.INFO


def test_file_values_and_env_overrides(tmp_path: Path) -> None:
    config = write_config(tmp_path, {"encoding": "latin-1", "log_level": "warning"})
    options = load_options(config, env={"FS_TOOLKIT_LOG_LEVEL": "debug"})
    assert options.encoding == "latin-1"
    assert options.log_level == "DEBUG"
    assert options.level == logging.DEBUG


def test_log_path_expands_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    options = load_options(env={"FS_TOOLKIT_LOG_PATH": "~/logs/run.log"})
    assert options.log_path == tmp_path / "logs" / "run.log"


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    config = write_config(tmp_path, {"colour": "blue"})
    with pytest.raises(OptionsError) as excinfo:
        load_options(config, env={})
    assert excinfo.value.key == "colour"


def test_invalid_documents_are_rejected(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(OptionsError):
        load_options(broken, env={})

    with pytest.raises(OptionsError):
        load_options(write_config(tmp_path, ["encoding"]), env={})

    with pytest.raises(OptionsError):
        load_options(tmp_path / "missing.json", env={})


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(OptionsError) as excinfo:
        load_options(env={"FS_TOOLKIT_ENCODING": "no-such-codec"})
    assert excinfo.value.key == "encoding"

    with pytest.raises(OptionsError) as excinfo:
        load_options(env={"FS_TOOLKIT_LOG_LEVEL": "chatty"})
    assert excinfo.value.key == "log_level"
