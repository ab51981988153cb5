from __future__ import annotations

import io
import json
from pathlib import Path

from fs_toolkit import cli


def run(tmp_path: Path, *argv: str) -> int:
    return cli.main(["--log-file", str(tmp_path / "cli.log"), *argv])


def test_cli_unique_and_exists(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / "foo.txt").write_text("a", encoding="utf-8")
    (tmp_path / "foo-4.txt").write_text("b", encoding="utf-8")

    assert run(tmp_path, "unique", str(tmp_path / "foo.txt")) == 0
    assert capsys.readouterr().out.strip() == str(tmp_path / "foo-5.txt")

    assert run(tmp_path, "exists", str(tmp_path / "foo.txt")) == 0
    assert capsys.readouterr().out.strip() == "true"
    assert run(tmp_path, "exists", str(tmp_path / "bar.txt")) == 1
    assert capsys.readouterr().out.strip() == "false"


def test_cli_write_read_and_remove(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    target = tmp_path / "notes" / "today.txt"

    assert run(tmp_path, "write", str(target), "--data", "hello") == 0
    assert run(tmp_path, "read", str(target)) == 0
    assert capsys.readouterr().out == "hello"

    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert run(tmp_path, "write", str(target)) == 0
    assert target.read_text(encoding="utf-8") == "from stdin"

    assert run(tmp_path, "remove", str(tmp_path / "notes")) == 0
    assert not (tmp_path / "notes").exists()


def test_cli_ensure_commands(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert run(tmp_path, "ensure-dir", str(tmp_path / "a" / "b")) == 0
    assert (tmp_path / "a" / "b").is_dir()
    assert run(tmp_path, "ensure-file", str(tmp_path / "c" / "d.txt")) == 0
    assert (tmp_path / "c" / "d.txt").is_file()
    out = capsys.readouterr().out.splitlines()
    assert out == [str(tmp_path / "a" / "b"), str(tmp_path / "c" / "d.txt")]


def test_cli_search(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    start = tmp_path / "x" / "y"
    start.mkdir(parents=True)
    marker = tmp_path / "fs-toolkit-cli-marker.toml"
    marker.write_text("", encoding="utf-8")

    assert run(tmp_path, "search", marker.name, "--start", str(start)) == 0
    assert capsys.readouterr().out.strip() == str(marker)

    assert run(tmp_path, "search", "fs-toolkit-absent.toml", "--start", str(start)) == 1
    assert "not found" in capsys.readouterr().err


def test_cli_reports_io_errors(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert run(tmp_path, "read", str(tmp_path / "missing.txt")) == 1
    assert "read failed" in capsys.readouterr().err

    lines = (tmp_path / "cli.log").read_text(encoding="utf-8").strip().splitlines()
    payload = json.loads(lines[-1])
    assert payload["action"] == "cli.read"
    assert payload["level"] == "ERROR"


def test_cli_rejects_bad_config(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = tmp_path / "bad.json"
    config.write_text(json.dumps({"log_level": "LOUD"}), encoding="utf-8")
    assert cli.main(["--config", str(config), "exists", str(tmp_path)]) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_cli_rejects_config_directory(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config_dir = tmp_path / "conf.d"
    config_dir.mkdir()
    assert cli.main(["--config", str(config_dir), "exists", str(tmp_path)]) == 1
    assert "Cannot read config file" in capsys.readouterr().err


def test_cli_rejects_undecodable_config(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = tmp_path / "utf16.json"
    config.write_bytes(b"\xff\xfe{}")
    assert cli.main(["--config", str(config), "exists", str(tmp_path)]) == 1
    assert "Cannot read config file" in capsys.readouterr().err


def test_cli_without_command_prints_help(capsys) -> None:
    assert cli.main([]) == 1
    assert "fstoolkit" in capsys.readouterr().out
