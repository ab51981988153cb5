"""Command line interface for fs-toolkit."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import OptionsError, ToolkitOptions, load_options
from .logger import configure_logging, log_event
from .utils import fs


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "handler"):
        parser.print_help()
        return 1

    try:
        options = load_options(args.config)
    except OptionsError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else options.level
    logger = configure_logging(args.log_file or options.log_path, level=level)
    try:
        return args.handler(args, options)
    except (OSError, UnicodeError, LookupError) as exc:
        log_event(
            logger,
            level=logging.ERROR,
            action=f"cli.{args.command}",
            message=f"{args.command} failed: {exc}",
        )
        print(f"{args.command} failed: {exc}", file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fstoolkit", description="Filesystem helper CLI")
    parser.add_argument("--config", type=Path, help="Path to a JSON options file")
    parser.add_argument("--log-file", type=Path, help="Write JSON log lines to this file")
    parser.add_argument("--verbose", action="store_true", help="Log debug events")
    subparsers = parser.add_subparsers(dest="command")

    exists = subparsers.add_parser("exists", help="Check whether a path exists")
    exists.add_argument("path", type=Path)
    exists.set_defaults(handler=_handle_exists)

    remove = subparsers.add_parser("remove", help="Delete a file or directory tree")
    remove.add_argument("path", type=Path)
    remove.set_defaults(handler=_handle_remove)

    ensure_dir = subparsers.add_parser("ensure-dir", help="Create a directory if missing")
    ensure_dir.add_argument("path", type=Path)
    ensure_dir.set_defaults(handler=_handle_ensure_dir)

    ensure_file = subparsers.add_parser("ensure-file", help="Create an empty file if missing")
    ensure_file.add_argument("path", type=Path)
    ensure_file.set_defaults(handler=_handle_ensure_file)

    read = subparsers.add_parser("read", help="Print a file")
    read.add_argument("path", type=Path)
    read.add_argument("--encoding", help="Text encoding (defaults to the configured one)")
    read.set_defaults(handler=_handle_read)

    write = subparsers.add_parser("write", help="Write text to a file, creating parents")
    write.add_argument("path", type=Path)
    write.add_argument("--data", help="Text to write (stdin when omitted)")
    write.set_defaults(handler=_handle_write)

    search = subparsers.add_parser("search", help="Find a file in a directory or its parents")
    search.add_argument("filename")
    search.add_argument("--start", type=Path, default=Path("."))
    search.set_defaults(handler=_handle_search)

    unique = subparsers.add_parser("unique", help="Print a collision-free variant of a path")
    unique.add_argument("path", type=Path)
    unique.set_defaults(handler=_handle_unique)

    return parser


def _handle_exists(args: argparse.Namespace, options: ToolkitOptions) -> int:
    found = fs.exists(args.path)
    print("true" if found else "false")
    return 0 if found else 1


def _handle_remove(args: argparse.Namespace, options: ToolkitOptions) -> int:
    fs.remove(args.path)
    return 0


def _handle_ensure_dir(args: argparse.Namespace, options: ToolkitOptions) -> int:
    print(fs.ensure_dir(args.path))
    return 0


def _handle_ensure_file(args: argparse.Namespace, options: ToolkitOptions) -> int:
    print(fs.ensure_file(args.path))
    return 0


def _handle_read(args: argparse.Namespace, options: ToolkitOptions) -> int:
    sys.stdout.write(fs.read_file(args.path, args.encoding or options.encoding))
    return 0


def _handle_write(args: argparse.Namespace, options: ToolkitOptions) -> int:
    data = args.data if args.data is not None else sys.stdin.read()
    fs.write_file(args.path, data, options.encoding)
    return 0


def _handle_search(args: argparse.Namespace, options: ToolkitOptions) -> int:
    match = fs.search_file(args.filename, args.start)
    if match is None:
        print(f"{args.filename} not found", file=sys.stderr)
        return 1
    print(match)
    return 0


def _handle_unique(args: argparse.Namespace, options: ToolkitOptions) -> int:
    print(fs.unique_path(args.path))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
