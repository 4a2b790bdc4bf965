"""Command line front-end for the saved-log store.

``catlogstore`` (or ``python -m catlogstore``) exposes the storage
operations for scripting and for inspecting a card from a desktop::

    catlogstore --root /media/sdcard list --long
    catlogstore --root /media/sdcard save crash.txt < capture.txt
    catlogstore --root /media/sdcard migrate
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config.runtime import load_config
from .core import IOFailure, LogStorageManager, StorageUnavailable, TextBlock

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_UNAVAILABLE = 2


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catlogstore", description="Manage saved log files on the storage volume"
    )
    parser.add_argument("--root", type=Path, help="Storage root (overrides config)")
    parser.add_argument("--config", type=Path, help="YAML config file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("check", help="Report whether the storage root is available")

    list_cmd = sub.add_parser("list", help="List saved logs, newest first")
    list_cmd.add_argument(
        "-l", "--long", action="store_true", help="Show modification time and size"
    )

    show_cmd = sub.add_parser("show", help="Print a saved log")
    show_cmd.add_argument("name")

    save_cmd = sub.add_parser("save", help="Append text to a saved log")
    save_cmd.add_argument("name")
    save_cmd.add_argument("source", nargs="?", type=Path, help="Input file (default: stdin)")
    save_cmd.add_argument(
        "--temp",
        action="store_true",
        help="Overwrite a temporary capture file instead of appending to a saved log",
    )

    delete_cmd = sub.add_parser("delete", help="Delete a saved log if it exists")
    delete_cmd.add_argument("name")

    sub.add_parser("migrate", help="Move logs out of the legacy directory")
    return parser


def _build_manager(args: argparse.Namespace) -> LogStorageManager:
    config = load_config(args.config)
    if args.root is not None:
        config.storage_root = str(args.root)
    return LogStorageManager.from_config(config)


def _notify(message: str) -> None:
    print(message, file=sys.stderr)


def _read_source(source: Path | None) -> str:
    if source is None:
        return sys.stdin.read()
    return source.read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        store = _build_manager(args)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.command == "check":
        if store.check_storage(_notify):
            print(f"Storage available: {store.storage_root}")
            return EXIT_OK
        return EXIT_UNAVAILABLE

    if args.command == "list":
        if args.long:
            for info in store.list_logs():
                stamp = info.last_modified.strftime("%Y-%m-%d %H:%M:%S")
                print(f"{stamp}  {info.size:>10}  {info.name}")
        else:
            for name in store.list_log_filenames():
                print(name)
        return EXIT_OK

    if args.command == "show":
        for line in store.open_log(args.name):
            print(line)
        return EXIT_OK

    if args.command == "delete":
        store.delete_if_exists(args.name)
        return EXIT_OK

    # The remaining commands write, so check the card first.
    if not store.check_storage(_notify):
        return EXIT_UNAVAILABLE

    if args.command == "save":
        try:
            content = TextBlock(_read_source(args.source))
        except OSError as exc:
            print(f"Couldn't read {args.source}: {exc}", file=sys.stderr)
            return EXIT_FAILURE
        if args.temp:
            try:
                path = store.save_temporary(args.name, content)
            except (IOFailure, StorageUnavailable) as exc:
                print(exc, file=sys.stderr)
                return EXIT_FAILURE
            print(path)
            return EXIT_OK
        return EXIT_OK if store.save_log(args.name, content) else EXIT_FAILURE

    if args.command == "migrate":
        if not store.legacy_dir_exists():
            print("No legacy saved logs to migrate")
            return EXIT_OK
        moved = store.migrate_legacy_if_needed()
        print(f"Moved {moved} saved logs")
        return EXIT_OK

    return EXIT_FAILURE  # pragma: no cover - argparse rejects unknown commands


if __name__ == "__main__":
    sys.exit(main())
