"""Reporting files created, deleted and modified below a directory."""

from __future__ import annotations

import errno
import os
import sys
from typing import Sequence, TextIO

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer


class ChangePrinter(FileSystemEventHandler):
    """Writes a line for each change, preceded by the directory it happened in."""

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__()
        self.out = sys.stdout if out is None else out

    def _report(self, event, verb: str) -> None:
        parent, name = os.path.split(os.fsdecode(event.src_path))
        self.out.write(f"Path: {parent}\n")
        self.out.write(f"{verb}: {name or '(no name)'}\n")
        self.out.flush()

    def on_created(self, event) -> None:
        self._report(event, "Created")

    def on_deleted(self, event) -> None:
        self._report(event, "Deleted")

    def on_modified(self, event) -> None:
        if event.is_directory:
            return
        self._report(event, "Modified")


def watch(path, out: TextIO | None = None) -> None:
    """Watch path recursively and print changes until interrupted."""
    if not os.path.exists(path):
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
    observer = Observer()
    observer.schedule(ChangePrinter(out), str(path), recursive=True)
    observer.start()
    try:
        while observer.is_alive():
            observer.join(1)
    finally:
        observer.stop()
        observer.join()


def main(argv: Sequence[str] | None = None) -> int:
    """Watch the directory named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "watch_dir"
        print(f"Usage: {prog} <dir_name>", file=sys.stderr)
        return 1
    try:
        watch(args[0])
    except PermissionError as exc:
        print(f"permission denied: {exc.strerror}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"watch file descriptor: {exc.strerror}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0