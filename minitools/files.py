"""Everyday file utilities: cat, head, line count, size, listing, copy and tee."""

from __future__ import annotations

import errno
import getopt
import os
import re
import signal
import sys
import time
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Sequence, TextIO, TypeVar

_FGETS_LIMIT = 1023
_READ_CHUNK = 1024
_TEE_CHUNK = 4096
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

_Line = TypeVar("_Line", str, bytes)


def _arguments(argv: Sequence[str] | None) -> List[str]:
    return list(sys.argv[1:] if argv is None else argv)


def _prog(default: str) -> str:
    return sys.argv[0] if sys.argv and sys.argv[0] else default


def _atoi(text: str) -> int:
    found = _INT_PREFIX.match(text)
    return int(found.group(1)) if found else 0


def _fgets(stream: Iterable[_Line]) -> Iterator[_Line]:
    """Lines as a 1024-byte line reader returns them: long lines come in pieces."""
    for line in stream:
        for start in range(0, len(line), _FGETS_LIMIT):
            yield line[start:start + _FGETS_LIMIT]


def _open_text(path) -> TextIO:
    return open(path, "r", encoding="utf-8", errors="replace", newline="")


def cat_files(paths: Iterable[str], out: TextIO, err: TextIO) -> int:
    """Write each file followed by a newline; return how many could not be opened."""
    failures = 0
    for path in paths:
        try:
            with _open_text(path) as fh:
                for line in fh:
                    out.write(line)
        except OSError:
            err.write(f"Could not open file: {path}\n")
            failures += 1
            continue
        out.write("\n")
    return failures


def head_lines(lines: Iterable[str], n: int) -> List[str]:
    """The first n lines, each prefixed with its 1-based number."""
    return [f"{number}: {line}" for number, line in zip(range(1, n + 1), lines)]


def count_lines(path) -> int:
    """Number of reads a 1024-byte line reader needs for the file."""
    with open(path, "rb") as fh:
        return sum(1 for _ in _fgets(fh))


def file_size(path) -> int:
    return os.stat(path).st_size


def list_directory(path=".") -> List[str]:
    """Directory entries, including '.' and '..'."""
    return [".", "..", *os.listdir(path)]


def _readable(path) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def copy_to_directory(filename, dest_dir) -> Path:
    """Copy a file into a directory under its own base name; return the new path."""
    if not _readable(filename):
        raise FileNotFoundError(errno.ENOENT, "File path does not exist", str(filename))
    if not os.path.isdir(dest_dir):
        raise NotADirectoryError(errno.ENOTDIR, "Directory does not exist", str(dest_dir))
    with open(filename, "rb") as fh:
        data = fh.read()
    base = str(filename).rsplit("/", 1)[-1]
    dest = Path(dest_dir) / base
    with open(dest, "wb") as fh:
        fh.write(data)
    return dest


def tee(source: BinaryIO, out: BinaryIO, path) -> int:
    """Copy source into both a truncated file and out; return the byte count."""
    read = getattr(source, "read1", source.read)
    total = 0
    with open(path, "wb") as fh:
        for chunk in iter(lambda: read(_TEE_CHUNK), b""):
            fh.write(chunk)
            out.write(chunk)
            out.flush()
            total += len(chunk)
    return total


def slow_cat(path, out: BinaryIO, delay: float = 0.1) -> int:
    """Write a file to out in 1 KiB pieces, pausing after each; return the byte count."""
    total = 0
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(_READ_CHUNK), b""):
            out.write(chunk)
            out.flush()
            total += len(chunk)
            time.sleep(delay)
    return total


def cat_main(argv: Sequence[str] | None = None) -> int:
    """Print every file named on the command line."""
    args = _arguments(argv)
    if not args:
        print(f"Usage: {_prog('cat_plus')} file1 [file2 ... fileN]", file=sys.stderr)
        return 1
    cat_files(args, sys.stdout, sys.stderr)
    return 0


def head_main(argv: Sequence[str] | None = None) -> int:
    """Print the first lines (10 unless -n says otherwise) of each file, numbered."""
    args = _arguments(argv)
    try:
        opts, paths = getopt.gnu_getopt(args, "n:")
    except getopt.GetoptError as exc:
        print(f"{_prog('myhead')}: {exc}", file=sys.stderr)
        return 0
    count = 10
    for _, value in opts:
        count = _atoi(value)
    for path in paths:
        try:
            with _open_text(path) as fh:
                for line in head_lines(_fgets(fh), count):
                    sys.stdout.write(line)
        except OSError:
            print(f"Could not open file: {path}", file=sys.stderr)
            continue
        sys.stdout.write("\n")
    return 0


def linecount_main(argv: Sequence[str] | None = None) -> int:
    """Print the number of lines in one file."""
    args = _arguments(argv)
    if len(args) != 1:
        print("Error: only One command line argument needed", file=sys.stderr)
        return 1
    try:
        count = count_lines(args[0])
    except OSError:
        print("File path does not exist", file=sys.stderr)
        return 1
    print(f"Line count: {count}")
    return 0


def filesize_main(argv: Sequence[str] | None = None) -> int:
    """Print the size of one file in bytes."""
    args = _arguments(argv)
    if len(args) != 1:
        print("Error: only One command line argument needed", file=sys.stderr)
        return 1
    try:
        size = file_size(args[0])
    except OSError as exc:
        print(f"stat: {exc.strerror}", file=sys.stderr)
        return 1
    print(f"File {args[0]} has size  {size} bytes")
    return 0


def listdir_main(argv: Sequence[str] | None = None) -> int:
    """List the entries of a directory, the current one by default."""
    args = _arguments(argv)
    if len(args) > 1:
        print(f"Usage: {_prog('list_dir')} <directory>", file=sys.stderr)
        return 1
    try:
        entries = list_directory(args[0] if args else ".")
    except OSError:
        print("Directory not found ", file=sys.stderr)
        return 1
    for entry in entries:
        print(entry)
    return 0


def copy_main(argv: Sequence[str] | None = None) -> int:
    """Copy a file into a directory."""
    args = _arguments(argv)
    if len(args) != 2:
        print(f"Error!. Usage {_prog('copyfile')} <filename> <dest directory> ", file=sys.stderr)
        return 1
    filename, dest_dir = args
    dest = f"{dest_dir}/{filename.rsplit('/', 1)[-1]}"
    try:
        copy_to_directory(filename, dest_dir)
    except NotADirectoryError:
        print(f"Directory does not exist: {dest_dir}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        if exc.filename == filename:
            print(f"File path {filename} does not exist", file=sys.stderr)
        else:
            print(f"Cannot open file: {dest}", file=sys.stderr)
        return 1
    except OSError:
        print(f"Cannot open file: {dest}", file=sys.stderr)
        return 1
    print("File copied successfully")
    return 0


def tee_main(argv: Sequence[str] | None = None) -> int:
    """Copy standard input to a file and to standard output."""
    args = _arguments(argv)
    if len(args) != 1:
        print("One command line argument needed", file=sys.stderr)
        return 1
    sys.stdout.flush()
    try:
        tee(sys.stdin.buffer, sys.stdout.buffer, args[0])
    except OSError as exc:
        if exc.filename == args[0]:
            print(f"File could not open: {exc.strerror}", file=sys.stderr)
        else:
            print(f"Error occurred: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


def _on_sigint(signum, frame) -> None:
    sys.stdout.write("\n^C caught, continuing\n")
    sys.stdout.flush()


def icat_main(argv: Sequence[str] | None = None) -> int:
    """Print a file slowly, carrying on through Ctrl+C."""
    args = _arguments(argv)
    if len(args) != 1:
        print(f"Usage: {_prog('icat')} <filename>", file=sys.stderr)
        return 1
    previous = signal.signal(signal.SIGINT, _on_sigint)
    try:
        sys.stdout.flush()
        slow_cat(args[0], sys.stdout.buffer)
    except OSError as exc:
        if exc.filename == args[0]:
            print(f"Could not open file: {args[0]}", file=sys.stderr)
        else:
            print(f"write: {exc.strerror}", file=sys.stderr)
        return 1
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0