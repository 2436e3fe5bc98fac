"""SHA-256 manifest of every regular file below a directory."""

from __future__ import annotations

import getopt
import hashlib
import os
import stat
import sys
from typing import Iterator, List, Sequence, TextIO, Tuple

_BLOCK = 8192
_USAGE = "Usage: {prog} -h <hash-func> -d <input directory> -o <output file>)"


def sha256_file(path) -> str:
    """Hex SHA-256 digest of a file's contents."""
    digest = hashlib.sha256()
    with open(path, "rb") as fh:
        for block in iter(lambda: fh.read(_BLOCK), b""):
            digest.update(block)
    return digest.hexdigest()


def _complain(path, exc: OSError) -> None:
    print(f"{path}: {exc.strerror or exc}", file=sys.stderr)


def walk_hashes(directory) -> Iterator[Tuple[str, str]]:
    """Yield (digest, path) for every regular file, descending into subdirectories."""
    directory = os.fsdecode(directory)
    try:
        entries = os.scandir(directory)
    except OSError as exc:
        _complain(directory, exc)
        return
    with entries:
        for entry in entries:
            full_path = f"{directory}/{entry.name}"
            try:
                mode = os.stat(full_path).st_mode
            except OSError as exc:
                _complain(full_path, exc)
                continue
            if stat.S_ISREG(mode):
                try:
                    digest = sha256_file(full_path)
                except OSError as exc:
                    _complain(full_path, exc)
                    continue
                yield digest, full_path
            elif stat.S_ISDIR(mode):
                yield from walk_hashes(full_path)


def write_manifest(directory, out: TextIO) -> List[Tuple[str, str]]:
    """Write one "digest path" line per file to out; return the entries written."""
    written = []
    for digest, path in walk_hashes(directory):
        out.write(f"{digest} {path}\n")
        written.append((digest, path))
    return written


def _read_char(stream: TextIO) -> str:
    while True:
        line = stream.readline()
        if not line:
            return ""
        text = line.lstrip()
        if text:
            return text[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Hash a directory tree into a manifest file."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "gen_dir_hash"
    try:
        opts, _ = getopt.gnu_getopt(args, "d:o:", ["dir=", "out="])
    except getopt.GetoptError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        print(_USAGE.format(prog=prog), file=sys.stderr)
        return 1

    in_dir = out_file = None
    for opt, value in opts:
        if opt in ("-o", "--out"):
            out_file = value
        elif opt in ("-d", "--dir"):
            in_dir = value
            if not os.path.isdir(in_dir):
                print("Exiting program...", file=sys.stderr)
                return 1

    if not in_dir or not out_file:
        print("Both --dir and --out are required.", file=sys.stderr)
        return 1

    if os.path.exists(out_file):
        print("Do you wish to overwrite the file, (y)es or (n)o: ", end="", flush=True)
        if _read_char(sys.stdin) not in ("y", "Y"):
            print("Exiting program...", file=sys.stderr)
            return 1
    else:
        print(f"'{out_file}' not found, creating it.")

    try:
        with open(out_file, "w", encoding="utf-8") as out:
            entries = write_manifest(in_dir, out)
    except OSError as exc:
        print(f"fopen: {exc.strerror}", file=sys.stderr)
        return 1
    for digest, path in entries:
        print(f"[+] {digest} {path}")
    print(f"\n[*] Manifest written to {out_file}")
    return 0