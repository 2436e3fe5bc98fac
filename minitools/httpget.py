"""Fetching a URL and writing the body to standard output."""

from __future__ import annotations

import sys
import urllib.error
import urllib.request
from typing import BinaryIO, Sequence

DEFAULT_URL = "https://cheat.sh/ls"
_CHUNK = 16384


def fetch(url: str, out: BinaryIO) -> int:
    """Copy the body found at url into out; return the number of bytes."""
    total = 0
    with urllib.request.urlopen(url) as response:
        for chunk in iter(lambda: response.read(_CHUNK), b""):
            out.write(chunk)
            total += len(chunk)
    out.flush()
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Print the page at the given URL, or the default cheat sheet."""
    args = list(sys.argv[1:] if argv is None else argv)
    url = args[0] if args else DEFAULT_URL
    sys.stdout.flush()
    try:
        fetch(url, sys.stdout.buffer)
    except (urllib.error.URLError, OSError, ValueError) as exc:
        print(f"httpget: {exc}", file=sys.stderr)
    return 0