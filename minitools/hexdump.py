"""A simple hex dump: offset, sixteen hex bytes and their printable characters."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence

ROW_SIZE = 16


def _printable(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def format_row(offset: int, chunk: bytes) -> str:
    """Format up to sixteen bytes that start at offset."""
    if len(chunk) > ROW_SIZE:
        raise ValueError(f"a row holds at most {ROW_SIZE} bytes")
    hex_part = "".join(f"{byte:02X} " for byte in chunk) + " " * (ROW_SIZE - len(chunk))
    text_part = "".join(f"{chr(byte)} " if _printable(byte) else ". " for byte in chunk)
    return f"{offset:08X} \t{hex_part}\t\t{text_part}"


def hexdump(data) -> Iterator[str]:
    """Yield one formatted row for every sixteen bytes of data."""
    data = bytes(data)
    for offset in range(0, len(data), ROW_SIZE):
        yield format_row(offset, data[offset:offset + ROW_SIZE])


def main(argv: Sequence[str] | None = None) -> int:
    """Dump the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: Need only One command line argument")
        return 255
    try:
        fh = open(args[0], "rb")
    except OSError:
        print("Could not locate file")
        return 255
    with fh:
        offset = 0
        for chunk in iter(lambda: fh.read(ROW_SIZE), b""):
            print(format_row(offset, chunk))
            offset += ROW_SIZE
    return 0