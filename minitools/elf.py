"""Reading the header and section table of a 64-bit ELF file."""

from __future__ import annotations

import getopt
import struct
import sys
from dataclasses import dataclass
from typing import List, Sequence

ELF_MAGIC = b"\x7fELF"

_EHDR = struct.Struct("<16sHHIQQQIHHHHHH")
_SHDR = struct.Struct("<IIQQQQIIQQ")

_TYPE_NAMES = {
    2: "EXEC (Executable)",
    4: "A core file",
    3: "A shared object",
}

_SECTION_NAMES = {
    0: "NULL",
    1: "PROGBITS",
    2: "SYMTAB",
    3: "STRTAB",
    4: "RELA",
    5: "HASH",
    6: "DYNAMIC",
    7: "NOTE",
    8: "NOTBITS",
    9: "REL",
    10: "SHLIB",
    11: "DYNSYM",
    0x80000000: "LOUSER",
    0x8FFFFFFF: "HIUSER",
}


class ElfError(Exception):
    """Raised when the file does not hold what is needed."""


@dataclass(frozen=True)
class ElfHeader:
    e_ident: bytes
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int


@dataclass(frozen=True)
class SectionHeader:
    sh_name: int
    sh_type: int
    sh_flags: int
    sh_addr: int
    sh_offset: int
    sh_size: int
    sh_link: int
    sh_info: int
    sh_addralign: int
    sh_entsize: int


def parse_header(data: bytes) -> ElfHeader:
    """Decode the 64-byte file header at the start of data."""
    if len(data) < _EHDR.size:
        raise ElfError("Nothing to see here")
    return ElfHeader(*_EHDR.unpack_from(data))


def parse_sections(data: bytes, header: ElfHeader) -> List[SectionHeader]:
    """Decode the complete section headers that the file holds."""
    available = max(0, len(data) - header.e_shoff) // _SHDR.size
    count = min(header.e_shnum, available)
    if count == 0:
        raise ElfError("No section to see here")
    return [
        SectionHeader(*_SHDR.unpack_from(data, header.e_shoff + index * _SHDR.size))
        for index in range(count)
    ]


def describe_type(e_type: int) -> str:
    return _TYPE_NAMES.get(e_type, "Unknown Type")


def section_type_name(sh_type: int) -> str:
    return _SECTION_NAMES.get(sh_type, "UNKNOWN")


def _alt_hex(value: int) -> str:
    """Hex with a 0x prefix, except for zero."""
    return f"{value:#x}" if value else "0"


def _print_header(header: ElfHeader) -> None:
    print("Magic:    " + " ".join(_alt_hex(byte) for byte in ELF_MAGIC))
    print(f"Type: {describe_type(header.e_type)}")
    print(f"Entry:    {_alt_hex(header.e_entry)}")
    print(f"Sections: {header.e_shnum}")
    print(f"PH count: {header.e_phnum}")


def main(argv: Sequence[str] | None = None) -> int:
    """Show the file header (-h) or the section table (-S) of an ELF file."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "elfread"
    try:
        opts, rest = getopt.gnu_getopt(args, "hS:")
    except getopt.GetoptError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        print(f"Usage: {prog} [-h | -S | -s] <file>", file=sys.stderr)
        return 1
    show_header = any(opt == "-h" for opt, _ in opts)
    show_sections = any(opt == "-S" for opt, _ in opts)
    if not rest:
        print("Expected filename", file=sys.stderr)
        return 1
    try:
        with open(rest[0], "rb") as fh:
            data = fh.read()
    except OSError as exc:
        print(f"Error opening the file: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        header = parse_header(data)
    except ElfError as exc:
        print(exc, file=sys.stderr)
        return 1

    if show_header:
        if header.e_ident[:4] != ELF_MAGIC:
            print("File is not an elf file", file=sys.stderr)
            return 1
        _print_header(header)
    elif show_sections:
        print(f"There are {header.e_shnum} section headers, "
              f"starting at offset {_alt_hex(header.e_shoff)}")
        try:
            sections = parse_sections(data, header)
        except ElfError as exc:
            print(exc, file=sys.stderr)
            return 1
        for index, section in enumerate(sections):
            print(f"{index}: {section_type_name(section.sh_type)} {section.sh_size}")
    return 0