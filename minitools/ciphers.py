"""XOR, Caesar, transposition, Vigenere and ROT13 ciphers."""

from __future__ import annotations

import getopt
import sys
from contextlib import ExitStack
from enum import Enum
from typing import Iterator, Sequence, TypeVar

_LINE_LIMIT = 99
_METHOD_LIMIT = 19
_USAGE = "Usage: {prog} -e (encrypt) -d (decrypt) -k (key) -i (input) -o (output)"

_Text = TypeVar("_Text", str, bytes)


class Method(Enum):
    """Cipher methods selectable from the command line."""

    XOR = "xor"
    CAESAR = "caesar"


def _chunks(data: _Text, newline: _Text, size: int = _LINE_LIMIT) -> Iterator[_Text]:
    """Split data the way a fixed-size line reader would."""
    start = 0
    while start < len(data):
        found = data.find(newline, start, start + size)
        end = found + 1 if found != -1 else min(start + size, len(data))
        yield data[start:end]
        start = end


def _cmod(value: int, modulus: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_alpha(ch: str) -> bool:
    return _is_upper(ch) or "a" <= ch <= "z"


def _atoi(text: str) -> int:
    text = text.lstrip()
    end = 0
    if text[:1] in ("+", "-"):
        end = 1
    start_digits = end
    while end < len(text) and text[end].isdigit() and text[end].isascii():
        end += 1
    if end == start_digits:
        return 0
    return int(text[:end])


def xor_cipher(data: bytes, key: int) -> bytes:
    """XOR every byte with the low byte of key, line by line.

    Each line is cut at the first byte that becomes zero.
    """
    mask = key & 0xFF
    pieces = []
    for chunk in _chunks(bytes(data), b"\n"):
        chunk = chunk.split(b"\0", 1)[0]
        mixed = bytes(byte ^ mask for byte in chunk)
        pieces.append(mixed.split(b"\0", 1)[0])
    return b"".join(pieces)


def caesar_cipher(text: str, key: int, encrypt: bool) -> str:
    """Shift ASCII letters by key; a negative shift is used to decrypt."""
    shift = abs(key) if encrypt else -abs(key)
    result = []
    for ch in text:
        if _is_alpha(ch):
            base = ord("A") if _is_upper(ch) else ord("a")
            temp = ord(ch) - base + shift
            if temp < 0:
                temp += 26
            result.append(chr(_cmod(temp, 26) + base))
        else:
            result.append(ch)
    return "".join(result)


def transpose_line(line: str, key: int) -> str:
    """Pad a line with 'X' to a multiple of key and read it column-wise."""
    if key <= 0:
        raise ValueError("transposition key must be positive")
    remainder = len(line) % key
    if remainder:
        line += "X" * (key - remainder)
    rows = len(line) // key
    return "".join(line[i // key + (i % key) * rows] for i in range(len(line)))


def transpose_cipher(text: str, key: int) -> str:
    """Apply the transposition to each line of text."""
    if key <= 0:
        raise ValueError("transposition key must be positive")
    return "".join(transpose_line(chunk, key) for chunk in _chunks(text, "\n"))


def vigenere_cipher(text: str, key: str, encrypt: bool) -> str:
    """Vigenere cipher over ASCII letters; the key advances only on letters."""
    if not key:
        raise ValueError("key must not be empty")
    result = []
    index = 0
    for ch in text:
        if _is_alpha(ch):
            base = ord("A") if _is_upper(ch) else ord("a")
            shift = ord(key[index % len(key)]) - base
            if not encrypt:
                shift = -shift
            result.append(chr(_cmod(ord(ch) - base + shift + 26, 26) + base))
            index += 1
        else:
            result.append(ch)
    return "".join(result)


def rot13(message: str) -> str:
    """Lower-case the message and rotate each letter by 13."""
    result = []
    for ch in message:
        if _is_upper(ch):
            ch = chr(ord(ch) + 32)
        if "a" <= ch <= "z":
            ch = chr((ord(ch) - ord("a") + 13) % 26 + ord("a"))
        result.append(ch)
    return "".join(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt or decrypt a file with the chosen method."""
    args = list(sys.argv[1:] if argv is None else argv)
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "encryptor"
    try:
        opts, _ = getopt.gnu_getopt(
            args, "edk:i:o:m:",
            ["encrypt", "decrypt", "key=", "input=", "output=", "method="],
        )
    except getopt.GetoptError as exc:
        print(exc, file=sys.stderr)
        print(_USAGE.format(prog=prog), file=sys.stderr)
        return 1

    encrypt = decrypt = False
    key = 0
    method = ""
    with ExitStack() as stack:
        source = sink = None
        for opt, value in opts:
            if opt in ("-e", "--encrypt"):
                encrypt = True
            elif opt in ("-d", "--decrypt"):
                decrypt = True
            elif opt in ("-k", "--key"):
                key = _atoi(value)
            elif opt in ("-i", "--input"):
                try:
                    source = stack.enter_context(open(value, "rb"))
                except OSError:
                    print("Input File Path does not exist")
                    print("Exiting Program...", end="")
                    return 1
            elif opt in ("-o", "--output"):
                try:
                    sink = stack.enter_context(open(value, "wb"))
                except OSError as exc:
                    print(f"Error opening output file: {exc.strerror}", file=sys.stderr)
                    return 1
            elif opt in ("-m", "--method"):
                method = value[:_METHOD_LIMIT]

        if encrypt == decrypt:
            print("Error: Choose either --encrypt or --decrypt, not both!", file=sys.stderr)
            return 1
        if source is None or sink is None:
            print("Error: Input and Output files are required!", file=sys.stderr)
            return 1

        data = source.read()
        try:
            chosen = Method(method)
        except ValueError:
            chosen = None
        if chosen is Method.XOR:
            sink.write(xor_cipher(data, key))
            print("Processing complete!")
        elif chosen is Method.CAESAR:
            text = data.decode("latin-1")
            sink.write(caesar_cipher(text, key, encrypt).encode("latin-1"))
        else:
            print("Error: Unknown encryption method!", file=sys.stderr)
        print("Processing complete!")
    return 0


def rot13_main(argv: Sequence[str] | None = None) -> int:
    """Read one line from standard input and print its ROT13 form."""
    print("Enter text here: ", end="", flush=True)
    line = sys.stdin.readline()[:1023]
    message = line.split("\n", 1)[0]
    print(f"Cipher text is {rot13(message)} ")
    return 0