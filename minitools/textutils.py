"""Vowel counting and case-insensitive search of shell history."""

from __future__ import annotations

import os
import re
import string
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_VOWEL_INPUT_LIMIT = 62

_PUNCT = "".join("\\" + ch for ch in string.punctuation)
_CLASSES = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "a-zA-Z0-9",
    "upper": "A-Z",
    "lower": "a-z",
    "space": " \\t\\n\\r\\f\\v",
    "blank": " \\t",
    "punct": _PUNCT,
    "xdigit": "0-9A-Fa-f",
    "cntrl": "\\x00-\\x1f\\x7f",
    "print": "\\x20-\\x7e",
    "graph": "\\x21-\\x7e",
}


def count_vowels(text: str) -> int:
    return sum(1 for ch in text if ch in "aeiouAEIOU")


def _bracket(pattern: str, start: int) -> tuple[int, str]:
    """Translate a bracket expression starting at pattern[start] == '['."""
    n = len(pattern)
    j = start + 1
    negate = j < n and pattern[j] == "^"
    if negate:
        j += 1
    items = []
    if j < n and pattern[j] == "]":
        items.append("\\]")
        j += 1
    while j < n and pattern[j] != "]":
        if pattern.startswith("[:", j):
            end = pattern.find(":]", j + 2)
            if end < 0:
                raise re.error("unterminated character class")
            name = pattern[j + 2:end]
            if name not in _CLASSES:
                raise re.error(f"invalid character class {name!r}")
            items.append(_CLASSES[name])
            j = end + 2
        elif pattern.startswith("[.", j) or pattern.startswith("[=", j):
            closer = pattern[j + 1] + "]"
            end = pattern.find(closer, j + 2)
            if end < 0:
                raise re.error("unterminated collating element")
            items.append(re.escape(pattern[j + 2:end]))
            j = end + 2
        else:
            ch = pattern[j]
            items.append("\\" + ch if ch in "\\^[]" else ch)
            j += 1
    if j >= n:
        raise re.error("unmatched [")
    return j + 1, "[" + ("^" if negate else "") + "".join(items) + "]"


def _translate(pattern: str) -> str:
    """Turn a POSIX basic regular expression into Python syntax."""
    out = []
    n = len(pattern)
    i = 0
    at_start = True
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= n:
                raise re.error("trailing backslash")
            nxt = pattern[i + 1]
            i += 2
            if nxt in "(){}|":
                out.append(nxt)
                at_start = nxt in "(|"
                continue
            if nxt.isdigit() and nxt != "0":
                out.append("\\" + nxt)
            else:
                out.append(re.escape(nxt))
            at_start = False
            continue
        if ch == "[":
            i, translated = _bracket(pattern, i)
            out.append(translated)
            at_start = False
            continue
        if ch == "^":
            out.append("^" if at_start else "\\^")
            i += 1
            continue
        if ch == "*" and at_start:
            out.append("\\*")
        elif ch == "$":
            rest = pattern[i + 1:]
            anchored = not rest or rest.startswith("\\)") or rest.startswith("\\|")
            out.append("$" if anchored else "\\$")
        elif ch in ".*":
            out.append(ch)
        else:
            out.append(re.escape(ch))
        at_start = False
        i += 1
    return "".join(out)


def grep_lines(pattern: str, lines: Iterable[str]) -> List[str]:
    """Lines, without their newline, that match a case-insensitive basic regex."""
    compiled = re.compile(_translate(pattern), re.IGNORECASE)
    matches = []
    for line in lines:
        text = line.split("\n", 1)[0]
        if compiled.search(text):
            matches.append(text)
    return matches


def vowel_main(argv: Sequence[str] | None = None) -> int:
    """Count the vowels in one line read from standard input."""
    print("Enter the string: ", end="", flush=True)
    text = sys.stdin.readline()[:_VOWEL_INPUT_LIMIT]
    text = text.split("\n", 1)[0].translate(_LOWER)
    print(f"There are {count_vowels(text)} vowels in the string, {text}")
    return 0


def histgrep_main(argv: Sequence[str] | None = None) -> int:
    """Print lines of ~/.bash_history that match the given pattern."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Only one command line argument needed \n Usage: ./histgrep <word> ", file=sys.stderr)
        return 1
    home = os.environ.get("HOME")
    if not home:
        print("HOME environment variable not set.", file=sys.stderr)
        return 1
    path = Path(home) / ".bash_history"
    try:
        with path.open("r", encoding="utf-8", errors="replace") as fh:
            try:
                matches = grep_lines(args[0], fh)
            except re.error as exc:
                print(f"Regex compilation failed: {exc}", file=sys.stderr)
                return 1
    except OSError:
        print(f"{path} file path does not exist", file=sys.stderr)
        return 1
    for line in matches:
        print(line)
    return 0