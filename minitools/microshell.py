"""A minimal interactive shell that runs one command per line."""

from __future__ import annotations

import subprocess
import sys
from typing import List, Sequence, TextIO

PROMPT = "μ-sh $ "
MAX_ARGS = 63


def tokenize(line: str) -> List[str]:
    """Split the first line of text on spaces, keeping at most 63 words."""
    words = [word for word in line.split("\n", 1)[0].split(" ") if word]
    return words[:MAX_ARGS]


def run_shell(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Prompt, read and run commands until EOF or "exit"; return how many were started."""
    source = sys.stdin if stdin is None else stdin
    sink = sys.stdout if stdout is None else stdout
    started = 0
    while True:
        sink.write(PROMPT)
        sink.flush()
        line = source.readline()
        if not line:
            break
        args = tokenize(line)
        if not args:
            continue
        if args[0] == "exit":
            break
        started += 1
        try:
            subprocess.run(args)
        except OSError as exc:
            print(f"execvp failed: {exc.strerror or exc}", file=sys.stderr)
    return started


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell on standard input and output."""
    run_shell(sys.stdin, sys.stdout)
    return 0