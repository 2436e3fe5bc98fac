"""Environment, uptime and current-time reporting."""

from __future__ import annotations

import os
import sys
import time
from typing import List, Mapping, Optional, Sequence

UPTIME_PATH = "/proc/uptime"
_UPTIME_LIMIT = 63
_BOOT = "Total seconds since system boot: "
_IDLE = "Total seconds all CPUs have spent idle: "


def environment_lines(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """NAME=value lines for every variable in the environment."""
    source = os.environ if environ is None else environ
    return [f"{name}={value}" for name, value in source.items()]


def format_uptime(line: str) -> List[str]:
    """Label the fields of an uptime line: boot seconds first, idle seconds after."""
    tokens = [token for token in line.split("\n", 1)[0].split(" ") if token]
    return [f"{_IDLE if index else _BOOT} {token}" for index, token in enumerate(tokens)]


def envdump_main(argv: Sequence[str] | None = None) -> int:
    """Print every environment variable."""
    for line in environment_lines():
        print(line)
    return 0


def uptime_main(argv: Sequence[str] | None = None) -> int:
    """Print the system uptime and total idle time."""
    try:
        with open(UPTIME_PATH, "r", encoding="ascii", errors="replace") as fh:
            line = fh.readline()[:_UPTIME_LIMIT]
    except OSError:
        print(f"The file {UPTIME_PATH} does not exist", file=sys.stderr)
        return 1
    for text in format_uptime(line):
        print(text)
    return 0


def time_main(argv: Sequence[str] | None = None) -> int:
    """Print the current time as seconds since the epoch and as local time."""
    now = int(time.time())
    print(now)
    print(time.ctime(now) + "\n")
    return 0