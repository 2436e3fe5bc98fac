"""A minute-resolution job runner driven by a small configuration file."""

from __future__ import annotations

import re
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Iterable, List, Sequence, TextIO

CONFIG_PATH = "scheduler.conf"
LOG_PATH = "scheduler.log"
MAX_JOBS = 128

_JOB_LINE = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)(?!\d)\s*(\S{1,127})")


@dataclass(frozen=True)
class Job:
    hour: int
    minute: int
    path: str


class ConfigError(Exception):
    """Raised when the configuration cannot be used."""


def create_default_config(path=CONFIG_PATH) -> None:
    """Write a configuration file holding only explanatory comments."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write("# Scheduling program\n")
        fh.write("# Syntax: hour minute /absolute/path/to/script.sh\n")


def _readable(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def parse_config(lines: Iterable[str], max_jobs: int = MAX_JOBS) -> List[Job]:
    """Read jobs from configuration lines.

    Comments and blank lines are skipped; lines with an impossible time are
    reported and skipped. A malformed line or a missing script is an error.
    """
    jobs: List[Job] = []
    for line in lines:
        if line[:1] in ("#", "\n"):
            continue
        found = _JOB_LINE.match(line)
        if not found:
            raise ConfigError(f"Malformed line (ignored): {line.rstrip(chr(10))}")
        hour, minute, path = int(found.group(1)), int(found.group(2)), found.group(3)
        if not _readable(path):
            raise ConfigError(f"One or more of the paths do not exists: {path}")
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            sys.stderr.write(f"Invalid time in line: {line}\n")
            continue
        if len(jobs) == max_jobs:
            sys.stderr.write(f"Job limit reached ({max_jobs}); ignoring extra lines.\n")
            break
        jobs.append(Job(hour, minute, path))
    return jobs


def due_jobs(jobs: Iterable[Job], hour: int, minute: int) -> List[Job]:
    return [job for job in jobs if job.hour == hour and job.minute == minute]


def run_forever(jobs: Sequence[Job], log_path=LOG_PATH) -> None:
    """Start due jobs once a minute with sh, logging starts and finished children."""
    running: List[subprocess.Popen] = []
    while True:
        now = time.time()
        local = time.localtime(now)
        stamp = f"[{local.tm_hour:02d}:{local.tm_min:02d}]"
        with open(log_path, "a", encoding="utf-8") as log:
            for proc in [p for p in running if p.poll() is not None]:
                running.remove(proc)
                log.write(f"{stamp} Reaped child {proc.pid}, status {max(proc.returncode, 0)}\n")
                log.flush()
            for job in due_jobs(jobs, local.tm_hour, local.tm_min):
                proc = subprocess.Popen(["sh", job.path])
                running.append(proc)
                log.write(f"{stamp} Started job: {job.path} (pid: {proc.pid})\n")
                log.flush()
        whole = int(now)
        delay = whole - whole % 60 + 60 - int(time.time())
        if delay > 0:
            time.sleep(delay)


def _read_char(stream: TextIO) -> str:
    while True:
        line = stream.readline()
        if not line:
            return ""
        text = line.lstrip()
        if text:
            return text[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Load scheduler.conf from the working directory and run its jobs."""
    try:
        fh = open(CONFIG_PATH, "r", encoding="utf-8")
    except OSError:
        print(f"{CONFIG_PATH} not found. Create a new one? [y/n]: ", end="", flush=True)
        if _read_char(sys.stdin) in ("y", "Y"):
            try:
                create_default_config(CONFIG_PATH)
            except OSError:
                print("Failed to create config file", file=sys.stderr)
                return 1
            print(f"Created default config: {CONFIG_PATH}")
            print(f"Please edit '{CONFIG_PATH}' and restart the program.")
        else:
            print("Exiting...")
        return 0
    with fh:
        try:
            jobs = parse_config(fh)
        except ConfigError as exc:
            print(exc, file=sys.stderr)
            return 1
    try:
        run_forever(jobs, LOG_PATH)
    except OSError as exc:
        print(f"Could not open log file: {exc.strerror}", file=sys.stderr)
        return 1
    return 0