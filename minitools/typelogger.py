"""Recording keystrokes to a file and playing a recording back on screen."""

from __future__ import annotations

import curses
import getopt
import sys
import time
from typing import BinaryIO, Iterable, NamedTuple, Sequence

ESCAPE = 27
_LINE_LIMIT = 1023
_USAGE = "Usage: (-b, -o outputfile, -p playback)"


class UsageError(Exception):
    """Raised for a bad command line; status is the exit status to use."""

    def __init__(self, message: str, status: int = 255) -> None:
        super().__init__(message)
        self.status = status


class _Options(NamedTuple):
    mode: str
    path: str
    file_mode: str


def parse_args(argv: Sequence[str]) -> _Options:
    """Return (mode, path, file mode); mode is "record" or "playback".

    The file is opened for writing only when -b comes before -o.
    """
    try:
        opts, _ = getopt.getopt(list(argv), "bo:p")
    except getopt.GetoptError:
        raise UsageError(_USAGE) from None
    record = playback = False
    path = None
    file_mode = "r"
    for opt, value in opts:
        if opt == "-b":
            record = True
        elif opt == "-p":
            playback = True
        elif opt == "-o":
            path = value
            file_mode = "w" if record else "r"
    if record and path is not None and not playback:
        return _Options("record", path, file_mode)
    if playback and path is not None and not record:
        return _Options("playback", path, file_mode)
    if record and playback:
        raise UsageError("Cannot use both -b and -p at the same time.", 1)
    raise UsageError(f"Error! {_USAGE}")


def record(screen, out: BinaryIO) -> int:
    """Copy keys from screen to out until Escape; return how many were written."""
    count = 0
    while (key := screen.getch()) != ESCAPE:
        byte = key & 0xFF
        out.write(bytes([byte]))
        out.flush()
        try:
            screen.addstr(chr(byte))
        except (curses.error, ValueError):
            pass
        screen.refresh()
        count += 1
    return count


def playback(screen, lines: Iterable[str], delay: float = 0.3) -> int:
    """Show recorded text piece by piece with a pause after each; return the pieces shown."""
    shown = 0
    for line in lines:
        for start in range(0, len(line), _LINE_LIMIT):
            try:
                screen.addstr(line[start:start + _LINE_LIMIT])
            except curses.error:
                pass
            screen.refresh()
            time.sleep(delay)
            shown += 1
    return shown


def _start_screen():
    screen = curses.initscr()
    curses.cbreak()
    curses.noecho()
    return screen


def main(argv: Sequence[str] | None = None) -> int:
    """Record keys with -b -o FILE, or play FILE back with -p -o FILE."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(exc, file=sys.stderr, end="" if exc.status == 255 else "\n")
        return exc.status
    binary = options.file_mode + "b"
    try:
        fh = open(options.path, binary) if options.mode == "record" else open(
            options.path, options.file_mode, encoding="utf-8", errors="replace", newline="")
    except OSError:
        print(f"Error! {_USAGE}", file=sys.stderr, end="")
        return 255
    with fh:
        screen = _start_screen()
        try:
            if options.mode == "record":
                try:
                    record(screen, fh)
                except OSError:
                    pass
            else:
                playback(screen, fh)
                time.sleep(10)
        finally:
            curses.endwin()
    return 0