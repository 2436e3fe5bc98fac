"""A small full-screen text editor: Ctrl+S saves and quits, Ctrl+X quits."""

from __future__ import annotations

import curses
import os
import sys
from typing import Sequence, Tuple

CTRL_S = 19
CTRL_X = 24
DELETE = 127


class TextBuffer:
    """Editable text with a cursor given as an offset into the text."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.cursor = 0

    def _line_start(self, position: int) -> int:
        return self.text.rfind("\n", 0, position) + 1

    def _walk(self, start: int, column: int) -> int:
        """Move right from start by up to column characters, stopping at a newline."""
        i = start
        while i < len(self.text) and self.text[i] != "\n" and column > 0:
            i += 1
            column -= 1
        return i

    def insert(self, ch: str) -> bool:
        """Insert a printable ASCII character or a newline; return whether it went in."""
        if ch != "\n" and not (" " <= ch <= "~"):
            return False
        self.text = self.text[:self.cursor] + ch + self.text[self.cursor:]
        self.cursor += 1
        return True

    def backspace(self) -> None:
        if self.cursor > 0:
            self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
            self.cursor -= 1

    def left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def right(self) -> None:
        if self.cursor < len(self.text):
            self.cursor += 1

    def up(self) -> None:
        """Go to the same column of the previous line.

        On the top line the cursor moves right by its column instead.
        """
        start = self._line_start(self.cursor)
        column = self.cursor - start
        target = self.cursor if start == 0 else self._line_start(start - 1)
        self.cursor = self._walk(target, column)

    def down(self) -> None:
        """Go to the same column of the next line, or the end of the text."""
        column = self.cursor - self._line_start(self.cursor)
        end = self.text.find("\n", self.cursor)
        target = len(self.text) if end == -1 else end + 1
        self.cursor = self._walk(target, column)

    def cursor_yx(self) -> Tuple[int, int]:
        """Row and column of the cursor, both counted from zero."""
        row = self.text.count("\n", 0, self.cursor)
        return row, self.cursor - self._line_start(self.cursor)


def _disable_flow_control() -> None:
    try:
        import termios
    except ImportError:
        return
    try:
        attrs = termios.tcgetattr(sys.stdin.fileno())
    except (termios.error, OSError, ValueError):
        return
    attrs[0] &= ~(termios.IXON | termios.IXOFF)
    termios.tcsetattr(sys.stdin.fileno(), termios.TCSANOW, attrs)


def _render(screen, buffer: TextBuffer) -> None:
    screen.clear()
    try:
        screen.addstr(buffer.text)
    except curses.error:
        pass
    try:
        screen.move(*buffer.cursor_yx())
    except curses.error:
        pass
    screen.refresh()


def _edit(screen, buffer: TextBuffer, path: str) -> bool:
    """Run the key loop; return True if the text was saved."""
    _render(screen, buffer)
    screen.move(0, 0)
    while True:
        key = screen.getch()
        if key == CTRL_X:
            return False
        if key in (curses.KEY_BACKSPACE, DELETE):
            buffer.backspace()
        elif key == curses.KEY_RIGHT:
            buffer.right()
        elif key == curses.KEY_LEFT:
            buffer.left()
        elif key == curses.KEY_UP:
            buffer.up()
        elif key == curses.KEY_DOWN:
            buffer.down()
        elif key == CTRL_S:
            with open(path, "w", encoding="utf-8", newline="") as fh:
                fh.write(buffer.text)
            return True
        elif 0 <= key < 0x110000:
            buffer.insert(chr(key))
        _render(screen, buffer)


def main(argv: Sequence[str] | None = None) -> int:
    """Edit the named file, or ~/temp.txt when none is given."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = ""
    if len(args) == 1:
        path = args[0]
        try:
            with open(path, "r", encoding="utf-8", errors="replace", newline="") as fh:
                text = fh.read()
        except OSError as exc:
            print(f"File path does not exist : {exc.strerror}", file=sys.stderr)
            return 1
    else:
        path = f"{os.environ.get('HOME', '')}/temp.txt"

    buffer = TextBuffer(text)
    _disable_flow_control()
    screen = curses.initscr()
    try:
        curses.cbreak()
        screen.keypad(True)
        curses.noecho()
        saved = _edit(screen, buffer, path)
    except OSError:
        curses.endwin()
        print(f"Cannot open the file {path}", file=sys.stderr)
        return 1
    finally:
        if not curses.isendwin():
            curses.endwin()
    if saved:
        print(f"File saved to {path} successfully")
    print("Done...")
    return 0