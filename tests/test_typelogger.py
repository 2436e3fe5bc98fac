import io

import pytest

from minitools.typelogger import UsageError, parse_args, playback, record


class FakeScreen:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.shown = []
        self.refreshes = 0

    def getch(self):
        return self.keys.pop(0)

    def addstr(self, text):
        self.shown.append(text)

    def refresh(self):
        self.refreshes += 1


def test_parse_record_opens_for_writing():
    assert parse_args(["-b", "-o", "keys.log"]) == ("record", "keys.log", "w")


def test_parse_output_before_flag_opens_for_reading():
    assert parse_args(["-o", "keys.log", "-b"]) == ("record", "keys.log", "r")


def test_parse_playback():
    assert parse_args(["-p", "-o", "keys.log"]) == ("playback", "keys.log", "r")


def test_parse_both_modes_is_error():
    with pytest.raises(UsageError) as info:
        parse_args(["-b", "-p", "-o", "keys.log"])
    assert info.value.status == 1


@pytest.mark.parametrize("argv", [[], ["-b"], ["-x"], ["-o", "keys.log"]])
def test_parse_usage_errors(argv):
    with pytest.raises(UsageError) as info:
        parse_args(argv)
    assert info.value.status == 255


def test_record_stops_at_escape():
    screen = FakeScreen([ord("h"), ord("i"), 27, ord("z")])
    out = io.BytesIO()
    assert record(screen, out) == 2
    assert out.getvalue() == b"hi"
    assert screen.shown == ["h", "i"]
    assert screen.keys == [ord("z")]


def test_record_keeps_low_byte():
    screen = FakeScreen([0x141, 27])
    out = io.BytesIO()
    record(screen, out)
    assert out.getvalue() == bytes([0x41])


def test_playback_shows_every_line():
    screen = FakeScreen()
    lines = ["one\n", "two\n"]
    assert playback(screen, lines, delay=0) == 2
    assert screen.shown == lines
    assert screen.refreshes == 2


def test_playback_splits_long_lines():
    screen = FakeScreen()
    line = "a" * 2000 + "\n"
    shown = playback(screen, [line], delay=0)
    assert shown == len(screen.shown) > 1
    assert "".join(screen.shown) == line