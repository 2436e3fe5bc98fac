"""Circle, rectangle and temperature calculators."""

from __future__ import annotations

import math
import re
import struct
import sys
from typing import Optional, TextIO

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def circle_area(r: float) -> float:
    return math.pi * r * r


def circle_circumference(r: float) -> float:
    return 2 * math.pi * r


def rectangle_area(a: float, b: float) -> float:
    return a * b


def rectangle_perimeter(a: float, b: float) -> float:
    return 2 * (a + b)


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * (9.0 / 5) + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + 273.15


class _Scanner:
    """Reads numbers and single characters from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _next(self) -> Optional[str]:
        while not self._pending.strip():
            line = self._stream.readline()
            if not line:
                return None
            self._pending = line
        return self._pending.lstrip()

    def _match(self, pattern: re.Pattern) -> Optional[str]:
        text = self._next()
        if text is None:
            return None
        found = pattern.match(text)
        if not found:
            self._pending = text
            return None
        self._pending = text[found.end():]
        return found.group()

    def real(self, default: float = 0.0) -> float:
        token = self._match(_FLOAT)
        return _f32(float(token)) if token is not None else default

    def integer(self, default: int = 0) -> int:
        token = self._match(_INT)
        return int(token) if token is not None else default

    def char(self) -> str:
        text = self._next()
        if text is None:
            return ""
        self._pending = text[1:]
        return text[0]

    def discard_line(self) -> None:
        self._pending = ""


def _say(text: str) -> None:
    print(text, end="", flush=True)


def circle_main(argv=None) -> int:
    """Ask for a radius and print the area or circumference."""
    scanner = _Scanner(sys.stdin)
    _say("Enter the radius of the circle: ")
    radius = scanner.real()
    _say("(c)ircumference or (a)rea: ")
    if scanner.char() in ("a", "A"):
        print(f"Area is: {_f32(circle_area(radius)):f}")
    else:
        print(f"Circumference is: {_f32(circle_circumference(radius)):f}")
    return 0


def rectangle_main(argv=None) -> int:
    """Ask for two sides and print the area or perimeter."""
    scanner = _Scanner(sys.stdin)
    _say("Enter the length of the rectangle: ")
    a = scanner.real()
    scanner.discard_line()
    _say("Enter the breadth of the rectangle: ")
    b = scanner.real()
    scanner.discard_line()
    _say("(a)rea or (p)erimeter: ")
    if scanner.char() in ("a", "A"):
        print(f"Area is: {_f32(rectangle_area(a, b)):f}")
    else:
        print(f"Circumference is: {_f32(rectangle_perimeter(a, b)):f}")
    return 0


def temperature_main(argv=None) -> int:
    """Convert a whole Celsius temperature to Fahrenheit or Kelvin."""
    scanner = _Scanner(sys.stdin)
    _say("Enter the temperature in Celsius: ")
    celsius = scanner.integer()
    _say("Convert to (F)ahrenheit or (K)elvin?: ")
    choice = scanner.char()
    if choice in ("F", "f"):
        print(f"Temperature in Fahrenheit: {_f32(celsius_to_fahrenheit(celsius)):.2f} ")
    elif choice in ("K", "k"):
        print(f"Temperature in Kelvin: {_f32(celsius_to_kelvin(celsius)):.2f} ")
    else:
        print("Wrong Choice ")
    return 0