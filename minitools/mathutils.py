"""Small arithmetic helpers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

_U64 = 2**64


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _atoi(text: str) -> int:
    text = text.lstrip()
    end = 1 if text[:1] in ("+", "-") else 0
    start = end
    while end < len(text) and text[end].isascii() and text[end].isdigit():
        end += 1
    return int(text[:end]) if end > start else 0


def factorial(n: int) -> int:
    """n! kept within 64 unsigned bits."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for i in range(2, n + 1):
        result = result * i % _U64
    return result


def digits_to_decimal(digits: Iterable[int], base: float) -> int:
    """Value of digits given least significant first, truncated to an integer."""
    total = 0.0
    for power, digit in enumerate(digits):
        total += digit * float(base) ** power
    return int(total)


def find_max(values: Iterable[int]) -> int:
    items = list(values)
    if not items:
        raise ValueError("find_max() needs at least one value")
    return max(items)


def swap(a, b):
    return b, a


def sum4(a: int, b: int, c: int, d: int) -> int:
    """Sum of four 32-bit integers, wrapping on overflow."""
    return _wrap32(a + b + c + d)


def factorial_main(argv: Sequence[str] | None = None) -> int:
    """Print the factorial of the single positive integer argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Only one command line argument needed", file=sys.stderr)
        return 1
    num = _atoi(args[0])
    if num <= 0:
        print("Number must be a positive integer", file=sys.stderr)
        return 1
    print(f"The factorial of {num} is {factorial(num)}")
    return 0