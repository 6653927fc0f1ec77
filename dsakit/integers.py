"""Integer parsing and checks."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ATOI_PATTERN = re.compile(r" *([+-]?)([0-9]*)")
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to 32-bit range."""
    match = _ATOI_PATTERN.match(s)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        return max(-value, INT_MIN)
    return min(value, INT_MAX)


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None
    following = values[1:] + [0]
    return sum(-value if value < after else value for value, after in zip(values, following))


def is_power_of_two(n: int) -> bool:
    """True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0