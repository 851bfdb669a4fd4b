"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, a single optional sign is honoured and
    digits are read until the first non-digit. Text without digits gives 0.
    The result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = _wrap32(result * 10 + (ord(ch) - ord("0")))
    return _wrap32(-result) if negative else result


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits