"""A small printf with the conversions c, s, d, i, u, x, X and p.

Any other character after ``%`` is written as it is, so ``%%`` gives a
single percent sign. No flags, widths or precisions are supported.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, List, Optional, TextIO

__all__ = [
    "SDECIMAL",
    "UDECIMAL",
    "HEX_LO",
    "HEX_UP",
    "format_number",
    "sprintf",
    "printf",
]

SDECIMAL = "-0123456789"
UDECIMAL = "0123456789"
HEX_LO = "0123456789abcdef"
HEX_UP = "0123456789ABCDEF"

_MISSING = object()


def _digits(n: int, digits: str) -> str:
    radix = len(digits)
    out: List[str] = []
    while True:
        n, rem = divmod(n, radix)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def format_number(n: int, base: str) -> str:
    """Write n in the given digit alphabet.

    A base that starts with ``-`` is signed: its remaining characters are
    the digits and a negative n is written with a leading minus. An
    unsigned base refuses negative numbers.
    """
    n = operator.index(n)
    signed = base.startswith("-")
    digits = base[1:] if signed else base
    if len(digits) < 2:
        raise ValueError(f"base {base!r} needs at least two digits")
    if len(set(digits)) != len(digits):
        raise ValueError(f"base {base!r} repeats a digit")
    if n < 0:
        if not signed:
            raise ValueError(f"cannot write negative {n} in unsigned base {base!r}")
        return "-" + _digits(-n, digits)
    return _digits(n, digits)


def _signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _unsigned32(value: int) -> int:
    return value & 0xFFFFFFFF


def _next(values: Iterator[Any], spec: str) -> Any:
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    return value.split("\0", 1)[0]


def _pointer(value: Optional[int]) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) & 0xFFFFFFFFFFFFFFFF
    if address == 0:
        return "(nil)"
    return "0x" + format_number(address, HEX_LO)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "c":
        return _char(_next(values, spec))
    if spec == "s":
        return _string(_next(values, spec))
    if spec in ("d", "i"):
        return format_number(_signed32(operator.index(_next(values, spec))), SDECIMAL)
    if spec == "x":
        return format_number(_unsigned32(operator.index(_next(values, spec))), HEX_LO)
    if spec == "X":
        return format_number(_unsigned32(operator.index(_next(values, spec))), HEX_UP)
    if spec == "u":
        return format_number(_unsigned32(operator.index(_next(values, spec))), UDECIMAL)
    if spec == "p":
        return _pointer(_next(values, spec))
    return spec


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments.

    Integers for d and i wrap like 32-bit signed values, those for u, x and
    X like 32-bit unsigned values. Extra arguments are ignored.
    """
    out: List[str] = []
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        out.append(_convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream = file if file is not None else sys.stdout
    stream.write(text)
    return len(text)