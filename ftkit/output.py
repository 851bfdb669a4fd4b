"""Writing characters, strings and numbers to a text stream.

Each function returns the number of characters it wrote.
"""

from __future__ import annotations

from typing import TextIO, Union

from ftkit.numbers import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def putchar_fd(c: Union[str, int], stream: TextIO) -> int:
    """Write a single character to stream."""
    stream.write(_char(c))
    return 1


def putstr_fd(s: str, stream: TextIO) -> int:
    """Write s, up to its first NUL character, to stream."""
    text = s.split("\0", 1)[0]
    stream.write(text)
    return len(text)


def putendl_fd(s: str, stream: TextIO) -> int:
    """Write s followed by a newline to stream."""
    return putstr_fd(s, stream) + putchar_fd("\n", stream)


def putnbr_fd(n: int, stream: TextIO) -> int:
    """Write the decimal text of a 32-bit signed integer to stream.

    Raises OverflowError when n does not fit in 32 bits.
    """
    return putstr_fd(itoa(n), stream)