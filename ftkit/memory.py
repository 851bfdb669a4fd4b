"""Byte-buffer operations on bytes and bytearray objects.

Offsets and lengths that reach past the end of a buffer raise IndexError.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

__all__ = [
    "calloc",
    "bzero",
    "memset",
    "memchr",
    "memcmp",
    "memcpy",
    "mempcpy",
    "memmove",
]


def _check_span(buf: Buffer, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if start < 0 or start + n > len(buf):
        raise IndexError(f"{what} span [{start}, {start + n}) outside buffer of {len(buf)} bytes")


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of value."""
    _check_span(buf, 0, n, "fill")
    buf[:n] = bytes((value & 0xFF,)) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def memchr(buf: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within the first n, or None."""
    _check_span(buf, 0, n, "search")
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, else 0."""
    _check_span(a, 0, n, "compare")
    _check_span(b, 0, n, "compare")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dst."""
    _check_span(dst, 0, n, "destination")
    _check_span(src, 0, n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def mempcpy(dst: bytearray, src: Buffer, n: int) -> int:
    """Copy like memcpy and return the offset just past the last byte written."""
    memcpy(dst, src, n)
    return n


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dst; the spans may overlap."""
    _check_span(buf, src, n, "source")
    _check_span(buf, dst, n, "destination")
    if dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf