"""Measuring, comparing and searching strings.

Strings are treated as NUL-terminated: anything after the first ``"\\0"``
is ignored. Search functions return an index into the string, or None
when nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

Char = Union[str, int]

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strcmp",
    "strncmp",
    "strnstr",
    "strspn",
    "strcspn",
    "strpbrk",
]


def _terminated(s: str) -> str:
    """Return the part of s before the first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")


def strlen(s: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_terminated(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first c in s.

    Searching for the NUL character gives the index of the terminator.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last c in s.

    Searching for the NUL character gives the index of the terminator.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(a: str, b: str) -> int:
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strcmp(a: str, b: str) -> int:
    """Return the difference of the first differing characters, or 0 if equal."""
    return _compare(_terminated(a), _terminated(b))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters, like strcmp."""
    _check_count(n)
    return _compare(_terminated(a)[:n], _terminated(b)[:n])


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index of needle in the first n characters of haystack.

    An empty needle is found at index 0.
    """
    _check_count(n)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = _terminated(haystack)[:n].find(pattern)
    return None if index < 0 else index


def strspn(s: str, accept: str) -> int:
    """Return the length of the leading run of characters found in accept."""
    allowed = set(_terminated(accept))
    text = _terminated(s)
    for index, ch in enumerate(text):
        if ch not in allowed:
            return index
    return len(text)


def strcspn(s: str, reject: str) -> int:
    """Return the length of the leading run of characters not found in reject."""
    refused = set(_terminated(reject))
    text = _terminated(s)
    for index, ch in enumerate(text):
        if ch in refused:
            return index
    return len(text)


def strpbrk(s: str, accept: str) -> Optional[int]:
    """Return the index of the first character of s found in accept, or None."""
    index = strcspn(s, accept)
    return None if index == strlen(s) else index