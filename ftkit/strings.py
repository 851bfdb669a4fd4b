"""Creating new strings from existing ones.

Strings are treated as NUL-terminated: anything after the first ``"\\0"``
is ignored. Every function returns a new string and leaves its inputs
unchanged, except ``striteri``, which works on a mutable sequence.
"""

from __future__ import annotations

from itertools import count
from typing import Callable, MutableSequence, Tuple, TypeVar, Union

__all__ = [
    "strdup",
    "strndup",
    "substr",
    "strjoin",
    "strtrim",
    "strlcpy",
    "strlcat",
    "strmapi",
    "striteri",
]

Seq = TypeVar("Seq", bound=MutableSequence)


def _terminated(s: str) -> str:
    """Return the part of s before the first NUL character."""
    return s.split("\0", 1)[0]


def _check_non_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"negative {what} {value}")


def strdup(s: str) -> str:
    """Return a copy of s up to its terminator."""
    return _terminated(s)


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first n characters of s."""
    _check_non_negative(n, "length")
    return _terminated(s)[:n]


def substr(s: str, start: int, length: int) -> str:
    """Return up to length characters of s beginning at start.

    A start past the end of s gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    text = _terminated(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Return a followed by b."""
    return _terminated(a) + _terminated(b)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    text = _terminated(s)
    chars = _terminated(charset)
    if not chars:
        return text
    return text.strip(chars)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits (at most size - 1 characters) and the full
    length of src, so a truncation shows as a length of size or more.
    """
    _check_non_negative(size, "size")
    text = _terminated(src)
    copied = text[:size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full concatenation would
    have. When size does not exceed the length of dst, dst is returned
    unchanged together with the length of src plus size.
    """
    _check_non_negative(size, "size")
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= len(head):
        return head, len(tail) + size
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string built from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(_terminated(s)))


def _is_terminator(item: Union[str, int]) -> bool:
    return item == "\0" or item == 0 or item == ""


def striteri(s: Seq, f: Callable[[int, Seq], None]) -> Seq:
    """Call f(index, s) for each position of a mutable character sequence.

    The sequence may be a list of one-character strings or a bytearray;
    f may change s[index] in place. Iteration stops at the end of s or at
    the first NUL element. Returns s.
    """
    for index in count():
        if index >= len(s) or _is_terminator(s[index]):
            break
        f(index, s)
    return s