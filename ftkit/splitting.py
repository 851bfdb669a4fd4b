"""Splitting strings into words.

Strings are treated as NUL-terminated: anything after the first ``"\\0"``
is ignored. Empty words are never produced.
"""

from __future__ import annotations

from typing import Iterator, List

__all__ = ["split", "split_mult", "word_count_mult"]


def _terminated(s: str) -> str:
    return s.split("\0", 1)[0]


def _tokens(s: str, delims: str) -> Iterator[str]:
    separators = set(_terminated(delims))
    word: List[str] = []
    for ch in _terminated(s):
        if ch in separators:
            if word:
                yield "".join(word)
                word = []
        else:
            word.append(ch)
    if word:
        yield "".join(word)


def split(s: str, sep: str) -> List[str]:
    """Split s on the single character sep, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return list(_tokens(s, sep))


def split_mult(s: str, delims: str) -> List[str]:
    """Split s on runs of any of the characters in delims."""
    return list(_tokens(s, delims))


def word_count_mult(s: str, delims: str) -> int:
    """Count the words split_mult would return."""
    return sum(1 for _ in _tokens(s, delims))