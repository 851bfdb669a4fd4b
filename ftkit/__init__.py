"""Character, string, memory, formatting, linked-list and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "ctype",
    "numbers",
    "memory",
    "search",
    "splitting",
    "strings",
    "printf",
    "output",
    "linked_list",
    "line_reader",
]