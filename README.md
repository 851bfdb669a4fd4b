# ftkit

Helpers that follow the behaviour of the classic C character, string,
memory and formatting routines, exposed as plain Python functions and
classes. No third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Conventions

- Functions that take strings treat them as NUL-terminated: anything after
  the first `"\0"` is ignored.
- Search functions return an index into the string (or buffer) instead of
  a pointer, and `None` when nothing is found.
- Invalid arguments raise exceptions (`ValueError`, `TypeError`,
  `IndexError`, `OverflowError`) rather than returning error codes.

## Modules

### `ftkit.ctype`

`is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print` return a bool;
`to_lower` and `to_upper` convert ASCII letters only. Each accepts a
one-character string or an integer code, and the case converters return
the same kind they were given.

### `ftkit.numbers`

- `atoi(text)` skips leading whitespace, honours one optional sign, reads
  digits up to the first non-digit and wraps like a 32-bit signed integer.
  Text without digits gives `0`.
- `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
  `OverflowError` outside that range.

### `ftkit.memory`

Operations on `bytes` / `bytearray`: `calloc(count, size)`,
`bzero(buf, n)`, `memset(buf, value, n)`, `memchr(buf, value, n)`,
`memcmp(a, b, n)`, `memcpy(dst, src, n)`, `mempcpy(dst, src, n)` (returns
the offset just past the copied bytes) and `memmove(buf, dst, src, n)`
(moves bytes inside one buffer; the spans may overlap). Spans past the end
of a buffer raise `IndexError`.

### `ftkit.search`

`strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strspn`,
`strcspn`, `strpbrk`. Comparisons return the difference of the first
differing characters, or `0`.

### `ftkit.splitting`

- `split(s, sep)` splits on a single separator character.
- `split_mult(s, delims)` splits on runs of any of the delimiter characters.
- `word_count_mult(s, delims)` counts the words `split_mult` would return.

Empty words are never produced.

### `ftkit.strings`

`strdup`, `strndup`, `substr`, `strjoin`, `strtrim`, `strmapi` return new
strings. `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple
of the resulting text and the length the untruncated result would have.
`striteri(s, f)` calls `f(index, s)` for each position of a mutable
sequence (a list of characters or a `bytearray`) and returns it.

### `ftkit.printf`

- `format_number(n, base)` writes `n` in a digit alphabet; a base starting
  with `-` is signed. The alphabets `SDECIMAL`, `UDECIMAL`, `HEX_LO` and
  `HEX_UP` are provided.
- `sprintf(fmt, *args)` supports `%c %s %d %i %u %x %X %p`; any other
  character after `%` is written as is, so `%%` gives `%`. `%s` of `None`
  gives `(null)`, `%p` of `None` or `0` gives `(nil)`. No flags, widths or
  precisions.
- `printf(fmt, *args, file=None)` writes to `file` (standard output by
  default) and returns the number of characters written.

### `ftkit.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to any text
stream and return the number of characters written.

### `ftkit.linked_list`

`ListNode` (with `content` and `next`) and `LinkedList`, which can be built
from an iterable and offers `add_front`, `add_back`, `last`, `len()`,
iteration over contents, `iterate(f)`, `map(f, delete=None)` and
`clear(delete=None)`. If `f` raises during `map`, `delete` is called on the
contents already produced and the exception propagates.

### `ftkit.line_reader`

`LineReader(stream, buffer_size=1)` reads a text or binary stream
`buffer_size` units at a time. `read_line()` returns the next line with its
newline (the last line may lack one) or `None` at end of stream; iterating
the reader yields lines until the end.

## Examples

```python
from ftkit.splitting import split, split_mult
from ftkit.printf import sprintf
from ftkit.numbers import atoi

split("  hello  world ", " ")        # ['hello', 'world']
split_mult("a,b;;c", ",;")           # ['a', 'b', 'c']
atoi("   -42abc")                    # -42
sprintf("%s is %x", "value", 255)    # 'value is ff'
```

```python
import io
from ftkit.line_reader import LineReader

reader = LineReader(io.StringIO("first\nsecond\n"), buffer_size=4)
for line in reader:
    print(line, end="")
```

## What it does not do

ftkit is a library only: it has no command-line program, no graphics or
windowing, and no game or map-file handling. It provides the building blocks
listed above and nothing more.