import io

import pytest

from ftkit.line_reader import LineReader


class CountingStream:
    """Wraps a stream and records the sizes requested from it."""

    def __init__(self, data):
        self._inner = io.StringIO(data)
        self.requests = []

    def read(self, size):
        self.requests.append(size)
        return self._inner.read(size)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 10000])
def test_lines_rejoin_to_original_text(size):
    data = "first line\nsecond\n\nlast without newline"
    reader = LineReader(io.StringIO(data), size)
    lines = list(reader)
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 64])
def test_binary_stream_returns_bytes(size):
    data = b"alpha\nbeta\ngamma\n"
    lines = list(LineReader(io.BytesIO(data), size))
    assert lines == [b"alpha\n", b"beta\n", b"gamma\n"]


def test_read_line_returns_none_at_end():
    reader = LineReader(io.StringIO("one\n"), 8)
    assert reader.read_line() == "one\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_yields_nothing():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(LineReader(io.BytesIO(b""), 3)) == []


def test_leftover_after_newline_is_kept_for_next_call():
    stream = io.StringIO("ab\ncd\nef")
    reader = LineReader(stream, 100)
    assert reader.read_line() == "ab\n"
    # the whole stream was consumed by the first read
    assert stream.read() == ""
    assert reader.read_line() == "cd\n"
    assert reader.read_line() == "ef"
    assert reader.read_line() is None


def test_final_line_without_newline():
    lines = list(LineReader(io.StringIO("x\ny"), 1))
    assert lines == ["x\n", "y"]


def test_empty_lines_are_returned():
    lines = list(LineReader(io.StringIO("\n\n\n"), 2))
    assert lines == ["\n", "\n", "\n"]


def test_reads_use_configured_buffer_size():
    stream = CountingStream("hello\nworld\n")
    reader = LineReader(stream, 4)
    list(reader)
    assert stream.requests
    assert set(stream.requests) == {4}
    assert reader.buffer_size == 4


def test_default_buffer_size_reads_one_at_a_time():
    stream = CountingStream("abc\n")
    reader = LineReader(stream)
    assert reader.read_line() == "abc\n"
    assert stream.requests == [1, 1, 1, 1]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size_is_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("data"), size)


def test_iteration_stops_and_mixes_with_read_line():
    reader = LineReader(io.StringIO("a\nb\nc\n"), 3)
    assert reader.read_line() == "a\n"
    assert list(reader) == ["b\n", "c\n"]
    assert reader.read_line() is None