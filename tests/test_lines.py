import io
import os

import pytest

from pipex.lines import LineReader, iter_lines


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_split_at_newlines(size):
    reader = LineReader(io.StringIO("ab\ncd\n"), size)
    assert reader.next_line() == "ab\n"
    assert reader.next_line() == "cd\n"
    assert reader.next_line() is None


@pytest.mark.parametrize("size", [1, 4, 42])
def test_last_line_without_newline(size):
    assert list(iter_lines(io.StringIO("one\ntwo"), size)) == ["one\n", "two"]


@pytest.mark.parametrize(
    "text",
    ["", "\n", "\n\n\n", "x", "line\n", "a\nbb\n\nccc", "long " * 50 + "\nend"],
)
@pytest.mark.parametrize("size", [1, 7, 42])
def test_join_round_trip(text, size):
    lines = list(iter_lines(io.StringIO(text), size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None


def test_empty_lines_kept():
    assert list(iter_lines(io.StringIO("\n\n"))) == ["\n", "\n"]


def test_bytes_stream():
    assert list(iter_lines(io.BytesIO(b"x\ny\n"), 3)) == [b"x\n", b"y\n"]


def test_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"first\nsecond\n")
        os.close(write_end)
        write_end = -1
        assert list(iter_lines(read_end, 4)) == [b"first\n", b"second\n"]
    finally:
        os.close(read_end)
        if write_end >= 0:
            os.close(write_end)


def test_reading_resumes_after_more_data():
    stream = io.StringIO()
    reader = LineReader(stream, 4)
    assert reader.next_line() is None
    stream.write("later\n")
    stream.seek(0)
    assert reader.next_line() == "later\n"


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_bad_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)