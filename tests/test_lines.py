import os

import pytest

from pipex.lines import LineReader, iter_lines


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def make(data: bytes, name: str = "input.txt") -> int:
        path = tmp_path / name
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield make
    for fd in opened:
        os.close(fd)


def test_lines_keep_newlines(open_fd):
    fd = open_fd(b"one\ntwo\n")
    reader = LineReader()
    assert reader.next_line(fd) == b"one\n"
    assert reader.next_line(fd) == b"two\n"
    assert reader.next_line(fd) is None


def test_last_line_without_newline(open_fd):
    fd = open_fd(b"alpha\nbeta")
    reader = LineReader(4)
    assert reader.next_line(fd) == b"alpha\n"
    assert reader.next_line(fd) == b"beta"
    assert reader.next_line(fd) is None
    assert reader.next_line(fd) is None


def test_empty_input(open_fd):
    fd = open_fd(b"")
    assert LineReader().next_line(fd) is None


def test_blank_lines(open_fd):
    fd = open_fd(b"\n\nx\n")
    assert list(iter_lines(fd)) == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 32, 1000])
def test_buffer_size_does_not_change_result(open_fd, size):
    data = b"first line\nsecond\n\nthird without end"
    fd = open_fd(data)
    lines = list(iter_lines(fd, size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_descriptors_are_independent(open_fd):
    fd_a = open_fd(b"a1\na2\n", "a.txt")
    fd_b = open_fd(b"b1\nb2\n", "b.txt")
    reader = LineReader(64)
    assert reader.next_line(fd_a) == b"a1\n"
    assert reader.next_line(fd_b) == b"b1\n"
    assert reader.next_line(fd_a) == b"a2\n"
    assert reader.next_line(fd_b) == b"b2\n"


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0)
    with pytest.raises(ValueError):
        LineReader(-5)


def test_invalid_descriptor():
    reader = LineReader()
    with pytest.raises(ValueError):
        reader.next_line(-1)
    with pytest.raises(ValueError):
        reader.next_line(4096)


def test_read_error_propagates(tmp_path):
    fd = os.open(tmp_path / "w.txt", os.O_WRONLY | os.O_CREAT)
    try:
        with pytest.raises(OSError):
            LineReader().next_line(fd)
    finally:
        os.close(fd)


def test_pipe_input():
    read_end, write_end = os.pipe()
    os.write(write_end, b"x\ny\n")
    os.close(write_end)
    try:
        assert list(iter_lines(read_end, 1)) == [b"x\n", b"y\n"]
    finally:
        os.close(read_end)