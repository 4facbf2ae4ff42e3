import os

import pytest

from pipex.output import (
    format_printf,
    printf,
    putchar_fd,
    putendl_fd,
    putnbr_fd,
    putstr_fd,
)


class _Pipe:
    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()

    def read(self):
        os.close(self.write_fd)
        self.write_fd = None
        with os.fdopen(self.read_fd, "rb") as reader:
            data = reader.read()
        self.read_fd = None
        return data

    def close(self):
        for fd in (self.read_fd, self.write_fd):
            if fd is not None:
                try:
                    os.close(fd)
                except OSError:
                    pass


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_putchar_fd_str_and_int(pipe):
    putchar_fd("a", pipe.write_fd)
    putchar_fd(ord("Z"), pipe.write_fd)
    assert pipe.read() == b"aZ"


def test_putchar_fd_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        putchar_fd("ab", pipe.write_fd)


def test_putstr_fd(pipe):
    putstr_fd("hello", pipe.write_fd)
    putstr_fd(None, pipe.write_fd)
    assert pipe.read() == b"hello"


def test_putendl_fd(pipe):
    putendl_fd("hi", pipe.write_fd)
    putendl_fd(None, pipe.write_fd)
    assert pipe.read() == b"hi\n"


@pytest.mark.parametrize(
    "n, expected",
    [(-2147483648, b"-2147483648"), (42, b"42"), (-7, b"-7"), (0, b"0")],
)
def test_putnbr_fd(pipe, n, expected):
    putnbr_fd(n, pipe.write_fd)
    assert pipe.read() == expected


def test_putnbr_fd_rejects_non_int(pipe):
    with pytest.raises(TypeError):
        putnbr_fd("12", pipe.write_fd)


def test_format_plain_text_and_percent():
    assert format_printf("plain") == "plain"
    assert format_printf("100%%") == "100%"


def test_format_string_and_null():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


def test_format_char():
    assert format_printf("%c%c", "A", ord("b")) == "Ab"


def test_format_signed_wraps_to_32_bits():
    assert format_printf("%d", -42) == "-42"
    assert format_printf("%i", 17) == "17"
    assert format_printf("%d", 2**31) == "-2147483648"


def test_format_unsigned():
    assert int(format_printf("%u", -1)) == 2**32 - 1
    assert format_printf("%u", 5) == "5"


def test_format_hex_round_trip():
    lower = format_printf("%x", 48879)
    upper = format_printf("%X", 48879)
    assert int(lower, 16) == 48879
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert lower.upper() == upper


def test_format_pointer():
    assert format_printf("%p", None) == "(nil)"
    text = format_printf("%p", 4096)
    assert text.startswith("0x")
    assert int(text, 16) == 4096


def test_unknown_conversion_consumes_no_argument():
    assert format_printf("%z%d", 3) == "3"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_printf("%d %d", 1)


def test_printf_writes_to_stdout(capfd):
    count = printf("n=%d s=%s\n", 5, "ok")
    out, _ = capfd.readouterr()
    assert out == "n=5 s=ok\n"
    assert count == len(out.encode("utf-8"))