"""Writing to file descriptors and a small printf with c, s, p, d, i, u, x, X."""

from __future__ import annotations

import os
import re
import sys
from typing import Any, Callable, Iterator, Optional, Union

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_SPEC = re.compile(r"%(.)|%$", re.DOTALL)
_MISSING = object()


def _write(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write a single character to ``fd``."""
    if isinstance(c, int) and not isinstance(c, bool):
        _write(fd, bytes([c & 0xFF]))
        return
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(fd, c.encode("utf-8"))


def putstr_fd(text: Optional[str], fd: int) -> None:
    """Write ``text`` to ``fd``; None writes nothing."""
    if text is None:
        return
    _write(fd, text.encode("utf-8"))


def putendl_fd(text: Optional[str], fd: int) -> None:
    """Write ``text`` and a newline to ``fd``; None writes nothing."""
    if text is None:
        return
    _write(fd, (text + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _write(fd, str(n).encode("ascii"))


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _fmt_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _fmt_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _fmt_ptr(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & _UINT64:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _fmt_char,
    "s": _fmt_str,
    "p": _fmt_ptr,
    "d": lambda v: str(_int32(int(v))),
    "i": lambda v: str(_int32(int(v))),
    "u": lambda v: str(int(v) & _UINT32),
    "x": lambda v: f"{int(v) & _UINT32:x}",
    "X": lambda v: f"{int(v) & _UINT32:X}",
}


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``; unknown conversions produce nothing."""
    values: Iterator[Any] = iter(args)

    def replace(match: re.Match) -> str:
        spec = match.group(1)
        if spec is None:
            return ""
        if spec == "%":
            return "%"
        conversion = _CONVERSIONS.get(spec)
        if conversion is None:
            return ""
        value = next(values, _MISSING)
        if value is _MISSING:
            raise ValueError(f"not enough arguments for %{spec}")
        return conversion(value)

    return _SPEC.sub(replace, fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the byte count."""
    data = format_printf(fmt, *args).encode("utf-8")
    sys.stdout.flush()
    return _write(1, data)