"""String helpers: parsing, searching, comparing, slicing and C-style copies."""

from __future__ import annotations

import re
from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview, str]

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _cstrlen(data: Union[bytes, bytearray, memoryview]) -> int:
    """Length up to the first NUL byte, or the whole length if there is none."""
    raw = bytes(data)
    end = raw.find(0)
    return len(raw) if end < 0 else end


def atoi(text: str) -> int:
    """Parse a leading integer after optional whitespace and one sign; 0 if none."""
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [part for part in text.split(_char(sep)) if part]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; searching for NUL gives ``len(text)``."""
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(text)
    return None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; searching for NUL gives ``len(text)``."""
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing characters, or 0 when equal."""
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for x, y in islice(zip_longest(a, b, fillvalue=_NUL), n):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return index if index >= 0 else None


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(first: Optional[str], second: str) -> str:
    """Concatenate two strings; a missing ``first`` counts as empty."""
    if second is None:
        raise TypeError("second string must not be None")
    return (first or "") + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("text and charset must not be None")
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(buf: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Call ``func(index, item)`` for every item, storing any non-None result back."""
    for index, item in enumerate(list(buf)):
        result = func(index, item)
        if result is not None:
            buf[index] = result


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dest``, NUL-terminated.

    Returns the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = _as_bytes(src)
    src_len = _cstrlen(source)
    if size:
        count = min(size - 1, src_len)
        if count + 1 > len(dest):
            raise ValueError(f"destination of {len(dest)} bytes is too small")
        dest[:count] = source[:count]
        dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src: BytesLike, size: int) -> int:
    """Append ``src`` to the NUL-terminated ``dest`` within a total of ``size`` bytes.

    Returns the length the full result would have had.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = _as_bytes(src)
    src_len = _cstrlen(source)
    dest_len = _cstrlen(dest)
    if size <= dest_len:
        return size + src_len
    count = min(src_len, size - dest_len - 1)
    if dest_len + count + 1 > len(dest):
        raise ValueError(f"destination of {len(dest)} bytes is too small")
    dest[dest_len : dest_len + count] = source[:count]
    dest[dest_len + count] = 0
    return dest_len + src_len