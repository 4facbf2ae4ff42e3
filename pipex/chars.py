"""Character classification and case conversion for the ASCII range."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as an int or a 1-char string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (int or str) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return _code(c) in _DIGITS


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127 inclusive."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII characters, 32 to 126 inclusive."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Map A-Z to a-z; anything else is returned unchanged."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return _like(c, code)


def toupper(c: CharLike) -> CharLike:
    """Map a-z to A-Z; anything else is returned unchanged."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return _like(c, code)