"""Byte-buffer helpers: fill, compare, search and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: ReadableBuffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer size {len(buf)}")


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Set the first ``length`` bytes of ``buf`` to ``value & 0xFF``."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value & 0xFF`` within ``length`` bytes, or None."""
    _check_length(length, data)
    target = value & 0xFF
    return next((i for i, byte in enumerate(data[:length]) if byte == target), None)


def memcmp(a: ReadableBuffer, b: ReadableBuffer, length: int) -> int:
    """Difference of the first differing bytes within ``length``, or 0 if equal."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            return x - y
    _check_length(length, a, b)
    return 0


def memcpy(
    dest: Optional[Buffer], src: Optional[ReadableBuffer], length: int
) -> Optional[Buffer]:
    """Copy ``length`` bytes from ``src`` into ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    _check_length(length, dest, src)
    dest[:length] = src[:length]
    return dest


def memmove(
    dest: Optional[Buffer], src: Optional[ReadableBuffer], length: int
) -> Optional[Buffer]:
    """Copy ``length`` bytes from ``src`` into ``dest``, safe when they overlap."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("dest and src must both be buffers")
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest