"""Byte-buffer filling, copying, searching and comparison."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_span(name: str, data: Bytes, length: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if length > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {length} requested")


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_span("buffer", buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def zero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    fill(buffer, 0, length)


def copy(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    _check_span("dst", dst, n)
    _check_span("src", src, n)
    dst[:n] = bytes(src[:n])
    return dst


def move(buffer: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer``; overlapping regions are handled."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span("buffer", buffer, max(dst_offset, src_offset) + n)
    buffer[dst_offset : dst_offset + n] = buffer[src_offset : src_offset + n]
    return buffer


def find_byte(data: Bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) in ``data[:n]``."""
    _check_span("data", data, n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(first: Bytes, second: Bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_span("first", first, n)
    _check_span("second", second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def zeroed(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)