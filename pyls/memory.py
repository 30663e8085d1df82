"""Byte-buffer helpers: zeroing, searching, copying and bounded string copies."""

from __future__ import annotations


def _check(buffer, n: int) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buffer):
        raise ValueError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def _strlen(data) -> int:
    """Length of a NUL-terminated byte string, or the whole buffer if unterminated."""
    end = bytes(data).find(0)
    return len(data) if end < 0 else end


def zero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _check(buffer, n)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_find(buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c within n bytes, or None."""
    _check(buffer, n)
    index = bytes(buffer[:n]).find(c & 0xFF)
    return None if index < 0 else index


def mem_compare(first, second, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check(first, n)
    _check(second, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def mem_copy(dest: bytearray, src, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest and return dest."""
    _check(dest, n)
    _check(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def mem_move(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from src_offset to dest_offset; regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check(buffer, max(dest_offset, src_offset) + n)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def mem_set(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with c (taken modulo 256) and return it."""
    _check(buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def strlcpy(dest: bytearray, src, size: int) -> int:
    """Copy at most size - 1 bytes of src into dest, NUL-terminated.

    Returns the length of src.
    """
    src_len = _strlen(src)
    if size <= 0:
        return src_len
    copied = min(src_len, size - 1)
    _check(dest, copied + 1)
    dest[:copied] = bytes(src[:copied])
    dest[copied] = 0
    return src_len


def strlcat(dest: bytearray, src, size: int) -> int:
    """Append src to the NUL-terminated string in dest within a total of size bytes.

    Returns the length the full result would have had; when size is smaller
    than the current length of dest, returns size plus the length of src.
    """
    dest_len = _strlen(dest)
    src_len = _strlen(src)
    if size < dest_len:
        return size + src_len
    copied = min(src_len, max(0, size - 1 - dest_len))
    _check(dest, dest_len + copied + 1)
    dest[dest_len:dest_len + copied] = bytes(src[:copied])
    dest[dest_len + copied] = 0
    return dest_len + src_len