"""Byte-buffer helpers: fill, search, compare and copy."""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
MutableBytes = Union[bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > length:
        raise IndexError(f"{what} holds {length} bytes, {n} requested")


def memset(buf: MutableBytes, value: int, n: int) -> MutableBytes:
    """Fill the first *n* bytes of *buf* with the low byte of *value*."""
    _check_span(len(buf), n, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: MutableBytes, n: int) -> MutableBytes:
    """Zero the first *n* bytes of *buf*."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of *nmemb* elements of *size* bytes each.

    Raises OverflowError when the total size would exceed SIZE_MAX.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(nmemb * size)


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the low byte of *value* in the first *n* bytes, or None."""
    _check_span(len(data), n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch, else 0."""
    _check_span(len(first), n, "first")
    _check_span(len(second), n, "second")
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: MutableBytes, src: Optional[BytesLike], n: int) -> MutableBytes:
    """Copy the first *n* bytes of *src* into the start of *dest*."""
    if dest is src or src is None:
        return dest
    _check_span(len(dest), n, "destination")
    _check_span(len(src), n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: MutableBytes, dest: int, src: int, n: int) -> MutableBytes:
    """Copy *n* bytes within *buf* from offset *src* to offset *dest*, overlap-safe."""
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    _check_span(len(buf) - src, n, "source range")
    _check_span(len(buf) - dest, n, "destination range")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf