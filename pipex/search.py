"""Searching and comparing strings and byte sequences.

Search functions return an index into the input, or None when nothing
is found.  Comparisons return a negative, zero or positive difference
of the first pair of differing characters.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterator

__all__ = ["strnstr", "strncmp", "strchr", "strrchr", "memchr", "memcmp"]


def _check_count(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _codes(s: str | bytes) -> Iterator[int]:
    if isinstance(s, str):
        return map(ord, s)
    return iter(bytes(s))


def _as_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find needle wholly within the first length characters of haystack.

    An empty needle is found at index 0.
    """
    _check_count(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most n characters; a shorter string compares as if padded with NUL."""
    _check_count(n, "n")
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of c; the NUL character matches the end."""
    char = _as_char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of c; the NUL character matches the end."""
    char = _as_char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to c (taken modulo 256) in the first n bytes."""
    _check_count(n, "n")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first n bytes of a and b as unsigned values."""
    _check_count(n, "n")
    first, second = bytes(a), bytes(b)
    if n > len(first) or n > len(second):
        raise ValueError(f"cannot compare {n} bytes: an operand is shorter")
    for x, y in zip(first[:n], second[:n]):
        if x != y:
            return x - y
    return 0