"""String building helpers: number conversion, splitting, trimming and copying.

All functions return new strings; nothing is modified in place.
"""

from __future__ import annotations

from typing import Callable

from pipex.chars import is_whitespace, to_lower

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strlcpy",
    "strlcat",
    "strjoin",
    "str_lower",
    "map_indexed",
]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_OVERFLOW_GUARD = 922337203685477580


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit.  A value that overflows a
    64-bit long yields -1 for positive input and 0 for negative input;
    otherwise the result is truncated to a 32-bit signed int.
    """
    rest = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        if number > _OVERFLOW_GUARD:
            return -1 if sign == 1 else 0
        number = number * 10 + ord(char) - 48
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Decimal representation of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size slots (one kept for the terminator).

    Returns the copied text and the full length of src, so truncation
    happened when the second value is not less than size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size slots.

    Returns the resulting text and the length it tried to create:
    min(len(dst), size) + len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    result = dst
    if size > len(dst):
        result = dst + src[: size - 1 - len(dst)]
    return result, dst_len + len(src)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing first part counts as empty.

    Returns None when the second part is missing.
    """
    if s2 is None:
        return None
    return (s1 or "") + s2


def str_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving every other character alone."""
    return "".join(str(to_lower(char)) for char in text)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def _is_blank(char: str) -> bool:
    return is_whitespace(char)