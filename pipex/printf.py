"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %.

A percent sign followed by anything else is written literally.
"""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Iterator, TextIO

__all__ = ["format_printf", "printf", "putnbr", "putendl"]

SPECIFIERS = "cspdiuxX%"

_PIECE_PATTERN = re.compile(r"%([cspdiuxX%])|%\Z|(.)", re.DOTALL)


def _int32(value: Any) -> int:
    number = operator.index(value) & 0xFFFFFFFF
    return number - (1 << 32) if number >= 1 << 31 else number


def _uint32(value: Any) -> int:
    return operator.index(value) & 0xFFFFFFFF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _address(value: Any) -> str:
    number = 0 if value is None else operator.index(value) & 0xFFFFFFFFFFFFFFFF
    return f"0x{number:x}"


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _address(value)
    if spec in "di":
        return str(_int32(value))
    if spec == "u":
        return str(_uint32(value))
    if spec == "x":
        return f"{_uint32(value):x}"
    return f"{_uint32(value):X}"


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text printf would write for fmt and args."""
    values = iter(args)

    def replace(match: re.Match[str]) -> str:
        spec, literal = match.group(1), match.group(2)
        if spec is not None:
            return _convert(spec, values)
        if literal is not None:
            return literal
        return ""

    return _PIECE_PATTERN.sub(replace, fmt)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to file (stdout by default) and return its length."""
    text = format_printf(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)


def putnbr(n: int, file: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    (file if file is not None else sys.stdout).write(str(_int32(n)))


def putendl(text: str | None, file: TextIO | None = None) -> None:
    """Write text followed by a newline; a missing text writes only the newline."""
    (file if file is not None else sys.stdout).write((text or "") + "\n")