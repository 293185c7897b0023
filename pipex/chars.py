"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

import operator

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "is_whitespace",
    "to_upper",
    "to_lower",
]

CharLike = "int | str"


def _code(c: int | str) -> int:
    """Return the integer code of a character given as str or int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space (32) up to tilde (126)."""
    return 32 <= _code(c) < 127


def is_whitespace(c: int | str) -> bool:
    """True for space and the control characters tab through carriage return."""
    code = _code(c)
    return code == 32 or 9 <= code <= 13


def _convert(c: int | str, code: int) -> int | str:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return _convert(c, code)


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return _convert(c, code)