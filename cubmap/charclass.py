"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a
one-character string. Classification answers are strictly ASCII:
letters outside ``A-Z``/``a-z`` are never alphabetic, whatever
Unicode says. Case conversion returns a value of the same kind it was
given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_UPPER_TO_LOWER = ord("a") - ord("A")


def _code(c: Char) -> int:
    """Return the integer code of *c*, which is an int or a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for ASCII letters ``A-Z`` and ``a-z``."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits ``0-9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 to 127 inclusive."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _UPPER_TO_LOWER
    return _same_kind(c, code)


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _UPPER_TO_LOWER
    return _same_kind(c, code)