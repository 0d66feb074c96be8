"""String helpers: number conversion, splitting, trimming, searching and output.

The helpers keep the conventions of classic C string routines where
those conventions matter to callers (for example, ``strncmp`` returns
the difference of the first differing character codes), but they take
and return ordinary Python strings.
"""

from __future__ import annotations

import sys
from itertools import islice, zip_longest
from typing import Callable, Optional, TextIO

_SPACES = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace (space and ``\\t\\n\\v\\f\\r``) is skipped, one
    optional ``+`` or ``-`` sign is accepted, then as many ASCII digits
    as follow are read. Anything after them is ignored. A string with no
    digits gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < length and "0" <= text[pos] <= "9":
        number = number * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * number


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A *start* at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *length* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or
    ``None`` when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters of *a* and *b*.

    Returns 0 when they agree, otherwise the difference between the
    codes of the first differing characters; the end of a string counts
    as code 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(map(ord, a), map(ord, b), fillvalue=0)
    for code_a, code_b in islice(pairs, n):
        if code_a != code_b:
            return code_a - code_b
        if code_a == 0:
            break
    return 0


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character of *text*."""
    return "".join(func(index, char) for index, char in enumerate(text))


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write *text* to *stream* (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write *text* followed by a newline to *stream*."""
    put_str(text + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of *n* to *stream*."""
    put_str(itoa(n), stream)