"""Small ASCII character and string helpers used by the shell's parser."""

from __future__ import annotations

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "strnstr",
    "strncmp",
    "substr",
]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: str | int) -> int:
    """Return the code point of a character, or the integer itself.

    An empty string stands for the end of a string and has code 0.
    """
    if isinstance(c, int):
        return c
    if len(c) > 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c) if c else 0


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 97 <= code <= 122 or 65 <= code <= 90


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: str | int, low: int, high: int, delta: int) -> str | int:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return code if isinstance(c, int) else (chr(code) if c else c)


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    return _convert_case(c, 97, 122, -32)


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    return _convert_case(c, 65, 90, 32)


def atoi(text: str) -> int:
    """Read a leading decimal integer, after whitespace and one optional sign.

    Anything that does not parse yields 0, as does an empty string.
    """
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < end and is_digit(text[pos]):
        value = value * 10 + (ord(text[pos]) - 48)
        pos += 1
    return sign * value


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing code points, with the end
    of a string counting as 0, or 0 when the compared prefixes are equal.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    stop = min(len(s1), len(s2), n)
    if stop == n:
        return 0
    first = ord(s1[stop]) if stop < len(s1) else 0
    second = ord(s2[stop]) if stop < len(s2) else 0
    return first - second


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]