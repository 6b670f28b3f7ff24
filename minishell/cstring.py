"""String helpers with the exact semantics the shell relies on.

These follow C string conventions: a NUL character ends a string, a
comparison returns the difference of the first differing characters,
and integer conversion wraps to a 32-bit signed value.
"""

from __future__ import annotations

_INT_MIN = -2147483647 - 1
_INT_MAX = 2147483647
_ULONG_MASK = (1 << 64) - 1
_DIGITS = frozenset("0123456789")
_ATOI_SPACE = frozenset(" \t\n\v\f\r")
_MAP_STOP = "\0\r\n\t"


def _c_str(text: str) -> str:
    """Return ``text`` up to (not including) its first NUL character."""
    return text.split("\0", 1)[0]


def _char_code(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def _ascii_upper(c: str) -> str:
    return chr(ord(c) - 32) if "a" <= c <= "z" else c


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading integer, skipping blanks and one sign.

    Stops at the first non-digit; returns 0 when no digits follow.
    The result wraps to a 32-bit signed integer.
    """
    text = _c_str(text)
    pos = 0
    while pos < len(text) and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if text[pos:pos + 1] == "-":
        sign = -1
        pos += 1
    elif text[pos:pos + 1] == "+":
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = (result * 10 + int(text[pos])) & _ULONG_MASK
        pos += 1
    return _to_int32(result * sign)


def isint(text: str) -> bool:
    """True if ``text`` is an optional ``-`` and digits within 32-bit range.

    A lone ``-`` is rejected; the empty string is accepted.
    """
    text = _c_str(text)
    if text == "-":
        return False
    body = text[1:] if text.startswith("-") else text
    if not all(c in _DIGITS for c in body):
        return False
    if not body:
        return True
    return _INT_MIN <= int(text) <= _INT_MAX


def itoa(n: int) -> str:
    """Return the decimal text of the 32-bit integer ``n``."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    text = _c_str(text)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return _c_str(text).strip(_c_str(chars))


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    Returns an empty string when ``start`` is past the end.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _c_str(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly within the first ``limit`` characters.

    Returns the index of the match, 0 for an empty needle, or ``None``.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    haystack = _c_str(haystack)
    needle = _c_str(needle)
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def _compare(a: str | None, b: str | None, fold: bool) -> int:
    if a is None and b is None:
        return 0
    if a is None:
        return _char_code(_c_str(b), 0)
    if b is None:
        return _char_code(_c_str(a), 0)
    a, b = _c_str(a), _c_str(b)
    if fold:
        a = "".join(_ascii_upper(c) for c in a)
        b = "".join(_ascii_upper(c) for c in b)
    for index, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return ord(x) - ord(y)
    shorter = min(len(a), len(b))
    return _char_code(a, shorter) - _char_code(b, shorter)


def strcmp(a: str | None, b: str | None) -> int:
    """Compare two strings: negative, zero or positive.

    If exactly one is ``None`` the first character code of the other is
    returned; two ``None`` compare equal.
    """
    return _compare(a, b, fold=False)


def strcasecmp(a: str | None, b: str | None) -> int:
    """Like :func:`strcmp`, ignoring ASCII letter case."""
    return _compare(a, b, fold=True)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = _c_str(a)[:n], _c_str(b)[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    shorter = min(len(a), len(b))
    return _char_code(a, shorter) - _char_code(b, shorter)


def strlen_map(text: str | None) -> int:
    """Length of ``text`` up to the first NUL, CR, LF or tab; 0 for ``None``."""
    if text is None:
        return 0
    return next(
        (index for index, c in enumerate(text) if c in _MAP_STOP), len(text)
    )