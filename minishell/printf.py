"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = (1 << 64) - 1
_TAKES_ARGUMENT = frozenset("cspdiuxX")


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _next_argument(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, not {type(value).__name__}")
    return value


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _TAKES_ARGUMENT:
        return ""
    value = _next_argument(values)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c needs a single character")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s needs a string, not {type(value).__name__}")
        return value.split("\0", 1)[0]
    number = _as_int(value, spec)
    if spec == "p":
        address = number & _ULONG_MASK
        return "(nil)" if address == 0 else f"0x{address:x}"
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    if spec == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def format_printf(fmt: str | None, *args: Any) -> str:
    """Return the text that :func:`printf` would write.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the format is dropped. ``None`` as the format
    yields an empty string.
    """
    if fmt is None:
        return ""
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for c in chars:
        if c == "%":
            pieces.append(_convert(next(chars, ""), values))
        else:
            pieces.append(c)
    return "".join(pieces)


def printf(fmt: str | None, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    if text:
        sys.stdout.write(text)
        sys.stdout.flush()
    return len(text)