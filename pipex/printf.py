"""Formatted output with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from .printf_flags import (
    Flags,
    hex_prefix,
    pad,
    parse_flags,
    precised_number,
    precised_string,
    sign_prefix,
    string_width,
    total_width,
)

NULL_STRING = "(null)"
NULL_POINTER = "0x0"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = (1 << 64) - 1
_INT_OFFSET = 1 << 31


def _as_int(n: int) -> int:
    """Wrap ``n`` into the range of a signed 32-bit integer."""
    return ((n + _INT_OFFSET) & _UINT_MASK) - _INT_OFFSET


def _as_uint(n: int) -> int:
    """Wrap ``n`` into the range of an unsigned 32-bit integer."""
    return n & _UINT_MASK


def _needs_leading_spaces(flags: Flags) -> bool:
    return bool(flags.width) and (not flags.zero or flags.precision is not None)


def format_character(c: str, flags: Flags) -> tuple[str, int]:
    """Render one character padded to the width.

    Returns the text and the count reported for it: the width when one is
    set, otherwise 1.
    """
    if flags.minus:
        text = c + pad(flags.width - 1, " ")
    else:
        fill = "0" if flags.zero else " "
        text = pad(flags.width - 1, fill) + c
    return text, flags.width if flags.width else 1


def format_string(text: str | None, flags: Flags) -> tuple[str, int]:
    """Render a string, cut to the precision and padded to the width."""
    if text is None:
        return format_string(NULL_STRING, flags)
    body = precised_string(text, flags.precision)
    if flags.minus:
        spaces = pad(flags.width - len(body), " ")
        return body + spaces, len(body) + len(spaces)
    spaces = pad(string_width(text, flags), " ")
    return spaces + body, len(spaces) + len(body)


def format_pointer(value: int | None, flags: Flags) -> tuple[str, int]:
    """Render an address as ``0x`` followed by lower-case hexadecimal."""
    if not value:
        return format_string(NULL_POINTER, flags)
    return format_string("0x" + format(value & _POINTER_MASK, "x"), flags)


def format_number(n: int, flags: Flags) -> tuple[str, int]:
    """Render a signed integer with sign, precision and width."""
    n = _as_int(n)
    num_str = str(n)
    sign = sign_prefix(n, flags)
    body, written = precised_number(num_str, flags, n)
    if flags.minus:
        spaces = pad(total_width(num_str, flags, written), " ")
        return sign + body + spaces, written + len(spaces)
    spaces = pad(total_width(num_str, flags, 0), " ") if _needs_leading_spaces(flags) else ""
    return spaces + sign + body, written + len(spaces)


def format_unsigned(n: int, flags: Flags) -> tuple[str, int]:
    """Render an unsigned integer with precision and width."""
    n = _as_uint(n)
    num_str = str(n)
    body, written = precised_number(num_str, flags, n)
    if flags.minus:
        spaces = pad(total_width(num_str, flags, written), " ")
        return body + spaces, written + len(spaces)
    spaces = pad(total_width(num_str, flags, 0), " ") if _needs_leading_spaces(flags) else ""
    return spaces + body, written + len(spaces)


def format_hex(n: int, specifier: str, flags: Flags) -> tuple[str, int]:
    """Render an unsigned integer in hexadecimal, upper case for ``X``."""
    n = _as_uint(n)
    num_str = format(n, "X" if specifier == "X" else "x")
    prefix = hex_prefix(n, specifier) if flags.hashtag else ""
    prefix_count = 2 if (n and flags.hashtag) else 0
    body, written = precised_number(num_str, flags, n)
    if flags.minus:
        spaces = pad(total_width(num_str, flags, written), " ")
        return prefix + body + spaces, written + len(spaces) + prefix_count
    spaces = pad(total_width(num_str, flags, 0), " ") if _needs_leading_spaces(flags) else ""
    return spaces + prefix + body, written + len(spaces) + prefix_count


def _next_argument(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_char(value: Any) -> str:
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError("%c requires an integer or a single character")


def _convert(specifier: str, flags: Flags, args: Iterator[Any]) -> tuple[str, int]:
    if specifier == "c":
        return format_character(_as_char(_next_argument(args)), flags)
    if specifier == "s":
        return format_string(_next_argument(args), flags)
    if specifier == "p":
        return format_pointer(_next_argument(args), flags)
    if specifier in ("d", "i"):
        return format_number(_next_argument(args), flags)
    if specifier == "u":
        return format_unsigned(_next_argument(args), flags)
    if specifier in ("x", "X"):
        return format_hex(_next_argument(args), specifier, flags)
    if specifier == "%":
        return format_character("%", flags)
    return specifier, 1


def format_printf(fmt: str, *args: Any) -> tuple[str, int]:
    """Format ``args`` by ``fmt`` and return the text and its reported count."""
    pieces: list[str] = []
    total = 0
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        char = fmt[pos]
        if char != "%":
            pieces.append(char)
            total += 1
            pos += 1
            continue
        flags, pos = parse_flags(fmt, pos + 1)
        if pos >= len(fmt):
            raise ValueError("incomplete conversion at end of format")
        text, count = _convert(fmt[pos], flags, remaining)
        pieces.append(text)
        total += count
        pos += 1
    return "".join(pieces), total


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its count."""
    text, count = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return count