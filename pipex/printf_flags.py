"""Conversion flags for formatted output and the padding rules built on them."""

from __future__ import annotations

from dataclasses import dataclass

FLAG_CHARS = "-+ #0"
_WHITESPACE = "\t\n\v\f\r "


@dataclass
class Flags:
    """Flags, width and precision of one conversion.

    ``precision`` is ``None`` when no ``.`` was given.
    """

    minus: bool = False
    plus: bool = False
    space: bool = False
    hashtag: bool = False
    zero: bool = False
    width: int = 0
    precision: int | None = None


def atoi(text: str) -> int:
    """Read a leading decimal integer, skipping whitespace and one sign."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits += char
    return sign * int(digits) if digits else 0


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while _is_digit(fmt[pos:pos + 1]):
        pos += 1
    return atoi(fmt[start:pos]), pos


def parse_flags(fmt: str, pos: int) -> tuple[Flags, int]:
    """Parse flags, width and precision starting at ``pos``.

    ``pos`` is the index just after ``%``. Returns the flags and the index
    of the conversion specifier.
    """
    flags = Flags()
    while fmt[pos:pos + 1] and fmt[pos] in FLAG_CHARS:
        char = fmt[pos]
        if char == "-":
            flags.minus = True
        elif char == "+":
            flags.plus = True
        elif char == " ":
            flags.space = True
        elif char == "#":
            flags.hashtag = True
        else:
            flags.zero = True
        pos += 1
    if _is_digit(fmt[pos:pos + 1]):
        flags.width, pos = _read_number(fmt, pos)
    if fmt[pos:pos + 1] == ".":
        flags.precision, pos = _read_number(fmt, pos + 1)
    return flags, pos


def pad(count: int, char: str) -> str:
    """Return ``char`` repeated ``count`` times, or nothing if ``count`` <= 0."""
    return char * count if count > 0 else ""


def _same_prefix(left: str, right: str, length: int) -> bool:
    return left[:length] == right[:length]


def total_width(num_str: str, flags: Flags, written: int) -> int:
    """Return how many padding spaces a number needs to reach the width.

    ``written`` is the count already produced for the number, or 0 to have
    it estimated from the digits, sign and precision.
    """
    is_neg = num_str.startswith("-")
    has_sign = int(is_neg or flags.space or flags.plus)
    length = len(num_str) - int(is_neg)
    is_zero = _same_prefix(num_str, "0", length)
    hex_prefix_len = 2 if (not is_zero and flags.hashtag) else 0
    if not written:
        if flags.precision is None or length - int(is_neg) >= flags.precision:
            written = length + has_sign
        else:
            written = flags.precision + has_sign
    if flags.precision == 0 and is_zero:
        return flags.width - has_sign
    return flags.width - written - hex_prefix_len


def _zero_padding(num_str: str, flags: Flags) -> int:
    is_zero = _same_prefix(num_str, "0", len(num_str))
    hex_prefix_len = 2 if (not is_zero and flags.hashtag) else 0
    has_sign = int(num_str.startswith("-") or flags.space or flags.plus)
    if flags.precision is not None:
        return flags.precision
    if not flags.minus and flags.zero:
        return flags.width - has_sign - hex_prefix_len
    return 0


def precised_number(num_str: str, flags: Flags, n: int) -> tuple[str, int]:
    """Render the digits of a number with its minus sign and zero padding.

    Returns the text and the count it stands for, which includes one for a
    sign requested by ``+`` or space even though that sign is not part of
    the text.
    """
    has_sign = int(flags.plus or flags.space or num_str.startswith("-"))
    if flags.precision == 0 and n == 0:
        return "", has_sign
    sign = "-" if num_str.startswith("-") else ""
    digits = num_str[len(sign):]
    zeros = max(_zero_padding(num_str, flags) - len(digits), 0)
    return sign + pad(zeros, "0") + digits, zeros + len(digits) + has_sign


def hex_prefix(n: int, specifier: str) -> str:
    """Return the alternate-form prefix for a hexadecimal conversion."""
    if not n:
        return ""
    return "0X" if specifier == "X" else "0x"


def sign_prefix(n: int, flags: Flags) -> str:
    """Return the explicit sign a non-negative number gets from its flags."""
    if n < 0:
        return ""
    if flags.plus:
        return "+"
    if flags.space:
        return " "
    return ""


def precised_string(text: str, precision: int | None) -> str:
    """Return at most ``precision`` characters of ``text``."""
    if precision is None:
        return text
    return text[:max(precision, 0)]


def string_width(text: str, flags: Flags) -> int:
    """Return how many padding spaces a string needs to reach the width."""
    precision = len(text) if flags.precision is None else flags.precision
    if len(text) > precision:
        return flags.width - precision
    return flags.width - len(text)