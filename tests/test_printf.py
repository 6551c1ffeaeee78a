import pytest

from pipex.printf import (
    format_character,
    format_hex,
    format_number,
    format_pointer,
    format_printf,
    format_string,
    format_unsigned,
    printf,
)
from pipex.printf_flags import Flags


def test_plain_text_passes_through():
    assert format_printf("just text") == ("just text", len("just text"))


def test_null_string():
    assert format_string(None, Flags()) == ("(null)", 6)


def test_null_string_with_precision_is_cut():
    text, count = format_printf("%.3s", None)
    assert text == "(null)"[:3]
    assert count == 3


def test_null_pointer():
    assert format_pointer(None, Flags()) == ("0x0", 3)
    assert format_pointer(0, Flags()) == ("0x0", 3)


def test_pointer_is_lower_hex():
    text, count = format_pointer(48879, Flags())
    assert text == "0x%x" % 48879
    assert count == len(text)


def test_pointer_respects_width():
    text, _ = format_pointer(255, Flags(width=10, minus=True))
    assert text == "%-10s" % ("0x%x" % 255)


def test_character_count_is_width():
    text, count = format_character("q", Flags(width=4))
    assert text == "%4s" % "q"
    assert count == 4


def test_character_zero_fill():
    text, _ = format_character("q", Flags(width=3, zero=True))
    assert text.endswith("q")
    assert set(text[:-1]) == {"0"}
    assert len(text) == 3


def test_number_wraps_to_signed_32_bits():
    text, _ = format_number(2**31, Flags())
    assert text == str(-(2**31))


def test_unsigned_wraps_negative():
    text, count = format_unsigned(-1, Flags())
    assert text == str(2**32 - 1)
    assert count == len(text)


def test_hex_upper_and_lower_agree():
    lower, _ = format_hex(48879, "x", Flags())
    upper, _ = format_hex(48879, "X", Flags())
    assert upper == lower.upper()
    assert int(lower, 16) == 48879


def test_zero_with_zero_precision_is_empty():
    assert format_printf("%.0d", 0) == ("", 0)


def test_zero_with_zero_precision_keeps_width():
    text, count = format_printf("%5.0d", 0)
    assert text == " " * 5
    assert count == 5


def test_unknown_specifier_is_printed_raw():
    assert format_printf("%k") == ("k", 1)


def test_percent_does_not_consume_argument():
    text, _ = format_printf("%%%d", 3)
    assert text == "%3"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_printf("abc%")


def test_bad_character_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%c", "too long")


def test_printf_writes_to_stdout(capsys):
    count = printf("%d-%s\n", 4, "x")
    out = capsys.readouterr().out
    assert out == "%d-%s\n" % (4, "x")
    assert count == len(out)