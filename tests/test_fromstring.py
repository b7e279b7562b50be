import math
from fractions import Fraction

import pytest

from termcli.fromstring import BadConversion, CType, from_string

HUGE = "99999999999999999999999999999999999999999"

SIGNED = [CType.SIGNED_CHAR, CType.SHORT, CType.INT, CType.LONG, CType.LONG_LONG]
UNSIGNED = [
    CType.UNSIGNED_CHAR,
    CType.UNSIGNED_SHORT,
    CType.UNSIGNED_INT,
    CType.UNSIGNED_LONG,
    CType.UNSIGNED_LONG_LONG,
]


def test_char_single_letter():
    assert from_string("a", CType.CHAR) == "a"


def test_char_space():
    assert from_string(" ", CType.CHAR) == " "


def test_char_two_letters_fails():
    with pytest.raises(BadConversion):
        from_string("aa", CType.CHAR)


@pytest.mark.parametrize("ctype", SIGNED + UNSIGNED)
def test_integers_read_positive(ctype):
    assert from_string("42", ctype) == 42


@pytest.mark.parametrize("ctype", SIGNED)
def test_signed_read_negative(ctype):
    assert from_string("-42", ctype) == -42


@pytest.mark.parametrize("ctype", UNSIGNED)
def test_unsigned_reject_negative(ctype):
    with pytest.raises(BadConversion):
        from_string("-42", ctype)


@pytest.mark.parametrize("ctype", SIGNED + UNSIGNED)
def test_integers_reject_letters(ctype):
    with pytest.raises(BadConversion):
        from_string("a", ctype)


@pytest.mark.parametrize("ctype", SIGNED + UNSIGNED)
def test_integers_reject_overflow(ctype):
    with pytest.raises(BadConversion):
        from_string(HUGE, ctype)


@pytest.mark.parametrize("ctype", SIGNED + UNSIGNED)
@pytest.mark.parametrize("text", ["", "+", "-", "4 2", " 42", "4.2", "0x10"])
def test_integers_reject_malformed(ctype, text):
    with pytest.raises(BadConversion):
        from_string(text, ctype)


def test_signed_char_bounds():
    assert from_string("127", CType.SIGNED_CHAR) == 127
    assert from_string("-128", CType.SIGNED_CHAR) == -128
    with pytest.raises(BadConversion):
        from_string("128", CType.SIGNED_CHAR)
    with pytest.raises(BadConversion):
        from_string("-129", CType.SIGNED_CHAR)


def test_unsigned_char_bounds():
    assert from_string("255", CType.UNSIGNED_CHAR) == 255
    with pytest.raises(BadConversion):
        from_string("256", CType.UNSIGNED_CHAR)


@pytest.mark.parametrize(
    "ctype, bits",
    [(CType.SHORT, 16), (CType.INT, 32), (CType.LONG_LONG, 64)],
)
def test_signed_limits_round_trip(ctype, bits):
    top = (1 << (bits - 1)) - 1
    bottom = -(1 << (bits - 1))
    assert from_string(str(top), ctype) == top
    assert from_string(str(bottom), ctype) == bottom
    with pytest.raises(BadConversion):
        from_string(str(top + 1), ctype)
    with pytest.raises(BadConversion):
        from_string(str(bottom - 1), ctype)


@pytest.mark.parametrize(
    "ctype, bits",
    [(CType.UNSIGNED_SHORT, 16), (CType.UNSIGNED_INT, 32), (CType.UNSIGNED_LONG_LONG, 64)],
)
def test_unsigned_limits_round_trip(ctype, bits):
    top = (1 << bits) - 1
    assert from_string(str(top), ctype) == top
    with pytest.raises(BadConversion):
        from_string(str(top + 1), ctype)


def test_plus_sign_is_accepted():
    assert from_string("+42", CType.INT) == 42
    assert from_string("+42", CType.UNSIGNED_INT) == 42


def test_bool_words_and_digits():
    assert from_string("true", CType.BOOL) is True
    assert from_string("false", CType.BOOL) is False
    assert from_string("1", CType.BOOL) is True
    assert from_string("0", CType.BOOL) is False


@pytest.mark.parametrize("text", ["2", "-1", "yes", "True", ""])
def test_bool_rejects_other_values(text):
    with pytest.raises(BadConversion):
        from_string(text, CType.BOOL)


def test_float_reads_tenth():
    assert from_string("0.1", CType.FLOAT) == pytest.approx(0.1)


def test_double_reads_tenth():
    assert from_string("0.1", CType.DOUBLE) == 0.1
    assert from_string("0.1", CType.LONG_DOUBLE) == 0.1


@pytest.mark.parametrize("ctype", [CType.FLOAT, CType.DOUBLE, CType.LONG_DOUBLE])
@pytest.mark.parametrize("text", ["a", "", " 0.1", "0.1 ", "0.1x", "1_0", "."])
def test_floating_rejects_malformed(ctype, text):
    with pytest.raises(BadConversion):
        from_string(text, ctype)


@pytest.mark.parametrize("value", [1.5, -2.25, 1e10, 3.0e-5])
def test_double_round_trip(value):
    assert from_string(repr(value), CType.DOUBLE) == value


def test_float_is_rounded_to_single_precision():
    value = from_string("0.1", CType.FLOAT)
    assert value != 0.1
    assert Fraction(value).limit_denominator(10) == Fraction(1, 10)


def test_float_overflow_fails_but_double_does_not():
    with pytest.raises(BadConversion):
        from_string("1e39", CType.FLOAT)
    assert from_string("1e39", CType.DOUBLE) == 1e39


def test_double_overflow_fails():
    with pytest.raises(BadConversion):
        from_string("1e400", CType.DOUBLE)


def test_infinity_and_nan():
    assert from_string("inf", CType.DOUBLE) == math.inf
    assert from_string("-Infinity", CType.DOUBLE) == -math.inf
    assert math.isnan(from_string("nan", CType.FLOAT))


def test_hex_float():
    assert from_string("0x1p3", CType.DOUBLE) == float.fromhex("0x1p3")


def test_string_is_unchanged():
    assert from_string("foo bar", CType.STRING) == "foo bar"


def test_none_target():
    assert from_string("anything", CType.NONE) is None


def test_python_types_map_to_c_types():
    assert from_string("42", int) == 42
    assert from_string("true", bool) is True
    assert from_string("0.1", float) == 0.1
    assert from_string("foo", str) == "foo"
    with pytest.raises(BadConversion):
        from_string(HUGE, int)


def test_callable_fallback():
    assert from_string("42", Fraction) == Fraction(42)
    with pytest.raises(BadConversion):
        from_string("a", Fraction)
    with pytest.raises(BadConversion):
        from_string(" 42", Fraction)


def test_bad_conversion_is_value_error_with_message():
    with pytest.raises(ValueError, match="bad from_string conversion"):
        from_string("a", CType.INT)