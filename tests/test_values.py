import math

import pytest

from glyn.values import (
    JSBigInt,
    JSNumber,
    JSString,
    JSSymbol,
    JSValue,
    ThrowCompletion,
    ValueKind,
)

INF = math.inf
NAN = math.nan


def n(x):
    return JSNumber(x)


# Strings, symbols, big integers


def test_string_length_counts_characters():
    text = "héllo"
    assert JSString(text).utf16_len() == len(text)


def test_string_is_empty():
    assert JSString("").is_empty()
    assert not JSString("a").is_empty()


def test_string_from_value_round_trip():
    value = JSValue.from_python("abc")
    assert JSString.from_value(value) == JSString("abc")


def test_string_from_value_rejects_other_kinds():
    with pytest.raises(ThrowCompletion):
        JSString.from_value(JSValue.from_python(1))


def test_symbol_description():
    assert JSSymbol().description is None
    sym = JSSymbol("tag")
    assert JSSymbol.from_value(JSValue.from_python(sym)) == sym
    with pytest.raises(ThrowCompletion):
        JSSymbol.from_value(JSValue.null())


def test_big_int_is_never_zero_and_conversion():
    big = JSBigInt()
    assert big.is_zero() is False
    assert JSBigInt.from_value(JSValue.from_python(big)) == big
    with pytest.raises(ThrowCompletion):
        JSBigInt.from_value(JSValue.undefined())


# Number predicates and equality


def test_nan_is_not_equal_to_itself():
    nan = JSNumber.NAN
    assert not (nan == nan)
    assert nan.is_nan()


def test_zeros_compare_equal_and_are_zero():
    assert JSNumber.POS_ZERO == JSNumber.NEG_ZERO
    assert JSNumber.NEG_ZERO.is_zero()
    assert not n(1).is_zero()


def test_infinity_predicates():
    assert n(INF).is_pos_infinite()
    assert not n(INF).is_neg_infinite()
    assert n(-INF).is_neg_infinite()
    assert not n(INF).is_finite()
    assert n(2.5).is_finite()


# Arithmetic


@pytest.mark.parametrize("x", [0.5, -3.0, 1e300, INF])
def test_unary_minus_is_an_involution(x):
    assert n(x).unary_minus().unary_minus() == n(x)
    assert n(x).unary_minus().value == -x


def test_unary_minus_of_nan_is_nan():
    assert n(NAN).unary_minus().is_nan()


def test_divide_by_zero():
    assert n(1).divide(JSNumber.ZERO).is_pos_infinite()
    assert n(-1).divide(JSNumber.ZERO).is_neg_infinite()
    assert n(1).divide(JSNumber.NEG_ZERO).is_neg_infinite()
    assert JSNumber.ZERO.divide(JSNumber.ZERO).is_nan()


def test_add_and_subtract_are_inverse():
    a, b = n(12.25), n(3.5)
    assert a.add(b).subtract(b) == a
    assert a.multiply(b).divide(b) == a


def test_exponentiate_edge_cases():
    assert JSNumber.ZERO.exponentiate(n(-1)).is_pos_infinite()
    assert JSNumber.NEG_ZERO.exponentiate(n(-1)).is_neg_infinite()
    assert n(10).exponentiate(n(400)).is_pos_infinite()
    assert n(-8).exponentiate(n(0.5)).is_nan()
    assert n(2).exponentiate(n(10)).value == 2.0**10


def test_remainder_special_cases():
    assert n(NAN).remainder(n(1)).is_nan()
    assert n(INF).remainder(n(1)).is_nan()
    assert n(5).remainder(n(INF)) == n(5)
    assert n(5).remainder(JSNumber.ZERO).is_nan()
    r = JSNumber.NEG_ZERO.remainder(n(3))
    assert r.is_zero() and math.copysign(1.0, r.value) < 0


def test_remainder_negative_exact_is_negative_zero():
    r = n(-4).remainder(n(2))
    assert r.is_zero()
    assert math.copysign(1.0, r.value) < 0


@pytest.mark.parametrize("x,y", [(7.0, 3.0), (-7.0, 3.0), (7.5, -2.0), (100.0, 7.0)])
def test_remainder_invariants(x, y):
    r = n(x).remainder(n(y)).value
    assert abs(r) < abs(y)
    assert r == 0 or math.copysign(1.0, r) == math.copysign(1.0, x)
    assert (x - r) / y == math.trunc(x / y)


# Bitwise operations


@pytest.mark.parametrize("a,b", [(5, 3), (-1, 12345), (2**31 - 1, -(2**31))])
def test_xor_twice_restores(a, b):
    assert n(a).bitwise_xor(n(b)).bitwise_xor(n(b)) == n(a)
    assert n(a).bitwise_xor(n(a)) == JSNumber.ZERO


@pytest.mark.parametrize("a", [0, 7, -42, 2**31 - 1])
def test_bitwise_identities(a):
    assert n(a).bitwise_not().bitwise_not() == n(a)
    assert n(a).bitwise_and(n(a)) == n(a)
    assert n(a).bitwise_or(n(a)) == n(a)
    assert n(a).bitwise_and(n(-1)) == n(a)


def test_nan_converts_to_zero_for_bit_operations():
    assert n(NAN).bitwise_not() == n(-1)
    assert n(NAN).bitwise_or(n(0)) == JSNumber.ZERO


def test_left_shift_wraps_to_sign_bit():
    assert n(1).left_shift(n(31)) == n(-(2**31))


def test_shift_count_is_modulo_32():
    assert n(9).left_shift(n(32)) == n(9)
    assert n(9).signed_right_shift(n(32)) == n(9)


def test_signed_right_shift_keeps_sign():
    for count in range(32):
        assert n(-1).signed_right_shift(n(count)) == n(-1)


def test_unsigned_right_shift_of_max_uint32():
    assert n(2**32 - 1).unsigned_right_shift(n(0)) == n(2**32 - 1)
    assert n(2**32 - 1).unsigned_right_shift(n(31)) == n(1)


def test_left_then_right_shift_round_trip():
    assert n(1234).left_shift(n(4)).signed_right_shift(n(4)) == n(1234)


# Comparison


def test_equal():
    assert not n(NAN).equal(n(NAN))
    assert JSNumber.POS_ZERO.equal(JSNumber.NEG_ZERO)
    assert n(3).equal(n(3))
    assert not n(3).equal(n(4))


def test_less_than():
    assert n(NAN).less_than(n(1)) is None
    assert n(1).less_than(n(NAN)) is None
    assert n(1).less_than(n(2)) is True
    assert n(2).less_than(n(1)) is False


def test_same_value():
    assert n(NAN).same_value(n(NAN))
    assert not JSNumber.POS_ZERO.same_value(JSNumber.NEG_ZERO)
    assert not JSNumber.NEG_ZERO.same_value(JSNumber.POS_ZERO)
    assert n(8).same_value(n(8))
    assert not n(8).same_value(n(9))


# String conversion


def test_to_string_fixed_forms():
    assert n(NAN).to_string(10) == JSString("NaN")
    assert JSNumber.NEG_ZERO.to_string(10) == JSString("0")
    assert n(INF).to_string(10) == JSString("Infinity")
    assert n(-INF).to_string(10) == JSString("-Infinity")


def test_to_string_integral_and_negative():
    assert n(42).to_string(10) == JSString("42")
    assert n(-42).to_string(10) == JSString("-42")


def test_to_string_has_no_exponent():
    assert n(1e21).to_string(10).value == "1" + "0" * 21


@pytest.mark.parametrize("x", [0.1, 1.5, 123456.789, 1e-7, 5e-324, 1.7976931348623157e308])
def test_to_string_round_trip(x):
    text = n(x).to_string(10)
    assert "e" not in text.value.lower()
    assert JSNumber.from_string(text) == n(x)


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_0", "abc", "1e", "--1", "0x10"])
def test_from_string_rejects_invalid(text):
    with pytest.raises(ThrowCompletion):
        JSNumber.from_string(JSString(text))


def test_from_string_accepts_special_forms():
    assert JSNumber.from_string("inf").is_pos_infinite()
    assert JSNumber.from_string("-Infinity").is_neg_infinite()
    assert JSNumber.from_string("NaN").is_nan()
    assert JSNumber.from_string(".5") == n(0.5)
    assert JSNumber.from_string("+2e3") == n(2e3)


def test_number_from_value():
    assert JSNumber.from_value(JSValue.from_python(2.5)) == n(2.5)
    with pytest.raises(ThrowCompletion):
        JSNumber.from_value(JSValue.from_python("2.5"))


# Tagged values


def test_undefined_and_null():
    assert JSValue.undefined().is_undefined()
    assert not JSValue.undefined().is_null()
    assert JSValue.null().is_null()
    assert JSValue.undefined() == JSValue.undefined()
    assert JSValue.undefined() != JSValue.null()


def test_from_python_kinds():
    assert JSValue.from_python(True).kind is ValueKind.BOOLEAN
    assert JSValue.from_python(3).kind is ValueKind.NUMBER
    assert JSValue.from_python(3.5).is_number()
    assert JSValue.from_python("x").is_string()
    assert JSValue.from_python(JSSymbol("s")).is_symbol()
    assert JSValue.from_python(JSBigInt()).is_big_int()
    assert JSValue.from_python(object()).is_object()


def test_boolean_is_not_a_number():
    value = JSValue.from_python(False)
    assert value.is_boolean()
    assert not value.is_number()
    assert value.payload is False


def test_from_python_rejects_none():
    with pytest.raises(TypeError):
        JSValue.from_python(None)


def test_value_equality_and_hashing():
    assert JSValue.from_python(1) == JSValue.from_python(1.0)
    assert JSValue.from_python("a") == JSValue.from_python(JSString("a"))
    assert JSValue.from_python(1) != JSValue.from_python("1")
    assert len({JSValue.from_python(1), JSValue.from_python(1.0)}) == 1


def test_object_values_compare_by_identity():
    first, second = object(), object()
    assert JSValue.from_python(first) == JSValue.from_python(first)
    assert JSValue.from_python(first) != JSValue.from_python(second)


def test_numeric_predicates_on_values():
    assert JSValue.from_python(NAN).is_nan()
    assert JSValue.from_python(INF).is_pos_infinite()
    assert JSValue.from_python(-INF).is_neg_infinite()
    assert JSValue.from_python(1).is_finite()
    string_value = JSValue.from_python("NaN")
    assert not string_value.is_nan()
    assert not string_value.is_finite()
    assert not JSValue.undefined().is_pos_infinite()