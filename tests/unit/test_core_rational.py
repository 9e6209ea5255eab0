import dataclasses
import math
from fractions import Fraction

import pytest

from exact_rational.core.rational import Rational
from exact_rational.core.exc import InvalidArgument, DivisionByZero, UnsupportedOperation


def _fields(r: Rational):
    return r.numerator, r.denominator


# -----------------------------
# Construction & normalisation
# -----------------------------

@pytest.mark.parametrize(
    "num,den,expect",
    [
        (6, 4, (3, 2)),
        (6, -4, (-3, 2)),
        (-6, -4, (3, 2)),
        (0, -5, (0, 1)),
        (0, 12345, (0, 1)),
        (7, 1, (7, 1)),
        (10 ** 40, 10 ** 38, (100, 1)),
    ],
)
def test_from_fraction_canonical(num, den, expect):
    print(f"[from_fraction] {num}/{den} -> expect {expect}")
    r = Rational.from_fraction(num, den)
    assert _fields(r) == expect
    # Direct construction normalises the same way.
    assert _fields(Rational(num, den)) == expect


def test_zero_denominator_rejected():
    print("[from_fraction-zero-den] 1/0 -> expect InvalidArgument (a ValueError)")
    with pytest.raises(InvalidArgument):
        Rational.from_fraction(1, 0)
    with pytest.raises(ValueError):
        Rational(0, 0)


@pytest.mark.parametrize("bad", [1.5, "3", None, Fraction(1, 2)])
def test_non_int_components_rejected(bad):
    print(f"[construct-non-int] numerator={bad!r} -> expect InvalidArgument")
    with pytest.raises(InvalidArgument):
        Rational(bad)
    with pytest.raises(InvalidArgument):
        Rational.from_fraction(1, bad)


def test_from_integer_fast_path():
    print("[from_integer] 7 and -3 -> denominator 1")
    assert _fields(Rational.from_integer(7)) == (7, 1)
    assert _fields(Rational.from_integer(-3)) == (-3, 1)
    assert _fields(Rational(-3)) == (-3, 1)


def test_bool_components_become_plain_int():
    print("[construct-bool] Rational(True) -> numerator is int 1")
    r = Rational(True)
    assert type(r.numerator) is int
    assert _fields(r) == (1, 1)
    assert type(Rational.from_integer(False).numerator) is int


def test_zero_forms_are_equal():
    print("[zero] 0/5 == 0/1 == from_integer(0) == zero()")
    assert Rational.from_fraction(0, 5) == Rational.from_fraction(0, 1)
    assert Rational.from_fraction(0, 1) == Rational.from_integer(0)
    assert Rational.zero() == Rational(0)
    assert Rational.one() == Rational(5, 5)


def test_value_is_frozen():
    print("[immutability] assigning a field -> FrozenInstanceError")
    r = Rational(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.numerator = 3


def test_fraction_bridge():
    print("[fraction-bridge] Fraction(6, 4) <-> Rational(3, 2)")
    r = Rational.from_exact(Fraction(6, 4))
    assert _fields(r) == (3, 2)
    assert r.as_fraction() == Fraction(3, 2)
    with pytest.raises(InvalidArgument):
        Rational.from_exact(0.5)


# -----------------------------
# Arithmetic
# -----------------------------

def test_addition_cross_multiplies_and_normalises():
    print("[add] 1/2 + 1/3 = 5/6; 1/6 + 1/3 = 1/2; 1/2 + -1/2 = 0/1")
    assert _fields(Rational(1, 2) + Rational(1, 3)) == (5, 6)
    assert _fields(Rational(1, 6).add(Rational(1, 3))) == (1, 2)
    assert _fields(Rational(1, 2) + Rational(-1, 2)) == (0, 1)


def test_addition_zero_short_circuit_returns_operand():
    print("[add-zero] x + 0 and 0 + x return x itself")
    x = Rational(22, 7)
    assert (x + Rational(0)) is x
    assert Rational.zero().add(x) is x


def test_subtraction():
    print("[sub] 3/4 - 1/4 = 1/2; 0 - 1/2 = -1/2; x - 0 is x")
    assert _fields(Rational(3, 4) - Rational(1, 4)) == (1, 2)
    assert _fields(Rational(0) - Rational(1, 2)) == (-1, 2)
    x = Rational(-5, 3)
    assert x.subtract(0) is x


def test_multiplication_cross_cancellation_gives_canonical_result():
    print("[mul] 2/3 * 9/4 = 3/2; -4/9 * 3/-8 = 1/6")
    assert _fields(Rational(2, 3) * Rational(9, 4)) == (3, 2)
    assert _fields(Rational(-4, 9).multiply(Rational(3, -8))) == (1, 6)
    assert _fields(Rational(-4, 9) * Rational(9, 4)) == (-1, 1)


def test_multiplication_by_zero_is_canonical_zero():
    print("[mul-zero] 0 * x and x * 0 -> 0/1")
    assert _fields(Rational(0) * Rational(-7, 3)) == (0, 1)
    assert _fields(Rational(-7, 3) * 0) == (0, 1)


def test_division_sign_lands_on_numerator():
    print("[div] 1/2 / -3/4 = -2/3; -1/2 / -1/4 = 2; 5 / (2/3) = 15/2")
    assert _fields(Rational(1, 2) / Rational(-3, 4)) == (-2, 3)
    assert _fields(Rational(-1, 2).divide(Rational(-1, 4))) == (2, 1)
    assert _fields(5 / Rational(2, 3)) == (15, 2)
    assert _fields(Rational(6, 35) / Rational(-4, 15)) == (-9, 14)


def test_division_of_zero_dividend():
    print("[div-zero-dividend] 0 / 3/4 -> 0/1")
    assert _fields(Rational(0) / Rational(3, 4)) == (0, 1)


@pytest.mark.parametrize("dividend", [Rational(1, 2), Rational(-9), Rational(0)])
def test_division_by_zero_raises(dividend):
    print(f"[div-by-zero] {dividend} / 0 -> expect DivisionByZero")
    with pytest.raises(DivisionByZero):
        dividend.divide(Rational(0))
    with pytest.raises(ZeroDivisionError):
        dividend / 0


def test_power():
    print("[pow] (-2/3)^3 = -8/27; (2/3)^0 = 1; 0^5 = 0")
    assert _fields(Rational(-2, 3) ** 3) == (-8, 27)
    assert Rational(2, 3).power(0) == Rational(1)
    assert _fields(Rational(0).power(5)) == (0, 1)
    assert _fields(Rational(5, 4) ** 1) == (5, 4)


@pytest.mark.parametrize(
    "base,exp",
    [
        (Rational(2, 3), -1),
        (Rational(0), 0),
        (Rational(0), -2),
    ],
)
def test_power_invalid(base, exp):
    print(f"[pow-invalid] {base} ** {exp} -> expect InvalidArgument")
    with pytest.raises(InvalidArgument):
        base.power(exp)


def test_power_non_int_exponent():
    print("[pow-non-int] power(0.5) -> InvalidArgument; ** 0.5 -> TypeError")
    with pytest.raises(InvalidArgument):
        Rational(4).power(0.5)
    with pytest.raises(TypeError):
        Rational(4) ** 0.5


def test_absolute_value_and_negation():
    print("[abs/neg] |-3/4| = 3/4; |3/4| is itself; -(3/4) = -3/4")
    x = Rational(3, 4)
    assert abs(x) is x
    assert _fields(Rational(-3, 4).absolute_value()) == (3, 4)
    assert _fields(-x) == (-3, 4)
    assert (+x) is x
    assert _fields(Rational(0).negate()) == (0, 1)


def test_integer_operands_are_promoted():
    print("[int-operands] 1/2 + 1 = 3/2; 1 - 1/2 = 1/2; 2 * 3/4 = 3/2")
    assert _fields(Rational(1, 2) + 1) == (3, 2)
    assert _fields(1 - Rational(1, 2)) == (1, 2)
    assert _fields(2 * Rational(3, 4)) == (3, 2)
    assert _fields(Rational(3, 4).divide(3)) == (1, 4)


def test_float_operands_are_refused():
    print("[float-operands] Rational + 0.5 -> TypeError")
    with pytest.raises(TypeError):
        Rational(1) + 0.5
    with pytest.raises(TypeError):
        0.5 * Rational(1)
    with pytest.raises(TypeError):
        Rational(1).add(0.5)


def test_sign_predicates():
    print("[signum] -2/3 -> -1, 0 -> 0, 2/3 -> 1")
    assert Rational(-2, 3).signum() == -1
    assert Rational(0).signum() == 0
    assert Rational(2, 3).signum() == 1
    assert Rational(0).is_zero()
    assert not Rational(0)
    assert Rational(1, 9)


# -----------------------------
# Conversions
# -----------------------------

def test_integer_string():
    print("[int-string] 6/3 -> '2'; -10/5 -> '-2'; 1/2 -> UnsupportedOperation")
    r = Rational.from_fraction(6, 3)
    assert r.is_integer()
    assert r.to_int_string() == "2"
    assert Rational(-10, 5).to_int_string() == "-2"
    with pytest.raises(UnsupportedOperation):
        Rational(1, 2).to_int_string()


def test_str_and_float():
    print("[str/float] -3/2 -> '-3/2'; 7 -> '7'; float(1/3)")
    assert str(Rational(-3, 2)) == "-3/2"
    assert str(Rational(7)) == "7"
    assert float(Rational(1, 3)) == 1 / 3
    assert math.isclose(float(Rational(10 ** 400 + 1, 10 ** 400)), 1.0)


def test_to_decimal_half_down():
    print("[to_decimal] 3/8 @2 -> 0.37 (tie toward zero); 5/8 @2 -> 0.62; 2/3 @3 -> 0.667")
    assert str(Rational(3, 8).to_decimal(2)) == "0.37"
    assert str(Rational(-3, 8).to_decimal(2)) == "-0.37"
    assert str(Rational(5, 8).to_decimal(2)) == "0.62"
    assert str(Rational(2, 3).to_decimal(3)) == "0.667"
    assert str(Rational(7, 2).to_decimal(0)) == "3"


def test_to_decimal_negative_precision():
    print("[to_decimal-negative] precision=-1 -> InvalidArgument")
    with pytest.raises(InvalidArgument):
        Rational(1, 3).to_decimal(-1)


# -----------------------------
# Magnitudes past the int/str digit limit
# -----------------------------

BIG = 10 ** 5000


def test_large_values_construct_and_add():
    print("[large] 10^4400 + 1/3 == (3*10^4400 + 1)/3; normalisation of 10^5000-sized pairs")
    assert Rational(10 ** 4400) + Rational(1, 3) == Rational(3 * 10 ** 4400 + 1, 3)
    assert Rational(10 ** 4400) - Rational(1, 3) == Rational(3 * 10 ** 4400 - 1, 3)
    r = Rational.from_fraction(6 * BIG, -4 * BIG)
    assert _fields(r) == (-3, 2)
    assert _fields(Rational(BIG + 1, 7)) == (BIG + 1, 7)


def test_large_values_render_as_strings():
    print("[large] str / to_int_string of 5001-digit integers")
    assert Rational(BIG).to_int_string() == "1" + "0" * 5000
    assert Rational(-BIG).to_int_string() == "-1" + "0" * 5000
    assert str(Rational(BIG, 3)) == "1" + "0" * 5000 + "/3"
    with pytest.raises(DivisionByZero):
        Rational(BIG).divide(0)


def test_large_values_to_decimal_and_expansion():
    print("[large] 10^5000/3 -> to_decimal(2) and to_decimal_string(1) keep every digit")
    r = Rational(BIG, 3)
    d = r.to_decimal(2)
    t = d.as_tuple()
    assert t.sign == 0
    assert t.exponent == -2
    assert t.digits == (3,) * 5002
    assert r.to_decimal_string(1) == "3" * 5000 + ".3"
    assert (-r).to_decimal_string(0) == "-" + "3" * 5000
    assert r.to_binary_string(2) == format(BIG // 3, "b") + ".01"


def test_large_values_compare_with_floats():
    print("[large] 10^4000 > 1.0; -10^4400/3 < -1e308; 10^5000 < inf")
    assert Rational(10 ** 4000) > 1.0
    assert Rational(10 ** 4000).compare(1.0) == 1
    assert Rational(-10 ** 4400, 3) < -1e308
    assert Rational(BIG) < math.inf
    assert Rational(BIG) != 0.0
