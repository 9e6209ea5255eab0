"""
Rational primitive: an immutable numerator/denominator pair of Python ints.

- Canonical form always: denominator > 0, gcd(|numerator|, denominator) == 1,
  zero is exactly 0/1. Two values are equal iff their fields are equal.
- Arithmetic is exact. Multiplication, division and power cancel common
  factors up front so their results are canonical without a second gcd pass.
- Comparison against floats goes through a 1000-digit Decimal and is
  approximate by construction; everything else is exact.
- Conversions (Decimal, binary/decimal expansion strings) are delegated to the
  integer-domain helpers in `fmt.py`.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Callable, Optional, Tuple, Union

from .constants import FLOAT_COMPARISON_PRECISION
from .exc import InvalidArgument, DivisionByZero, UnsupportedOperation
from . import fmt

# Debug printing control
DEBUG_RATIONAL = False

def _dbg(msg: str) -> None:
    if DEBUG_RATIONAL:
        print(msg)


_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


# ----------------------------
# Normalisation helpers
# ----------------------------

def _check_int(x, what: str) -> None:
    if not isinstance(x, int):
        raise InvalidArgument(f"{what} must be int, got {type(x).__name__}")


def _normalize(n: int, d: int) -> Tuple[int, int]:
    """Reduce n/d to canonical form.

    - Denominator must be non-zero
    - Sign is moved onto the numerator
    - Zero is canonicalised to (0, 1)
    """
    if d == 0:
        raise InvalidArgument("zero denominator")
    if n == 0:
        return 0, 1
    g = math.gcd(n, d)
    n, d = n // g, d // g
    if d < 0:
        n, d = -n, -d
    if DEBUG_RATIONAL:
        _dbg(f"normalize: gcd bits={g.bit_length()} -> {n.bit_length()}-bit / {d.bit_length()}-bit")
    return n, d


@dataclass(frozen=True)
class Rational:
    """Exact rational number numerator/denominator in canonical form."""
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        _check_int(self.numerator, "numerator")
        _check_int(self.denominator, "denominator")
        if type(self.numerator) is int and type(self.denominator) is int and self.denominator == 1:
            return
        n, d = _normalize(int(self.numerator), int(self.denominator))
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)

    # ------------- constructors -------------

    @classmethod
    def _canonical(cls, n: int, d: int) -> "Rational":
        # Caller guarantees n/d is already canonical; skips __post_init__.
        r = object.__new__(cls)
        object.__setattr__(r, "numerator", n)
        object.__setattr__(r, "denominator", d)
        return r

    @classmethod
    def from_fraction(cls, numerator: int, denominator: int) -> "Rational":
        """Build the canonical form of numerator/denominator.

        Raises InvalidArgument for a zero denominator.
        """
        _check_int(numerator, "numerator")
        _check_int(denominator, "denominator")
        n, d = _normalize(int(numerator), int(denominator))
        return cls._canonical(n, d)

    @classmethod
    def from_integer(cls, n: int) -> "Rational":
        """n/1; already canonical, no gcd work."""
        _check_int(n, "integer")
        return cls._canonical(int(n), 1)

    @classmethod
    def from_exact(cls, f: Fraction) -> "Rational":
        """Bridge from fractions.Fraction (which is canonical already)."""
        if not isinstance(f, Fraction):
            raise InvalidArgument(f"from_exact expects Fraction, got {type(f).__name__}")
        return cls._canonical(f.numerator, f.denominator)

    @staticmethod
    def zero() -> "Rational":
        return _ZERO

    @staticmethod
    def one() -> "Rational":
        return _ONE

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def signum(self) -> int:
        """-1, 0 or 1 as the value is negative, zero or positive."""
        return (self.numerator > 0) - (self.numerator < 0)

    def __bool__(self) -> bool:
        return self.numerator != 0

    # ------------- arithmetic -------------

    def add(self, other: Union["Rational", int]) -> "Rational":
        b = _require(other, "add")
        if b.numerator == 0:
            return self
        if self.numerator == 0:
            return b
        n = self.numerator * b.denominator + b.numerator * self.denominator
        d = self.denominator * b.denominator
        return Rational.from_fraction(n, d)

    def subtract(self, other: Union["Rational", int]) -> "Rational":
        b = _require(other, "subtract")
        if b.numerator == 0:
            return self
        if self.numerator == 0:
            return b.negate()
        return self.add(b.negate())

    def multiply(self, other: Union["Rational", int]) -> "Rational":
        """Product with cross-cancellation.

        With g1 = gcd(a.den, b.num) and g2 = gcd(a.num, b.den) the reduced
        factors are pairwise coprime, so the product is canonical as built.
        """
        b = _require(other, "multiply")
        if self.numerator == 0 or b.numerator == 0:
            return _ZERO
        g1 = math.gcd(self.denominator, b.numerator)
        g2 = math.gcd(self.numerator, b.denominator)
        n = (self.numerator // g2) * (b.numerator // g1)
        d = (self.denominator // g1) * (b.denominator // g2)
        return Rational._canonical(n, d)

    def divide(self, other: Union["Rational", int]) -> "Rational":
        """Quotient as multiplication by the reciprocal of `other`.

        Raises DivisionByZero when `other` is zero (also for a zero dividend).
        """
        b = _require(other, "divide")
        if b.numerator == 0:
            raise DivisionByZero(self)
        if self.numerator == 0:
            return _ZERO
        g1 = math.gcd(self.numerator, b.numerator)
        g2 = math.gcd(self.denominator, b.denominator)
        n = (self.numerator // g1) * (b.denominator // g2)
        d = (self.denominator // g2) * (b.numerator // g1)
        # The reciprocal of a negative value carries its sign into the denominator.
        if b.numerator < 0:
            n, d = -n, -d
        return Rational._canonical(n, d)

    def power(self, exponent: int) -> "Rational":
        """self ** exponent for a non-negative int exponent; 0 ** 0 is rejected."""
        if not isinstance(exponent, int):
            raise InvalidArgument(f"exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            raise InvalidArgument(f"negative exponent not allowed: {exponent}")
        if exponent == 0:
            if self.numerator == 0:
                raise InvalidArgument("0 ** 0 is undefined")
            return _ONE
        # Powers of coprime integers stay coprime.
        return Rational._canonical(self.numerator ** exponent, self.denominator ** exponent)

    def negate(self) -> "Rational":
        if self.numerator == 0:
            return self
        return Rational._canonical(-self.numerator, self.denominator)

    def absolute_value(self) -> "Rational":
        if self.numerator >= 0:
            return self
        return Rational._canonical(-self.numerator, self.denominator)

    # Python numeric protocol; ints are promoted, anything else is refused.

    def __add__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.add(b)

    __radd__ = __add__

    def __sub__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.subtract(b)

    def __rsub__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return b.subtract(self)

    def __mul__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.multiply(b)

    __rmul__ = __mul__

    def __truediv__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return self.divide(b)

    def __rtruediv__(self, other):
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return b.divide(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.absolute_value()

    # ------------- comparisons -------------

    def _cmp_core(self, other: "Rational") -> int:
        if self.numerator == other.numerator and self.denominator == other.denominator:
            return 0
        return self.subtract(other).signum()

    def compare(self, other: Union["Rational", int, float]) -> int:
        """Three-way comparison: -1, 0 or 1.

        Ints are promoted exactly. Floats are compared through
        to_decimal(FLOAT_COMPARISON_PRECISION) against the exact Decimal value
        of the float, so a difference beyond that many fractional digits is not
        seen. A NaN float cannot be ordered and raises InvalidArgument.
        """
        if isinstance(other, Rational):
            return self._cmp_core(other)
        if isinstance(other, int):
            return self._cmp_core(Rational.from_integer(other))
        if isinstance(other, float):
            if math.isnan(other):
                raise InvalidArgument("cannot compare a Rational with NaN")
            left = self.to_decimal(FLOAT_COMPARISON_PRECISION)
            right = Decimal(other)
            return (left > right) - (left < right)
        raise TypeError(f"cannot compare Rational with {type(other).__name__}")

    def _rich_cmp(self, other):
        # NotImplemented for foreign types; None for NaN, which never orders.
        if not isinstance(other, (Rational, int, float)):
            return NotImplemented
        if isinstance(other, float) and math.isnan(other):
            return None
        return self.compare(other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, int):
            return self == Rational.from_integer(other)
        if isinstance(other, float):
            return not math.isnan(other) and self.compare(other) == 0
        return NotImplemented

    def __lt__(self, other) -> bool:
        c = self._rich_cmp(other)
        if c is NotImplemented:
            return c
        return c is not None and c < 0

    def __le__(self, other) -> bool:
        c = self._rich_cmp(other)
        if c is NotImplemented:
            return c
        return c is not None and c <= 0

    def __gt__(self, other) -> bool:
        c = self._rich_cmp(other)
        if c is NotImplemented:
            return c
        return c is not None and c > 0

    def __ge__(self, other) -> bool:
        c = self._rich_cmp(other)
        if c is NotImplemented:
            return c
        return c is not None and c >= 0

    def __hash__(self) -> int:
        """Same scheme as fractions.Fraction, so hash(Rational(1, 2)) == hash(0.5).

        Hashes agree with ints, Fractions and exactly-equal floats. Float equality
        is approximate (see compare), so a Rational that only compares equal to a
        float within FLOAT_COMPARISON_PRECISION digits, e.g. Rational(1, 10**1001)
        and 0.0, is == to it but hashes differently.
        """
        try:
            dinv = pow(self.denominator, -1, _HASH_MODULUS)
        except ValueError:
            # Denominator divisible by the modulus: no inverse.
            h = _HASH_INF
        else:
            h = hash(hash(abs(self.numerator)) * dinv)
        result = h if self.numerator >= 0 else -h
        return -2 if result == -1 else result

    # Named predicates

    def less_than(self, other) -> bool:
        return self.compare(other) < 0

    def less_than_or_equal_to(self, other) -> bool:
        return self.compare(other) <= 0

    def greater_than(self, other) -> bool:
        return self.compare(other) > 0

    def greater_than_or_equal_to(self, other) -> bool:
        return self.compare(other) >= 0

    def equal_to(self, other) -> bool:
        return self.compare(other) == 0

    def not_equal_to(self, other) -> bool:
        return self.compare(other) != 0

    # ------------- conversions -------------

    def to_decimal(self, precision: int) -> Decimal:
        """Approximate Decimal with `precision` fractional digits, ties toward zero."""
        return fmt.quantize_half_down(self.numerator, self.denominator, precision)

    def to_int_string(self) -> str:
        if not self.is_integer():
            raise UnsupportedOperation("to_int_string: value is not an integer (denominator != 1)")
        return fmt.int_to_str(self.numerator)

    def to_binary_string(self, precision: int,
                         progress: Optional[Callable[[int], None]] = None) -> str:
        """Binary expansion truncated to `precision` bits, e.g. -33/4 -> '-1000.01'."""
        return fmt.to_binary_string(self.numerator, self.denominator, precision, progress)

    def to_decimal_string(self, precision: int,
                          progress: Optional[Callable[[int], None]] = None) -> str:
        """Decimal expansion truncated to `precision` digits, e.g. 1/3 -> '0.3333'."""
        return fmt.to_decimal_string(self.numerator, self.denominator, precision, progress)

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        if self.denominator == 1:
            return fmt.int_to_str(self.numerator)
        return f"{fmt.int_to_str(self.numerator)}/{fmt.int_to_str(self.denominator)}"


_ZERO = Rational._canonical(0, 1)
_ONE = Rational._canonical(1, 1)


def _coerce(x) -> Optional[Rational]:
    if isinstance(x, Rational):
        return x
    if isinstance(x, int):
        return Rational.from_integer(x)
    return None


def _require(x, op: str) -> Rational:
    r = _coerce(x)
    if r is None:
        raise TypeError(f"unsupported operand type for {op}: 'Rational' and '{type(x).__name__}'")
    return r


__all__ = [
    "DEBUG_RATIONAL",
    "Rational",
]
