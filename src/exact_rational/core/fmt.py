"""
Conversion and formatting helpers (integer domain).

Everything here works on a canonical (numerator, denominator) pair of Python
ints and never goes through float. Decimal is produced only as an output type;
no Decimal context precision is involved in computing digits.
"""

from decimal import Decimal
from typing import Callable, Optional

from .exc import InvalidArgument
from .constants import (
    BINARY_RADIX,
    DECIMAL_RADIX,
    PROGRESS_INTERVAL,
    DEFAULT_DISPLAY_PLACES,
)

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# Format spec used to render an integer part in a supported radix.
_RADIX_SPEC = {
    BINARY_RADIX: "b",
    DECIMAL_RADIX: "d",
}


def int_to_str(q: int) -> str:
    """Decimal string of an int of any size.

    Goes through Decimal, whose int conversion is not subject to the interpreter's
    int/str digit limit (sys.set_int_max_str_digits).
    """
    return str(Decimal(q))


def _check_places(places: int, what: str) -> None:
    if not isinstance(places, int):
        raise InvalidArgument(f"{what}: precision must be int, got {type(places).__name__}")
    if places < 0:
        raise InvalidArgument(f"{what}: precision must be >= 0, got {places}")


# ---------------------------------------------------------------------------
# Fixed-precision Decimal (HALF_DOWN)
# ---------------------------------------------------------------------------

def quantize_half_down(numerator: int, denominator: int, places: int) -> Decimal:
    """Return numerator/denominator as a Decimal with exactly `places` fractional digits.

    Ties round toward zero (HALF_DOWN). The quotient is computed with integer
    divmod, so the result is exact up to the single final rounding step:
      (1, 3, 4)  -> Decimal('0.3333')
      (1, 8, 2)  -> Decimal('0.12')    (tie, toward zero)
      (-5, 8, 2) -> Decimal('-0.62')
    """
    _check_places(places, "quantize_half_down")
    if denominator <= 0:
        raise InvalidArgument("quantize_half_down expects a positive denominator")
    negative = numerator < 0
    q, r = divmod(abs(numerator) * DECIMAL_RADIX ** places, denominator)
    # Strictly above half rounds away from zero; exactly half stays.
    if 2 * r > denominator:
        q += 1
    sign = 1 if (negative and q != 0) else 0
    digits = Decimal(q).as_tuple().digits
    return Decimal((sign, digits, -places))


# ---------------------------------------------------------------------------
# Bounded positional expansion
# ---------------------------------------------------------------------------

def expand(
    numerator: int,
    denominator: int,
    radix: int,
    precision: int,
    progress: Optional[Callable[[int], None]] = None,
) -> str:
    """Positional expansion of numerator/denominator in base 2 or 10.

    Long division: the integer part is floor(|n|/d) rendered in `radix`; then,
    when precision > 0, a '.' followed by exactly `precision` digits, each
    obtained by multiplying the remainder by `radix`. Digits past `precision`
    are truncated, never rounded. A leading '-' marks negative values.

    `progress`, when given, is called with the number of fractional digits
    produced so far every PROGRESS_INTERVAL digits.
    """
    _check_places(precision, "expand")
    spec = _RADIX_SPEC.get(radix)
    if spec is None:
        raise InvalidArgument(f"expand: unsupported radix {radix}")
    if denominator <= 0:
        raise InvalidArgument("expand expects a positive denominator")

    out = []
    if numerator < 0:
        out.append("-")
        numerator = -numerator

    whole, rem = divmod(numerator, denominator)
    out.append(int_to_str(whole) if radix == DECIMAL_RADIX else format(whole, spec))
    if precision == 0:
        return "".join(out)

    out.append(".")
    for done in range(1, precision + 1):
        digit, rem = divmod(rem * radix, denominator)
        out.append(format(digit, spec))
        if done % PROGRESS_INTERVAL == 0:
            _dbg(f"expand: radix={radix} digits={done}/{precision}")
            if progress is not None:
                progress(done)
    return "".join(out)


def to_binary_string(numerator: int, denominator: int, precision: int,
                     progress: Optional[Callable[[int], None]] = None) -> str:
    """Binary expansion, e.g. (33, 4, 2) -> '1000.01'."""
    return expand(numerator, denominator, BINARY_RADIX, precision, progress)


def to_decimal_string(numerator: int, denominator: int, precision: int,
                      progress: Optional[Callable[[int], None]] = None) -> str:
    """Decimal expansion, e.g. (1, 3, 4) -> '0.3333'."""
    return expand(numerator, denominator, DECIMAL_RADIX, precision, progress)


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

def fmt_dec(x: Decimal, places: int = DEFAULT_DISPLAY_PLACES) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')      -> '1.000000000000000000E+0'
      Decimal('0.25')   -> '2.500000000000000000E-1'
    """
    return format(x, f".{places}E")


def rational_to_display(r, places: int = DEFAULT_DISPLAY_PLACES) -> str:
    """Render anything exposing to_decimal(places) (i.e. a Rational) via fmt_dec.

    Display only: the value is first rounded to `places` fractional digits.
    """
    return fmt_dec(r.to_decimal(places), places)


__all__ = [
    "DEBUG_FMT",
    "int_to_str",
    "quantize_half_down",
    "expand",
    "to_binary_string",
    "to_decimal_string",
    "fmt_dec",
    "rational_to_display",
]
