"""
Exact Rational Core Constants
=============================

Tunables for the conversion layer. Arithmetic itself has no knobs: it is exact
on Python ints. Decimal-related settings live here so that `fmt.py` and
`rational.py` agree on them.
"""

# NOTE: FLOAT_COMPARISON_PRECISION bounds how far a float comparison looks; values
#   that differ only beyond that many fractional digits compare as equal.

# ---------------------------------------------------------------------------
# Float comparison
# ---------------------------------------------------------------------------

#: Fractional digits used when a Rational is compared against a float.
FLOAT_COMPARISON_PRECISION: int = 1000


# ---------------------------------------------------------------------------
# Positional expansion
# ---------------------------------------------------------------------------

BINARY_RADIX: int = 2
DECIMAL_RADIX: int = 10

#: A progress callback (if any) fires every this many fractional digits.
PROGRESS_INTERVAL: int = 100


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

#: Default number of fractional digits for fmt_dec() (logs/tests only).
DEFAULT_DISPLAY_PLACES: int = 18


__all__ = [
    "FLOAT_COMPARISON_PRECISION",
    "BINARY_RADIX",
    "DECIMAL_RADIX",
    "PROGRESS_INTERVAL",
    "DEFAULT_DISPLAY_PLACES",
]
