"""
Exact Rational Core
===================

Unified exports for the integer-domain rational primitive and its helpers.
All arithmetic is exact on Python ints and every value is kept canonical.
Decimal appears only as a conversion target.
"""

# NOTE:
#   The `core` package defines the Rational value type and the conversion helpers it
#   delegates to. Nothing here performs I/O; DEBUG_* flags only gate diagnostic prints.

# Configuration constants
from .constants import (
    FLOAT_COMPARISON_PRECISION,
    BINARY_RADIX,
    DECIMAL_RADIX,
    PROGRESS_INTERVAL,
    DEFAULT_DISPLAY_PLACES,
)

# Conversion and display helpers
from .fmt import (
    int_to_str,
    quantize_half_down,
    expand,
    to_binary_string,
    to_decimal_string,
    fmt_dec,
    rational_to_display,
)

# Rational primitive
from .rational import Rational

# Core exceptions
from .exc import InvalidArgument, DivisionByZero, UnsupportedOperation

__all__ = [
    # constants
    "FLOAT_COMPARISON_PRECISION",
    "BINARY_RADIX",
    "DECIMAL_RADIX",
    "PROGRESS_INTERVAL",
    "DEFAULT_DISPLAY_PLACES",
    # fmt
    "int_to_str",
    "quantize_half_down",
    "expand",
    "to_binary_string",
    "to_decimal_string",
    "fmt_dec",
    "rational_to_display",
    # rational
    "Rational",
    # exceptions
    "InvalidArgument",
    "DivisionByZero",
    "UnsupportedOperation",
]
