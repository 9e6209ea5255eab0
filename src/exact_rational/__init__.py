"""
Top-level API for exact_rational.

This module exposes the stable interface:
  - Rational: immutable, canonical, arbitrary-precision rational number
  - the error types raised by its operations

Conversion helpers that work directly on (numerator, denominator) pairs live
in `exact_rational.core.fmt` and are imported from there explicitly.
"""

from __future__ import annotations

from .core import (
    Rational,
    InvalidArgument,
    DivisionByZero,
    UnsupportedOperation,
)

__all__ = [
    "Rational",
    "InvalidArgument",
    "DivisionByZero",
    "UnsupportedOperation",
]
