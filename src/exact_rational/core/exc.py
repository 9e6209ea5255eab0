"""
Core exception types for exact_rational.core.

These are dependency-free and may be imported by all core modules. Each one
derives from the matching builtin so generic handlers still catch it.
"""

__all__ = [
    "InvalidArgument",
    "DivisionByZero",
    "UnsupportedOperation",
]


class InvalidArgument(ValueError):
    """Raised when inputs violate a precondition (zero denominator, bad exponent or precision)."""
    pass


class DivisionByZero(ZeroDivisionError):
    """Raised when dividing by a zero Rational.

    Attributes
    ----------
    dividend : Any
        The left operand of the failed division, for context.
    """

    def __init__(self, dividend):
        super().__init__(f"division of {dividend} by zero")
        self.dividend = dividend


class UnsupportedOperation(ArithmeticError):
    """Raised when an operation is not defined for the given value (e.g. integer string of 1/2)."""
    pass
