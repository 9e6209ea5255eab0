"""Demo: exact rational arithmetic and bounded expansions.

Scenarios covered:
S1) Construction & normalisation (sign, gcd, canonical zero)
S2) Arithmetic with cross-cancellation (mul/div/pow)
S3) Ordering against rationals, ints and floats
S4) Conversions: Decimal (HALF_DOWN), integer string, binary/decimal expansions
S5) Long binary expansion with a progress callback
"""
from __future__ import annotations

from typing import Callable, List
import argparse
import sys

from exact_rational import Rational, UnsupportedOperation
from exact_rational.core import fmt_dec

# ---------- pretty printers ----------

def show(label: str, r: Rational) -> None:
    print(f"  {label:<28} = {r}  (num={r.numerator}, den={r.denominator})")


def scenario_construction() -> None:
    print("\n=== S1) Construction & normalisation ===")
    show("from_fraction(6, -4)", Rational.from_fraction(6, -4))
    show("from_fraction(0, -5)", Rational.from_fraction(0, -5))
    show("from_integer(42)", Rational.from_integer(42))


def scenario_arithmetic() -> None:
    print("\n=== S2) Arithmetic ===")
    a, b = Rational(2, 3), Rational(9, 4)
    show("2/3 + 9/4", a + b)
    show("2/3 - 9/4", a - b)
    show("2/3 * 9/4", a * b)
    show("2/3 / -9/4", a / -b)
    show("(-2/3) ** 5", (-a) ** 5)
    show("|-9/4|", abs(-b))


def scenario_ordering() -> None:
    print("\n=== S3) Ordering ===")
    x = Rational(1, 10)
    print(f"  1/10 == 0.1 -> {x == 0.1}  (float 0.1 is not exactly 1/10)")
    print(f"  1/10 <  0.1 -> {x < 0.1}")
    print(f"  7/2 > 3     -> {Rational(7, 2) > 3}")
    print(f"  sorted      -> {[str(v) for v in sorted([Rational(1, 2), Rational(-3), Rational(1, 3)])]}")


def scenario_conversions() -> None:
    print("\n=== S4) Conversions ===")
    r = Rational(33, 4)
    print(f"  33/4 to_decimal_string(2)  -> {r.to_decimal_string(2)}")
    print(f"  -33/4 to_binary_string(2)  -> {(-r).to_binary_string(2)}")
    print(f"  1/3 to_decimal_string(4)   -> {Rational(1, 3).to_decimal_string(4)}")
    print(f"  3/8 to_decimal(2)          -> {Rational(3, 8).to_decimal(2)}  (HALF_DOWN)")
    print(f"  22/7 fmt_dec               -> {fmt_dec(Rational(22, 7).to_decimal(20))}")
    print(f"  6/3 to_int_string()        -> {Rational(6, 3).to_int_string()}")
    try:
        Rational(1, 2).to_int_string()
    except UnsupportedOperation as e:
        print(f"  1/2 to_int_string()        -> UnsupportedOperation: {e}")


def scenario_long_binary(bits: int) -> None:
    print(f"\n=== S5) 1/7 in binary, {bits} bits ===")
    s = Rational(1, 7).to_binary_string(bits, lambda done: print(f"  ... {done} bits"))
    print(f"  head={s[:24]}... len={len(s)}")


class Scenario:
    def __init__(self, sid: str, fn: Callable[[], None]):
        self.sid = sid
        self.fn = fn


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Exact rational arithmetic demo")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1,S4)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    parser.add_argument("--bits", type=int, default=300, help="Fractional bits for the long binary expansion (S5)")
    args = parser.parse_args(sys.argv[1:])

    scenarios: List[Scenario] = [
        Scenario("S1", scenario_construction),
        Scenario("S2", scenario_arithmetic),
        Scenario("S3", scenario_ordering),
        Scenario("S4", scenario_conversions),
        Scenario("S5", lambda: scenario_long_binary(args.bits)),
    ]

    # --------------- Filter & run ---------------
    only_set = None
    skip_set = None
    if args.only:
        only_set = set([s.strip() for s in args.only.split(',') if s.strip()])
    if args.skip:
        skip_set = set([s.strip() for s in args.skip.split(',') if s.strip()])

    for sc in scenarios:
        if only_set is not None and sc.sid not in only_set:
            continue
        if skip_set is not None and sc.sid in skip_set:
            continue
        sc.fn()
