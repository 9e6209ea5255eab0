from __future__ import annotations
from typing import List

import pytest

# Import project primitives
from exact_rational.core import Rational


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


class ProgressRecorder:
    """Callable stub collecting the digit counts passed to an expansion progress callback."""

    def __init__(self) -> None:
        self.calls: List[int] = []

    def __call__(self, digits_done: int) -> None:
        self.calls.append(digits_done)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def progress_recorder() -> ProgressRecorder:
    return ProgressRecorder()


@pytest.fixture()
def thirty_three_quarters() -> Rational:
    return Rational.from_fraction(33, 4)


@pytest.fixture()
def one_third() -> Rational:
    return Rational.from_fraction(1, 3)
