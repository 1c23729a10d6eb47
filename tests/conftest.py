from __future__ import annotations
import random
from typing import Callable, Union

import pytest

from hugenum.core import (
    HugeNumber,
    absolute,
    compare_to,
    divide,
    subtract,
    to_huge,
)


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

Numeric = Union[HugeNumber, int, str]


def as_huge(x: Numeric) -> HugeNumber:
    """Test literal -> HugeNumber (strings keep every digit, unlike floats)."""
    return to_huge(x)


def within(actual: HugeNumber, expected: Numeric, tol: Numeric = "1e-15", relative: bool = False) -> bool:
    """|actual - expected| <= tol (or tol·|expected| when relative)."""
    exp = as_huge(expected)
    bound = as_huge(tol)
    if actual.is_nan() or not actual.is_finite():
        print(f"  within: actual={actual} is not finite")
        return False
    err = absolute(subtract(actual, exp))
    if relative and not exp.is_zero():
        err = divide(err, absolute(exp))
    print(f"  within: actual={actual}, expected={exp}, err={err}, tol={bound}")
    return compare_to(err, bound) <= 0


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def close() -> Callable[..., bool]:
    return within


@pytest.fixture()
def rng() -> random.Random:
    # Fixed seed: property samples are reproducible across runs.
    return random.Random(20240611)
