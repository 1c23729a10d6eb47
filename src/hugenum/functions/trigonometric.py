"""
Trigonometric functions and their inverses (radians).

Alignment notes:
- sin/cos reduce x modulo TAU (exact remainder) into [-π, π], fold into
  [-π/2, π/2] by symmetry, then sum the Taylor series until stable.
- atan folds x > 1 through π/2 - atan(1/x) and halves the angle with
  atan(x) = 2·atan(x / (1 + √(1 + x²))) while x > 2 - √3.
- asin/acos are expressed through atan; atan2 follows math.atan2 quadrants,
  signed zeros included.
"""

from __future__ import annotations

from ..core.arithmetic import add, copy_sign, divide, modulo, multiply, negate, subtract
from ..core.constants import SERIES_ITERATION_LIMIT
from ..core.number import HugeNumber
from ..core.ordering import compare_magnitude, compare_to, equals
from ..core.rationals import to_decimal_form
from ..core.values import (
    HALF_PI,
    NAN,
    NEGATIVE_ONE,
    ONE,
    PI,
    QUARTER_PI,
    TAU,
    ZERO,
)
from .power import sqrt

# Debug printing control
DEBUG_TRIG = False

def _dbg(msg: str) -> None:
    if DEBUG_TRIG:
        print(msg)


#: 2 - √3 = tan(π/12): atan arguments above this are halved first.
_ATAN_REDUCTION = HugeNumber.from_components(267949192431122706, -18)

_THREE_QUARTER_PI = add(HALF_PI, QUARTER_PI)


# ----------------------------
# Series kernels
# ----------------------------

def _alternating_series(first: HugeNumber, x: HugeNumber, k: int) -> HugeNumber:
    """Σ (-1)^n x^(2n+k) / (2n+k)! starting from `first` = x^k / k!."""
    x2 = multiply(x, x)
    total = first
    term = first
    n = k
    while n < SERIES_ITERATION_LIMIT:
        term = negate(divide(multiply(term, x2), HugeNumber.from_components((n + 1) * (n + 2))))
        n += 2
        following = add(total, term)
        if equals(following, total):
            break
        total = following
    return total


def _reduce(x: HugeNumber) -> HugeNumber:
    """x mod TAU, shifted into [-π, π]."""
    x = to_decimal_form(x)
    if compare_magnitude(x, PI) <= 0:
        return x
    r = modulo(x, TAU)
    if compare_to(r, PI) > 0:
        r = subtract(r, TAU)
    elif compare_to(r, negate(PI)) < 0:
        r = add(r, TAU)
    _dbg(f"reduce: {x} -> {r}")
    return r


# ----------------------------
# Forward functions
# ----------------------------

def sin(x: HugeNumber) -> HugeNumber:
    if x.is_nan() or x.is_zero():
        return x
    if x.is_infinity():
        return NAN
    r = _reduce(x)
    # sin(π - r) = sin(r)
    if compare_to(r, HALF_PI) > 0:
        r = subtract(PI, r)
    elif compare_to(r, negate(HALF_PI)) < 0:
        r = subtract(negate(PI), r)
    if r.is_zero():
        return r
    return to_decimal_form(_alternating_series(r, r, 1))


def cos(x: HugeNumber) -> HugeNumber:
    if x.is_nan():
        return x
    if x.is_infinity():
        return NAN
    if x.is_zero():
        return ONE
    r = _reduce(x)
    flip = False
    # cos(r) = -cos(π - |r|)
    if compare_magnitude(r, HALF_PI) > 0:
        r = subtract(PI, copy_sign(r, ONE))
        flip = True
    result = _alternating_series(ONE, r, 0)
    return to_decimal_form(negate(result) if flip else result)


def tan(x: HugeNumber) -> HugeNumber:
    if x.is_nan() or x.is_zero():
        return x
    if x.is_infinity():
        return NAN
    return to_decimal_form(divide(sin(x), cos(x)))


# ----------------------------
# Inverse functions
# ----------------------------

def atan(x: HugeNumber) -> HugeNumber:
    if x.is_nan() or x.is_zero():
        return x
    if x.is_infinity():
        return copy_sign(HALF_PI, x)
    if x.is_negative():
        return negate(atan(negate(x)))
    c = compare_to(x, ONE)
    if c == 0:
        return QUARTER_PI
    if c > 0:
        return to_decimal_form(subtract(HALF_PI, atan(divide(ONE, x))))

    x = to_decimal_form(x)
    doublings = 0
    while compare_to(x, _ATAN_REDUCTION) > 0:
        x = divide(x, add(ONE, sqrt(add(ONE, multiply(x, x)))))
        doublings += 1

    # atan(x) = Σ (-1)^n x^(2n+1) / (2n+1)
    x2 = multiply(x, x)
    power = x
    total = x
    k = 1
    while k < SERIES_ITERATION_LIMIT:
        power = negate(multiply(power, x2))
        k += 2
        following = add(total, divide(power, HugeNumber.from_components(k)))
        if equals(following, total):
            break
        total = following
    _dbg(f"atan: {doublings} halvings, {k // 2} terms")
    return to_decimal_form(multiply(total, HugeNumber.from_components(2 ** doublings)))


def asin(x: HugeNumber) -> HugeNumber:
    if x.is_nan() or x.is_zero():
        return x
    c = compare_magnitude(x, ONE)
    if c > 0 or x.is_infinity():
        return NAN
    if c == 0:
        return copy_sign(HALF_PI, x)
    # asin(x) = atan(x / √(1 - x²))
    return atan(divide(x, sqrt(subtract(ONE, multiply(x, x)))))


def acos(x: HugeNumber) -> HugeNumber:
    if x.is_nan():
        return x
    if x.is_zero():
        return HALF_PI
    c = compare_magnitude(x, ONE)
    if c > 0 or x.is_infinity():
        return NAN
    if equals(x, ONE):
        return ZERO
    if equals(x, NEGATIVE_ONE):
        return PI
    # acos(x) = 2·atan(√((1 - x) / (1 + x)))
    half = atan(sqrt(divide(subtract(ONE, x), add(ONE, x))))
    return to_decimal_form(add(half, half))


def atan2(y: HugeNumber, x: HugeNumber) -> HugeNumber:
    """Angle of the point (x, y), in (-π, π]; quadrants as math.atan2."""
    if x.is_nan() or y.is_nan():
        return NAN
    if y.is_zero():
        return copy_sign(PI, y) if x.is_negative() else y
    if y.is_infinity():
        if x.is_positive_infinity():
            return copy_sign(QUARTER_PI, y)
        if x.is_negative_infinity():
            return copy_sign(_THREE_QUARTER_PI, y)
        return copy_sign(HALF_PI, y)
    if x.is_zero():
        return copy_sign(HALF_PI, y)
    if x.is_infinity():
        if x.is_positive_infinity():
            return copy_sign(ZERO, y)
        return copy_sign(PI, y)

    angle = atan(divide(y, x))
    if x.is_positive():
        return angle
    if y.is_negative():
        return to_decimal_form(subtract(angle, PI))
    return to_decimal_form(add(angle, PI))


__all__ = [
    "sin",
    "cos",
    "tan",
    "atan",
    "asin",
    "acos",
    "atan2",
]
