"""
Rounding: reduce a value to a given number of fractional digits.

Fractions are collapsed to decimal form first. TO_EVEN and AWAY_FROM_ZERO round
to nearest and differ only on an exact midpoint; TO_ZERO, TO_NEGATIVE_INFINITY
and TO_POSITIVE_INFINITY are directed (truncate, floor, ceiling). The midpoint
test looks at the whole discarded remainder, not just its first digit.
"""

from __future__ import annotations

from enum import Enum

from .constants import SIGNIFICAND_DIGITS
from .exc import InvalidArgumentError
from .number import HugeNumber, _ten_pow
from .rationals import to_decimal_form
from .values import ZERO, NEGATIVE_ZERO

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


class MidpointRounding(Enum):
    TO_EVEN = "to_even"
    AWAY_FROM_ZERO = "away_from_zero"
    TO_ZERO = "to_zero"
    TO_NEGATIVE_INFINITY = "to_negative_infinity"
    TO_POSITIVE_INFINITY = "to_positive_infinity"


def _check_arguments(digits, mode) -> None:
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidArgumentError(f"digits must be an int, got {digits!r}")
    if not 0 <= digits <= SIGNIFICAND_DIGITS:
        raise InvalidArgumentError(f"digits must be within [0, {SIGNIFICAND_DIGITS}], got {digits}")
    if not isinstance(mode, MidpointRounding):
        raise InvalidArgumentError(f"unknown midpoint rounding mode: {mode!r}")


def _round_up(q: int, r: int, unit: int, negative: bool, mode: MidpointRounding) -> bool:
    """Whether the kept magnitude q must step away from zero given remainder r of unit."""
    if r == 0:
        return False
    if mode is MidpointRounding.TO_EVEN:
        return 2 * r > unit or (2 * r == unit and q % 2 == 1)
    if mode is MidpointRounding.AWAY_FROM_ZERO:
        return 2 * r >= unit
    if mode is MidpointRounding.TO_NEGATIVE_INFINITY:
        return negative
    if mode is MidpointRounding.TO_POSITIVE_INFINITY:
        return not negative
    return False


def round_digits(
    value: HugeNumber,
    digits: int = 0,
    mode: MidpointRounding = MidpointRounding.TO_EVEN,
) -> HugeNumber:
    """Round to `digits` fractional decimal digits (0..18) using `mode`.

    Sentinels are returned unchanged; a result that rounds to zero keeps the
    sign of `value`.
    """
    _check_arguments(digits, mode)
    if not value.is_finite() or value.is_zero():
        return value

    x = to_decimal_form(value)
    if x.exponent >= -digits:
        return x

    shift = -digits - x.exponent
    negative = x.significand < 0
    unit = _ten_pow(shift)
    q, r = divmod(abs(x.significand), unit)
    if _round_up(q, r, unit, negative, mode):
        q += 1
    _dbg(f"round: m={x.significand}, e={x.exponent}, digits={digits}, mode={mode.name} -> q={q}")
    if q == 0:
        return NEGATIVE_ZERO if negative else ZERO
    return HugeNumber.from_components(-q if negative else q, -digits)


def truncate(value: HugeNumber) -> HugeNumber:
    return round_digits(value, 0, MidpointRounding.TO_ZERO)


def floor(value: HugeNumber) -> HugeNumber:
    return round_digits(value, 0, MidpointRounding.TO_NEGATIVE_INFINITY)


def ceiling(value: HugeNumber) -> HugeNumber:
    return round_digits(value, 0, MidpointRounding.TO_POSITIVE_INFINITY)


__all__ = [
    "MidpointRounding",
    "round_digits",
    "truncate",
    "floor",
    "ceiling",
]
