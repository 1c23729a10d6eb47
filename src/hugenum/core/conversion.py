"""
Conversion capability table: native numbers <-> HugeNumber.

Inbound conversion is a single `to_huge` entry point dispatched on the source
type. Outbound narrowing goes through parametrised tables (INTEGER_RANGES,
FLOAT_RANGES) instead of one function per target type; each narrowing checks
the target range first, then rounds, then casts.

Alignment notes:
- Floats enter through their shortest repr, so 1.2 becomes exactly 12E-1
  rather than the 52-bit binary expansion.
- Fractions stay exact when their denominator (after moving powers of ten into
  the exponent) fits the 16-bit range; otherwise they collapse to 18 digits.
- Decimal is the I/O bridge only; no arithmetic is done in Decimal here.
"""

from __future__ import annotations

import struct
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from functools import singledispatch
from typing import Dict, Optional, Tuple

from .exc import InvalidArgumentError, NotANumberError, RangeExceededError
from .number import HugeNumber, _digit_count, _ten_pow
from .rationals import from_fraction, to_decimal_form
from .rounding import MidpointRounding, round_digits
from .values import NAN, ZERO, NEGATIVE_ZERO, POSITIVE_INFINITY, NEGATIVE_INFINITY

# Debug printing control
DEBUG_CONVERSION = False

def _dbg(msg: str) -> None:
    if DEBUG_CONVERSION:
        print(msg)


# ---------------------------------------------------------------------------
# Target type capability tables
# ---------------------------------------------------------------------------

#: Inclusive integer bounds per narrowing target; "int" is Python's unbounded int.
INTEGER_RANGES: Dict[str, Tuple[Optional[int], Optional[int]]] = {
    "int8": (-(2 ** 7), 2 ** 7 - 1),
    "int16": (-(2 ** 15), 2 ** 15 - 1),
    "int32": (-(2 ** 31), 2 ** 31 - 1),
    "int64": (-(2 ** 63), 2 ** 63 - 1),
    "uint8": (0, 2 ** 8 - 1),
    "uint16": (0, 2 ** 16 - 1),
    "uint32": (0, 2 ** 32 - 1),
    "uint64": (0, 2 ** 64 - 1),
    "int": (None, None),
}

#: Largest finite magnitude and struct format code per floating target.
FLOAT_RANGES: Dict[str, Tuple[float, str]] = {
    "float16": (65504.0, "e"),
    "float32": (3.4028234663852886e38, "f"),
    "float64": (1.7976931348623157e308, "d"),
}


# ---------------------------------------------------------------------------
# Inbound: native -> HugeNumber
# ---------------------------------------------------------------------------

@singledispatch
def to_huge(value) -> HugeNumber:
    """Convert a native number (int, float, Decimal, Fraction, str) to HugeNumber."""
    raise InvalidArgumentError(f"cannot convert {type(value).__name__} to HugeNumber")


@to_huge.register
def _(value: HugeNumber) -> HugeNumber:
    return value


@to_huge.register
def _(value: int) -> HugeNumber:
    return HugeNumber.from_components(int(value))


@to_huge.register
def _(value: Decimal) -> HugeNumber:
    if value.is_nan():
        return NAN
    if value.is_infinite():
        return NEGATIVE_INFINITY if value.is_signed() else POSITIVE_INFINITY
    if value.is_zero():
        return NEGATIVE_ZERO if value.is_signed() else ZERO
    tup = value.as_tuple()
    digits = int("".join(str(d) for d in tup.digits))
    return HugeNumber.from_components(-digits if tup.sign else digits, tup.exponent)


@to_huge.register
def _(value: float) -> HugeNumber:
    # repr() is the shortest string that round-trips, e.g. 0.1 -> '0.1'.
    return to_huge(Decimal(repr(value)))


@to_huge.register
def _(value: Fraction) -> HugeNumber:
    return from_fraction(value)


@to_huge.register
def _(value: str) -> HugeNumber:
    text = value.strip()
    if "/" in text:
        try:
            return to_huge(Fraction(text))
        except (ValueError, ZeroDivisionError) as exc:
            raise InvalidArgumentError(f"invalid fraction literal: {value!r}") from exc
    try:
        return to_huge(Decimal(text))
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"invalid numeric literal: {value!r}") from exc


# ---------------------------------------------------------------------------
# Outbound: HugeNumber -> native
# ---------------------------------------------------------------------------

def to_fraction(value: HugeNumber) -> Fraction:
    """Exact Fraction of a finite value."""
    if value.is_nan():
        raise NotANumberError("cannot convert NaN to Fraction")
    if value.is_infinity():
        raise RangeExceededError(value, "Fraction")
    m, e, d = value.significand, value.exponent, value.denominator
    if e >= 0:
        return Fraction(m * _ten_pow(e), d)
    return Fraction(m, d * _ten_pow(-e))


def to_decimal(value: HugeNumber) -> Decimal:
    """Decimal view for I/O; fractions are collapsed to 18 digits first."""
    if value.is_nan():
        return Decimal("NaN")
    if value.is_infinity():
        return Decimal("-Infinity") if value.significand < 0 else Decimal("Infinity")
    if value.is_zero():
        return Decimal("-0") if value.is_negative() else Decimal(0)
    x = to_decimal_form(value)
    m = x.significand
    digits = tuple(int(c) for c in str(abs(m)))
    return Decimal((1 if m < 0 else 0, digits, x.exponent))


def _check_integer_range(value: HugeNumber, kind: str, lo: Optional[int], hi: Optional[int]) -> None:
    if lo is not None and value < lo:
        raise RangeExceededError(value, kind)
    if hi is not None and value > hi:
        raise RangeExceededError(value, kind)


def _integer_bounds(kind: str) -> Tuple[Optional[int], Optional[int]]:
    try:
        return INTEGER_RANGES[kind]
    except KeyError:
        raise InvalidArgumentError(f"unknown integer kind: {kind!r}") from None


def _integral_value(value: HugeNumber) -> int:
    # value is already integral (rounded); expand it to a Python int.
    if value.is_zero():
        return 0
    return value.significand * _ten_pow(value.exponent)


def to_integer(
    value: HugeNumber,
    kind: str = "int64",
    mode: MidpointRounding = MidpointRounding.TO_ZERO,
) -> int:
    """Narrow to an integer kind from INTEGER_RANGES.

    Raises NotANumberError for NaN and RangeExceededError for infinities or
    values outside the kind's bounds (checked before and after rounding).
    """
    lo, hi = _integer_bounds(kind)
    if value.is_nan():
        raise NotANumberError(f"cannot convert NaN to {kind}")
    if value.is_infinity():
        raise RangeExceededError(value, kind)
    _check_integer_range(value, kind, lo, hi)
    rounded = round_digits(value, 0, mode)
    _check_integer_range(rounded, kind, lo, hi)
    return _integral_value(rounded)


def round_to_integer(
    value: HugeNumber,
    kind: str = "int64",
    mode: MidpointRounding = MidpointRounding.TO_EVEN,
) -> int:
    """Round to an integer kind, saturating at its bounds instead of raising."""
    lo, hi = _integer_bounds(kind)
    if value.is_nan():
        raise NotANumberError(f"cannot convert NaN to {kind}")
    if lo is not None and (value.is_negative_infinity() or value <= lo):
        return lo
    if hi is not None and (value.is_positive_infinity() or value >= hi):
        return hi
    if value.is_infinity():
        raise RangeExceededError(value, kind)
    rounded = _integral_value(round_digits(value, 0, mode))
    if lo is not None:
        rounded = max(lo, min(hi, rounded))
    return rounded


def to_float(value: HugeNumber, kind: str = "float64") -> float:
    """Narrow to a floating kind from FLOAT_RANGES (sentinels map to float sentinels)."""
    try:
        limit, code = FLOAT_RANGES[kind]
    except KeyError:
        raise InvalidArgumentError(f"unknown float kind: {kind!r}") from None
    if value.is_nan():
        return float("nan")
    if value.is_infinity():
        return float("-inf") if value.significand < 0 else float("inf")
    if value.is_zero():
        return -0.0 if value.is_negative() else 0.0
    adjusted = value.exponent + _digit_count(value.significand)
    if adjusted < -400:
        # Below every subnormal of every kind.
        return -0.0 if value.is_negative() else 0.0
    if adjusted > 400 or abs(value.to_fraction()) > Fraction(limit):
        raise RangeExceededError(value, kind)
    result = float(value.to_fraction())
    if code != "d":
        result = struct.unpack(code, struct.pack(code, result))[0]
    _dbg(f"to_float: {value} -> {result!r} ({kind})")
    return result


__all__ = [
    "INTEGER_RANGES",
    "FLOAT_RANGES",
    "to_huge",
    "to_fraction",
    "to_decimal",
    "to_integer",
    "round_to_integer",
    "to_float",
]
