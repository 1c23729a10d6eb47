"""
Formatting helpers (presentation only).

Reads nothing but the three fields and the classification predicates; no
arithmetic happens here. Decimal is used only to lay out digits.
"""

from typing import Dict

from .conversion import to_decimal
from .number import HugeNumber

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


#: Adjusted exponents within this window print in plain positional notation.
PLAIN_NOTATION_RANGE = (-6, 20)


def to_str(x: HugeNumber) -> str:
    """Human-readable text: 'NaN', 'Infinity', '1/3', '1/3E+5', '123.45', '1E+300'."""
    if x.is_nan():
        return "NaN"
    if x.is_positive_infinity():
        return "Infinity"
    if x.is_negative_infinity():
        return "-Infinity"
    if x.denominator > 1:
        text = f"{x.significand}/{x.denominator}"
        return text if x.exponent == 0 else f"{text}E{x.exponent:+d}"
    d = to_decimal(x)
    lo, hi = PLAIN_NOTATION_RANGE
    if x.is_zero() or lo <= d.adjusted() <= hi:
        return format(d, "f")
    return str(d)


def fmt_sci(x: HugeNumber, places: int = 17) -> str:
    """Scientific notation with fixed fractional digits, stable for logs and tests.

      1           -> '1.00000000000000000E+0'
      1/3         -> '3.33333333333333333E-1'
      1E-30000    -> '1.00000000000000000E-30000'
    """
    if not x.is_finite():
        return to_str(x)
    d = to_decimal(x)
    _dbg(f"fmt_sci: m={x.significand}, e={x.exponent}, d={x.denominator} -> {d!r}")
    return format(d, f".{places}E")


def describe(x: HugeNumber) -> Dict[str, object]:
    """Raw fields and classification for presentation layers."""
    return {
        "significand": x.significand,
        "exponent": x.exponent,
        "denominator": x.denominator,
        "negative": x.is_negative(),
        "nan": x.is_nan(),
        "infinite": x.is_infinity(),
        "decimal": to_decimal(x) if x.is_finite() else None,
    }


__all__ = [
    "PLAIN_NOTATION_RANGE",
    "to_str",
    "fmt_sci",
    "describe",
]
