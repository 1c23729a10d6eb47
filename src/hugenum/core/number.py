"""
HugeNumber primitive: significand × 10^exponent, optionally ÷ denominator.

- Finite values keep 1..18 significant digits in `significand`; excess digits are
  truncated (never rounded) during normalisation.
- `exponent` is a signed 16-bit power of ten; `denominator` an unsigned 16-bit
  divisor (> 1 only for an exact, reduced fraction such as 1/3).
- Sentinels are encoded in the same three fields so the value stays a plain
  triple: NaN and ±Infinity use reserved out-of-range significands, negative
  zero is a zero significand with a negative exponent.

# Alignment notes:
# - Canonical form keeps the exponent closest to zero: positive exponents are
#   folded into the significand while digit budget remains, trailing zeros are
#   stripped while the exponent is negative, zero is (0, 0, 1).
# - All arithmetic is integer domain. Decimal/Fraction appear only in the
#   conversion bridges and for exact comparison against native numbers.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Tuple

from .constants import (
    SIGNIFICAND_DIGITS,
    MAX_SIGNIFICAND,
    MIN_EXPONENT,
    MAX_EXPONENT,
    DENOMINATOR_MAX,
    POSITIVE_INFINITY_SIGNIFICAND,
    NEGATIVE_INFINITY_SIGNIFICAND,
    NAN_SIGNIFICAND,
)

# Debug printing control
DEBUG_NUMBER = False

def _dbg(msg: str) -> None:
    if DEBUG_NUMBER:
        print(msg)


# ----------------------------
# Integer helpers (centralised)
# ----------------------------

def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def _digit_count(n: int) -> int:
    """Number of decimal digits in |n| (0 for zero); safe for very large ints."""
    n = abs(n)
    if n == 0:
        return 0
    # floor(log10(2) * (bits - 1)) never overshoots the true digit count - 1
    k = ((n.bit_length() - 1) * 1233) >> 12
    while _ten_pow(k + 1) <= n:
        k += 1
    return k + 1


_NAN_TRIPLE = (NAN_SIGNIFICAND, 0, 1)
_POS_INF_TRIPLE = (POSITIVE_INFINITY_SIGNIFICAND, 0, 1)
_NEG_INF_TRIPLE = (NEGATIVE_INFINITY_SIGNIFICAND, 0, 1)
_ZERO_TRIPLE = (0, 0, 1)
_NEG_ZERO_TRIPLE = (0, -1, 1)


def _collapse(m: int, e: int, d: int) -> Tuple[int, int]:
    """Collapse m/d × 10^e into a decimal pair, truncating toward zero.

    The quotient is scaled so that at least D + 1 digits survive; the caller
    normalises (and so truncates) the result.
    """
    if d == 1 or m == 0:
        return m, e
    k = SIGNIFICAND_DIGITS + _digit_count(d)
    q = (abs(m) * _ten_pow(k)) // d
    return (-q if m < 0 else q), e - k


def _normalize(m: int, e: int, d: int = 1) -> Tuple[int, int, int]:
    """Normalise a raw triple to canonical (significand, exponent, denominator).

    - Zero denominator: NaN for a zero significand, signed infinity otherwise
    - Fraction reduced to lowest terms; denominators beyond DENOMINATOR_MAX collapse
    - Significand truncated to SIGNIFICAND_DIGITS digits
    - Exponent overflow saturates to signed infinity; underflow to signed zero
    """
    if d == 0:
        if m == 0:
            return _NAN_TRIPLE
        return _POS_INF_TRIPLE if m > 0 else _NEG_INF_TRIPLE
    if d < 0:
        m, d = -m, -d
    if m == 0:
        return _ZERO_TRIPLE

    negative = m < 0
    m = abs(m)

    if d > 1:
        g = math.gcd(m, d)
        m //= g
        d //= g
        if d > DENOMINATOR_MAX:
            _dbg(f"normalize: denominator {d} out of range -> collapse")
            m, e = _collapse(m, e, d)
            d = 1

    # Drop excess least-significant digits (truncation, not rounding)
    n = _digit_count(m)
    if n > SIGNIFICAND_DIGITS:
        k = n - SIGNIFICAND_DIGITS
        m //= _ten_pow(k)
        e += k
        if d > 1:
            g = math.gcd(m, d)
            m //= g
            d //= g

    # Trailing zeros move into a negative exponent
    while e < 0 and m % 10 == 0:
        m //= 10
        e += 1

    # A positive exponent is folded into the significand while digits remain
    if e > 0:
        k = min(e, SIGNIFICAND_DIGITS - _digit_count(m))
        if k > 0:
            m *= _ten_pow(k)
            e -= k
            if d > 1 and math.gcd(m, d) > 1:
                return _normalize(-m if negative else m, e, d)

    if e > MAX_EXPONENT:
        _dbg(f"normalize: exponent overflow (m={m}, e={e}) -> infinity")
        return _NEG_INF_TRIPLE if negative else _POS_INF_TRIPLE

    if e < MIN_EXPONENT:
        k = MIN_EXPONENT - e
        m = 0 if k > _digit_count(m) else m // _ten_pow(k)
        e = MIN_EXPONENT
        if m == 0:
            _dbg("normalize: exponent underflow -> signed zero")
            return _NEG_ZERO_TRIPLE if negative else _ZERO_TRIPLE
        while e < 0 and m % 10 == 0:
            m //= 10
            e += 1

    return (-m if negative else m), e, d


def _foreign_fraction(other) -> Optional[Tuple[int, Optional[Fraction]]]:
    """Classify a native number as (kind, exact value) for exact comparisons.

    kind: 0 finite, 1 +inf, -1 -inf, 2 NaN. Returns None for unsupported types.
    """
    if isinstance(other, (int, Fraction)):
        return 0, Fraction(other)
    if isinstance(other, float):
        if math.isnan(other):
            return 2, None
        if math.isinf(other):
            return (1 if other > 0 else -1), None
        return 0, Fraction(other)
    if isinstance(other, Decimal):
        if other.is_nan():
            return 2, None
        if other.is_infinite():
            return (1 if other > 0 else -1), None
        return 0, Fraction(other)
    return None


# ----------------------------
# HugeNumber (integer fixed-point with sentinels)
# ----------------------------

@dataclass(frozen=True, eq=False)
class HugeNumber:
    """Extended-range decimal value: (significand / denominator) × 10^exponent.

    Instances are immutable; every operation returns a new value. Build values
    with `from_components` (normalising) unless you already hold a canonical
    triple. Equality, ordering and hashing are by mathematical value, so
    HugeNumber(1, 0, 2) == HugeNumber(5, -1) and both hash alike.
    """
    significand: int
    exponent: int = 0
    denominator: int = 1

    # ------------- constructors -------------

    @classmethod
    def from_components(cls, significand: int, exponent: int = 0, denominator: int = 1) -> "HugeNumber":
        m, e, d = _normalize(significand, exponent, denominator)
        return cls(m, e, d)

    # ------------- accessors -------------

    @property
    def digit_count(self) -> int:
        """Number of significant digits held by a finite significand."""
        if not self.is_finite():
            return 0
        return _digit_count(self.significand)

    # ------------- predicates -------------

    def is_nan(self) -> bool:
        return self.significand == NAN_SIGNIFICAND

    def is_positive_infinity(self) -> bool:
        return MAX_SIGNIFICAND < self.significand != NAN_SIGNIFICAND

    def is_negative_infinity(self) -> bool:
        return self.significand < -MAX_SIGNIFICAND

    def is_infinity(self) -> bool:
        return self.is_positive_infinity() or self.is_negative_infinity()

    def is_finite(self) -> bool:
        return -MAX_SIGNIFICAND <= self.significand <= MAX_SIGNIFICAND

    def is_zero(self) -> bool:
        return self.significand == 0

    def is_negative(self) -> bool:
        """True for negative values, -Infinity and negative zero (never NaN)."""
        if self.significand == 0:
            return self.exponent < 0
        return self.significand < 0

    def is_positive(self) -> bool:
        """True for positive values, +Infinity and positive zero (never NaN)."""
        return not self.is_nan() and not self.is_negative()

    def is_integer(self) -> bool:
        if self.is_zero():
            return True
        return self.is_finite() and self.denominator == 1 and self.exponent >= 0

    def is_even_integer(self) -> bool:
        if not self.is_integer():
            return False
        return self.exponent > 0 or self.significand % 2 == 0

    def is_odd_integer(self) -> bool:
        return self.is_integer() and not self.is_even_integer()

    def is_rational(self) -> bool:
        """Exact fraction or integral value (denominator > 1 or exponent == 0)."""
        if self.is_zero():
            return True
        return self.is_finite() and (self.denominator > 1 or self.exponent == 0)

    def is_not_rational(self) -> bool:
        """Finite decimal value scaled by a non-zero exponent (not cleanly rational)."""
        return self.is_finite() and not self.is_rational()

    def _signum(self) -> int:
        if self.significand == 0:
            return 0
        return -1 if self.significand < 0 else 1

    # ------------- conversions -------------

    def to_decimal(self) -> Decimal:
        """Decimal view of the value, for I/O and display only."""
        return _conversion.to_decimal(self)

    def to_fraction(self) -> Fraction:
        """Exact Fraction of a finite value."""
        return _conversion.to_fraction(self)

    def __int__(self) -> int:
        return _conversion.to_integer(self, "int")

    def __float__(self) -> float:
        return _conversion.to_float(self)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __trunc__(self) -> int:
        return _conversion.to_integer(self, "int", _rounding.MidpointRounding.TO_ZERO)

    def __floor__(self) -> int:
        return _conversion.to_integer(self, "int", _rounding.MidpointRounding.TO_NEGATIVE_INFINITY)

    def __ceil__(self) -> int:
        return _conversion.to_integer(self, "int", _rounding.MidpointRounding.TO_POSITIVE_INFINITY)

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return _conversion.to_integer(self, "int", _rounding.MidpointRounding.TO_EVEN)
        return _rounding.round_digits(self, ndigits)

    def __str__(self) -> str:
        return _fmt.to_str(self)

    # ------------- comparisons -------------

    def _cmp_foreign(self, other) -> Optional[int]:
        # Exact comparison against int/float/Decimal/Fraction.
        kind = _foreign_fraction(other)
        if kind is None:
            return None
        k, q = kind
        if self.is_nan():
            return 0 if k == 2 else -1
        if k == 2:
            return 1
        if self.is_infinity() or k != 0:
            a = 0 if self.is_finite() else self._signum()
            return (a > k) - (a < k)
        if self.is_zero():
            return (0 > q) - (0 < q)
        mine = self.to_fraction()
        return (mine > q) - (mine < q)

    def _cmp(self, other) -> Optional[int]:
        if isinstance(other, HugeNumber):
            return _ordering.compare_to(self, other)
        return self._cmp_foreign(other)

    def __eq__(self, other: object) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        if self.is_nan():
            return False
        return c == 0

    def __lt__(self, other) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other) -> bool:
        c = self._cmp(other)
        if c is None:
            return NotImplemented
        return c >= 0

    def __hash__(self) -> int:
        # Same modular scheme as int/Fraction/Decimal so equal values hash alike.
        if self.is_nan():
            return sys.hash_info.nan
        if self.is_infinity():
            return sys.hash_info.inf if self.significand > 0 else -sys.hash_info.inf
        if self.significand == 0:
            return 0
        modulus = sys.hash_info.modulus
        h = abs(self.significand) % modulus
        h = h * pow(10, self.exponent, modulus) * pow(self.denominator, -1, modulus) % modulus
        result = h if self.significand > 0 else -h
        return -2 if result == -1 else result

    # ------------- arithmetic (delegates to the engine) -------------

    def __neg__(self) -> "HugeNumber":
        return _arithmetic.negate(self)

    def __pos__(self) -> "HugeNumber":
        return self

    def __abs__(self) -> "HugeNumber":
        return _arithmetic.absolute(self)

    def __add__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.add(self, o)

    def __radd__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.add(o, self)

    def __sub__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.subtract(self, o)

    def __rsub__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.subtract(o, self)

    def __mul__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.multiply(self, o)

    def __rmul__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.multiply(o, self)

    def __truediv__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.divide(self, o)

    def __rtruediv__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.divide(o, self)

    def __floordiv__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.div_rem(self, o)[0]

    def __rfloordiv__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.div_rem(o, self)[0]

    def __mod__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.modulo(self, o)

    def __rmod__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.modulo(o, self)

    def __divmod__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.div_rem(self, o)

    def __rdivmod__(self, other):
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return _arithmetic.div_rem(o, self)

    def __pow__(self, other, modulo=None) -> "HugeNumber":
        o = _coerce(other)
        if o is None or modulo is not None:
            return NotImplemented
        from ..functions import power as _power
        return _power.pow(self, o)

    def __rpow__(self, other) -> "HugeNumber":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        from ..functions import power as _power
        return _power.pow(o, self)


def _coerce(other) -> Optional[HugeNumber]:
    """Operand coercion for the operator protocol (None -> NotImplemented)."""
    if isinstance(other, HugeNumber):
        return other
    if isinstance(other, (int, float, Decimal, Fraction)):
        return _conversion.to_huge(other)
    return None


# Engine modules import HugeNumber from here; bind them after the class exists.
from . import arithmetic as _arithmetic  # noqa: E402
from . import conversion as _conversion  # noqa: E402
from . import fmt as _fmt  # noqa: E402
from . import ordering as _ordering  # noqa: E402
from . import rounding as _rounding  # noqa: E402


__all__ = [
    "HugeNumber",
]
