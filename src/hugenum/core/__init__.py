"""
HugeNumber Core
===============

Unified exports for the integer-domain HugeNumber engine: representation,
rational reduction, ordering, arithmetic, rounding, conversion and epsilon
utilities. Decimal appears only in the conversion and formatting bridges.
"""

# NOTE:
#   `number` must be imported first: it defines HugeNumber and then binds the
#   engine modules (arithmetic, ordering, rounding, conversion, fmt) that the
#   operator protocol delegates to.

from .number import HugeNumber

# Integer-domain constants
from .constants import (
    SIGNIFICAND_DIGITS,
    MAX_SIGNIFICAND,
    MIN_SIGNIFICAND,
    MIN_EXPONENT,
    MAX_EXPONENT,
    DENOMINATOR_MAX,
    SERIES_ITERATION_LIMIT,
)

# Named values
from .values import (
    NAN,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
    ZERO,
    NEGATIVE_ZERO,
    EPSILON,
    MAX_VALUE,
    MIN_VALUE,
    ONE,
    NEGATIVE_ONE,
    TWO,
    TEN,
    HALF,
    THIRD,
    NEARLY_ZERO,
    E,
    PI,
    TAU,
    HALF_PI,
    QUARTER_PI,
    LN2,
    LN10,
    PHI,
    ROOT2,
    YOCTO,
    ZEPTO,
    ATTO,
    FEMTO,
    PICO,
    NANO,
    MICRO,
    MILLI,
    CENTI,
    DECI,
    DECA,
    HECTO,
    KILO,
    MEGA,
    GIGA,
    TERA,
    PETA,
    EXA,
    ZETTA,
    YOTTA,
)

# Rational reduction
from .rationals import (
    gcd,
    lcm,
    reduce_fraction,
    to_decimal_form,
    to_denominator,
    from_fraction,
)

# Ordering: total order, Max/Min family, Clamp
from .ordering import (
    compare_magnitude,
    compare_to,
    equals,
    maximum,
    minimum,
    max_number,
    min_number,
    max_magnitude,
    min_magnitude,
    clamp,
)

# Arithmetic engine
from .arithmetic import (
    negate,
    absolute,
    copy_sign,
    sign,
    add,
    subtract,
    multiply,
    divide,
    invert,
    square,
    cube,
    fused_multiply_add,
    modulo,
    div_rem,
)

# Rounding
from .rounding import (
    MidpointRounding,
    round_digits,
    truncate,
    floor,
    ceiling,
)

# Conversion capability table
from .conversion import (
    INTEGER_RANGES,
    FLOAT_RANGES,
    to_huge,
    to_fraction,
    to_decimal,
    to_integer,
    round_to_integer,
    to_float,
)

# Epsilon / ULP utilities
from .epsilon import (
    get_epsilon,
    increment,
    decrement,
    bit_increment,
    bit_decrement,
    is_nearly_equal,
    is_nearly_zero,
)

# Formatting helpers (presentation only)
from .fmt import (
    to_str,
    fmt_sci,
    describe,
)

# Core exceptions
from .exc import NotANumberError, RangeExceededError, InvalidArgumentError

__all__ = [
    # number
    "HugeNumber",
    # constants
    "SIGNIFICAND_DIGITS",
    "MAX_SIGNIFICAND",
    "MIN_SIGNIFICAND",
    "MIN_EXPONENT",
    "MAX_EXPONENT",
    "DENOMINATOR_MAX",
    "SERIES_ITERATION_LIMIT",
    # values
    "NAN",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "ZERO",
    "NEGATIVE_ZERO",
    "EPSILON",
    "MAX_VALUE",
    "MIN_VALUE",
    "ONE",
    "NEGATIVE_ONE",
    "TWO",
    "TEN",
    "HALF",
    "THIRD",
    "NEARLY_ZERO",
    "E",
    "PI",
    "TAU",
    "HALF_PI",
    "QUARTER_PI",
    "LN2",
    "LN10",
    "PHI",
    "ROOT2",
    "YOCTO",
    "ZEPTO",
    "ATTO",
    "FEMTO",
    "PICO",
    "NANO",
    "MICRO",
    "MILLI",
    "CENTI",
    "DECI",
    "DECA",
    "HECTO",
    "KILO",
    "MEGA",
    "GIGA",
    "TERA",
    "PETA",
    "EXA",
    "ZETTA",
    "YOTTA",
    # rationals
    "gcd",
    "lcm",
    "reduce_fraction",
    "to_decimal_form",
    "to_denominator",
    "from_fraction",
    # ordering
    "compare_magnitude",
    "compare_to",
    "equals",
    "maximum",
    "minimum",
    "max_number",
    "min_number",
    "max_magnitude",
    "min_magnitude",
    "clamp",
    # arithmetic
    "negate",
    "absolute",
    "copy_sign",
    "sign",
    "add",
    "subtract",
    "multiply",
    "divide",
    "invert",
    "square",
    "cube",
    "fused_multiply_add",
    "modulo",
    "div_rem",
    # rounding
    "MidpointRounding",
    "round_digits",
    "truncate",
    "floor",
    "ceiling",
    # conversion
    "INTEGER_RANGES",
    "FLOAT_RANGES",
    "to_huge",
    "to_fraction",
    "to_decimal",
    "to_integer",
    "round_to_integer",
    "to_float",
    # epsilon
    "get_epsilon",
    "increment",
    "decrement",
    "bit_increment",
    "bit_decrement",
    "is_nearly_equal",
    "is_nearly_zero",
    # fmt
    "to_str",
    "fmt_sci",
    "describe",
    # exceptions
    "NotANumberError",
    "RangeExceededError",
    "InvalidArgumentError",
]
