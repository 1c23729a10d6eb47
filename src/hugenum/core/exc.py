"""
Core exception types for hugenum.core.

These are dependency-free and may be imported by all core modules. Arithmetic
itself never raises for undefined or overflowing results (NaN and infinity
carry those); only narrowing conversions and malformed arguments do.
"""

__all__ = [
    "NotANumberError",
    "RangeExceededError",
    "InvalidArgumentError",
]


class NotANumberError(ValueError):
    """Raised when NaN is narrowed to a type that has no NaN (int, Fraction)."""
    pass


class RangeExceededError(OverflowError):
    """Raised when a value lies outside the range of a narrowing target type.

    Attributes
    ----------
    value : Any
        The HugeNumber that failed the range check.
    target : str
        Name of the target kind (e.g. "int32", "float64").
    """

    def __init__(self, value, target):
        super().__init__(f"value {value} is outside the range of {target}")
        self.value = value
        self.target = target


class InvalidArgumentError(ValueError):
    """Raised for malformed digit counts, unknown rounding modes or unparsable input."""
    pass
