from decimal import Decimal

import pytest

from hugenum.core import (
    HugeNumber,
    NAN,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
    ONE,
    to_str,
    fmt_sci,
    describe,
)


def _c(m, e=0, d=1) -> HugeNumber:
    return HugeNumber.from_components(m, e, d)


# -----------------------------
# to_str
# -----------------------------

@pytest.mark.parametrize(
    "value, text",
    [
        (_c(7, -3, 3), "7/3E-3"),
        (_c(-2, 0, 3), "-2/3"),
        (_c(5, -7), "5E-7"),
        (_c(5, -6), "0.000005"),
        (_c(1, 21), "1.00000000000000000E+21"),
        (_c(-15, -1), "-1.5"),
    ],
)
def test_to_str(value, text):
    print(f"[to_str] expect {text!r}")
    got = to_str(value)
    print("got ->", got)
    assert got == text


# -----------------------------
# fmt_sci stability
# -----------------------------

def test_fmt_sci_scientific_formatting():
    print("[fmt_sci] check scientific formatting stability")
    s1 = fmt_sci(ONE)
    s2 = fmt_sci(_c(1, 0, 3))
    s3 = fmt_sci(_c(1, -30000))
    print("fmt_sci(1) ->", s1)
    print("fmt_sci(1/3) ->", s2)
    print("fmt_sci(1E-30000) ->", s3)
    assert s1 == "1.00000000000000000E+0"
    assert s2 == "3.33333333333333333E-1"
    assert s3 == "1.00000000000000000E-30000"


def test_fmt_sci_places_and_sentinels():
    print("[fmt_sci] places=3 rounds for display only; sentinels print by name")
    assert fmt_sci(_c(123456), places=3) == "1.235E+5"
    assert fmt_sci(NAN) == "NaN"
    assert fmt_sci(POSITIVE_INFINITY) == "Infinity"
    assert fmt_sci(NEGATIVE_INFINITY) == "-Infinity"


# -----------------------------
# describe
# -----------------------------

def test_describe_fields():
    print("[describe] 1/3 -> raw fields, classification and decimal view")
    info = describe(_c(1, 0, 3))
    print("describe(1/3) ->", info)
    assert info["significand"] == 1
    assert info["exponent"] == 0
    assert info["denominator"] == 3
    assert info["negative"] is False
    assert info["nan"] is False
    assert info["infinite"] is False
    assert info["decimal"] == Decimal("0.333333333333333333")


def test_describe_sentinels_have_no_decimal():
    print("[describe] NaN and -inf carry no decimal view")
    assert describe(NAN)["decimal"] is None
    info = describe(NEGATIVE_INFINITY)
    assert info["infinite"] is True and info["negative"] is True
