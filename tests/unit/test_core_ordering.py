import pytest

from hugenum.core import (
    HugeNumber,
    NAN,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
    ZERO,
    NEGATIVE_ZERO,
    ONE,
    NEGATIVE_ONE,
    MAX_VALUE,
    MIN_VALUE,
    EPSILON,
    InvalidArgumentError,
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


def _c(m, e=0, d=1) -> HugeNumber:
    return HugeNumber.from_components(m, e, d)


# -----------------------------
# CompareTo / Equals
# -----------------------------

def test_compare_to_nan_contract():
    print("[compare_nan] CompareTo(NaN, NaN) == 0 while Equals(NaN, NaN) is False")
    assert compare_to(NAN, NAN) == 0
    assert equals(NAN, NAN) is False
    print("NaN sorts below every other value, -Infinity included")
    assert compare_to(NAN, NEGATIVE_INFINITY) == -1
    assert compare_to(NEGATIVE_INFINITY, NAN) == 1


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (_c(1), _c(2), -1),
        (_c(2), _c(1), 1),
        (_c(-2), _c(1), -1),
        (_c(-2), _c(-1), -1),
        (ZERO, NEGATIVE_ZERO, 0),
        (_c(1, 0, 3), _c(333333333333333333, -18), 1),
        (_c(1, 0, 2), _c(5, -1), 0),
        (_c(99, 0), _c(1, 2), -1),
        (_c(1, 300), _c(999, 296), 1),
        (MAX_VALUE, POSITIVE_INFINITY, -1),
        (MIN_VALUE, NEGATIVE_INFINITY, 1),
        (POSITIVE_INFINITY, POSITIVE_INFINITY, 0),
        (EPSILON, ZERO, 1),
        (NEGATIVE_ZERO, _c(-1, -30000), 1),
    ],
)
def test_compare_to_total_order(x, y, expected):
    print(f"[compare_to] {x} vs {y} -> expect {expected}")
    assert compare_to(x, y) == expected
    assert compare_to(y, x) == -expected
    assert equals(x, y) is (expected == 0)


def test_compare_magnitude_ignores_sign():
    print("[compare_magnitude] |-3| > |2|, |1/3| < |0.34|, |0| == |-0|")
    assert compare_magnitude(_c(-3), _c(2)) == 1
    assert compare_magnitude(_c(1, 0, 3), _c(34, -2)) == -1
    assert compare_magnitude(ZERO, NEGATIVE_ZERO) == 0
    assert compare_magnitude(ZERO, _c(-1, -100)) == -1


# -----------------------------
# Max / Min family
# -----------------------------

def test_maximum_minimum_signed_zero_and_nan():
    print("[max_min] +0 wins maximum against -0, -0 wins minimum; NaN propagates")
    assert not maximum(NEGATIVE_ZERO, ZERO).is_negative()
    assert not maximum(ZERO, NEGATIVE_ZERO).is_negative()
    assert minimum(ZERO, NEGATIVE_ZERO).is_negative()
    assert minimum(NEGATIVE_ZERO, ZERO).is_negative()
    assert maximum(NAN, ONE).is_nan()
    assert minimum(ONE, NAN).is_nan()
    assert maximum(_c(2), _c(3)) == 3
    assert minimum(_c(2), _c(3)) == 2


def test_max_min_number_ignore_nan():
    print("[max_min_number] a NaN operand is ignored in favour of the other")
    assert max_number(NAN, ONE) == 1
    assert min_number(ONE, NAN) == 1
    assert max_number(NAN, NAN).is_nan()
    assert max_number(_c(-5), _c(4)) == 4


def test_max_min_magnitude():
    print("[magnitude] max_magnitude(-5, 4) = -5, min_magnitude(-5, 4) = 4, ties like maximum/minimum")
    assert max_magnitude(_c(-5), _c(4)) == -5
    assert min_magnitude(_c(-5), _c(4)) == 4
    assert max_magnitude(NEGATIVE_ONE, ONE) == 1
    assert min_magnitude(NEGATIVE_ONE, ONE) == -1
    assert max_magnitude(NEGATIVE_INFINITY, MAX_VALUE).is_negative_infinity()
    assert min_magnitude(_c(3), NAN).is_nan()


# -----------------------------
# Clamp
# -----------------------------

@pytest.mark.parametrize(
    "value, expected",
    [
        (_c(5), 5),
        (_c(-5), 0),
        (_c(50), 10),
        (POSITIVE_INFINITY, 10),
    ],
)
def test_clamp(value, expected):
    print(f"[clamp] {value} into [0, 10] -> expect {expected}")
    assert clamp(value, ZERO, _c(10)) == expected


def test_clamp_nan_and_inverted_bounds():
    print("[clamp] NaN passes through; lo > hi raises InvalidArgumentError")
    assert clamp(NAN, ZERO, ONE).is_nan()
    with pytest.raises(InvalidArgumentError):
        clamp(ONE, _c(2), ONE)
