import pytest

from hugenum.core import (
    HALF_PI,
    QUARTER_PI,
    PI,
    NAN,
    POSITIVE_INFINITY,
    NEGATIVE_INFINITY,
    ZERO,
    NEGATIVE_ZERO,
    ONE,
    add,
    negate,
    to_huge,
)
from hugenum.functions import (
    sin,
    cos,
    tan,
    atan,
    asin,
    acos,
    atan2,
    sinh,
    cosh,
    tanh,
    asinh,
    acosh,
    atanh,
)


def _h(x):
    return to_huge(x)


# -----------------------------
# Forward trigonometric functions
# -----------------------------

@pytest.mark.parametrize(
    "fn, x, expected, tol",
    [
        (sin, "1", "0.841470984807896507", "1e-16"),
        (cos, "1", "0.540302305868139717", "1e-16"),
        (sin, "-1", "-0.841470984807896507", "1e-16"),
        (cos, "-1", "0.540302305868139717", "1e-16"),
        (sin, "100", "-0.506365641109758794", "1e-14"),
        (cos, "3", "-0.989992496600445457", "1e-15"),
    ],
)
def test_sin_cos_values(close, fn, x, expected, tol):
    print(f"[trig] {fn.__name__}({x}) -> expect {expected} (tol={tol})")
    got = fn(_h(x))
    print("got ->", got)
    assert close(got, expected, tol)


def test_sin_cos_at_multiples_of_half_pi(close):
    print("[trig] sin(pi/2) ~ 1, cos(pi) = -1, sin(pi) = 0, tan(pi/4) ~ 1")
    assert close(sin(HALF_PI), "1", "1e-16")
    assert cos(PI) == -1
    assert sin(PI).is_zero()
    assert close(tan(QUARTER_PI), "1", "1e-15")
    assert close(cos(HALF_PI), "0", "1e-16")


def test_trig_special_values():
    print("[trig] NaN propagates, infinities give NaN, signed zero passes through sin/tan")
    assert sin(NAN).is_nan()
    assert cos(POSITIVE_INFINITY).is_nan()
    assert tan(NEGATIVE_INFINITY).is_nan()
    assert sin(NEGATIVE_ZERO).is_negative()
    assert tan(NEGATIVE_ZERO).is_negative()
    assert cos(NEGATIVE_ZERO) == 1


# -----------------------------
# Inverse trigonometric functions
# -----------------------------

def test_atan_values(close):
    print("[atan] atan(1) is exactly pi/4; atan(0.5), atan(2), atan(-2)")
    assert atan(ONE) == QUARTER_PI
    assert close(atan(_h("0.5")), "0.463647609000806116", "1e-16")
    assert close(atan(_h(2)), "1.107148717794090503", "1e-16")
    assert close(atan(_h(-2)), "-1.107148717794090503", "1e-16")
    assert atan(POSITIVE_INFINITY) == HALF_PI
    assert atan(NEGATIVE_INFINITY) == negate(HALF_PI)


def test_asin_acos_values(close):
    print("[asin_acos] asin(0.5) ~ pi/6, acos(0.5) ~ pi/3")
    assert close(asin(_h("0.5")), "0.523598775598298873", "1e-15")
    assert close(acos(_h("0.5")), "1.047197551196597746", "1e-15")
    assert close(acos(_h("-0.5")), "2.094395102393195492", "1e-15")
    print("[asin_acos] endpoints are exact; outside [-1, 1] is NaN")
    assert asin(ONE) == HALF_PI
    assert asin(_h(-1)) == negate(HALF_PI)
    assert acos(ONE).is_zero()
    assert acos(_h(-1)) == PI
    assert acos(ZERO) == HALF_PI
    assert asin(_h(2)).is_nan()
    assert acos(_h("-1.5")).is_nan()


@pytest.mark.parametrize(
    "y, x, expected",
    [
        (ONE, ONE, QUARTER_PI),
        (ZERO, _h(-1), PI),
        (NEGATIVE_ZERO, _h(-1), negate(PI)),
        (ONE, ZERO, HALF_PI),
        (_h(-1), ZERO, negate(HALF_PI)),
        (POSITIVE_INFINITY, NEGATIVE_INFINITY, add(HALF_PI, QUARTER_PI)),
        (NEGATIVE_INFINITY, POSITIVE_INFINITY, negate(QUARTER_PI)),
        (ONE, NEGATIVE_INFINITY, PI),
    ],
)
def test_atan2_quadrants_exact(y, x, expected):
    print(f"[atan2] atan2({y}, {x}) -> expect {expected}")
    got = atan2(y, x)
    print("got ->", got)
    assert got == expected


def test_atan2_signed_zeros_and_third_quadrant(close):
    print("[atan2] (+0, +1) -> +0, (-0, +1) -> -0, (-1, -1) ~ -3pi/4")
    assert not atan2(ZERO, ONE).is_negative()
    assert atan2(NEGATIVE_ZERO, ONE).is_negative()
    assert atan2(_h(-1), POSITIVE_INFINITY).is_negative()
    assert close(atan2(_h(-1), _h(-1)), "-2.356194490192344929", "1e-16")
    assert atan2(NAN, ONE).is_nan()


# -----------------------------
# Hyperbolic functions
# -----------------------------

@pytest.mark.parametrize(
    "fn, x, expected",
    [
        (sinh, "1", "1.175201193643801457"),
        (cosh, "1", "1.543080634815243778"),
        (tanh, "1", "0.761594155955764888"),
        (sinh, "-1", "-1.175201193643801457"),
        (tanh, "-0.5", "-0.462117157260009758"),
        (asinh, "1", "0.881373587019543025"),
        (asinh, "-1", "-0.881373587019543025"),
        (acosh, "2", "1.316957896924816709"),
        (atanh, "0.5", "0.549306144334054846"),
    ],
)
def test_hyperbolic_values(close, fn, x, expected):
    print(f"[hyperbolic] {fn.__name__}({x}) -> expect {expected}")
    got = fn(_h(x))
    print("got ->", got)
    assert close(got, expected, "1e-15")


def test_sinh_small_argument_keeps_digits(close):
    print("[sinh] sinh(1e-12) = 1e-12 to 18 digits")
    assert close(sinh(_h("1e-12")), "1e-12", "1e-15", relative=True)


def test_tanh_saturates():
    print("[tanh] |x| > 22 -> exactly +/-1")
    assert tanh(_h(30)) == 1
    assert tanh(_h(-30)) == -1
    assert tanh(POSITIVE_INFINITY) == 1
    assert tanh(NEGATIVE_INFINITY) == -1


def test_hyperbolic_special_values():
    print("[hyperbolic] domain edges: acosh below 1, atanh at and beyond 1")
    assert acosh(_h("0.5")).is_nan()
    assert acosh(ONE).is_zero()
    assert acosh(POSITIVE_INFINITY).is_positive_infinity()
    assert atanh(ONE).is_positive_infinity()
    assert atanh(_h(-1)).is_negative_infinity()
    assert atanh(_h(2)).is_nan()
    assert cosh(NEGATIVE_INFINITY).is_positive_infinity()
    assert sinh(NEGATIVE_INFINITY).is_negative_infinity()
    assert cosh(ZERO) == 1
    assert sinh(NEGATIVE_ZERO).is_negative()
    assert asinh(NAN).is_nan()
