"""Case dispatch of the zoom trial-step selector.

Bracket data is sampled from f(a) = a^3 - 3a, whose Hermite cubic interpolant
is exact, so the cubic step is always the local minimizer a = 1.
"""

import math

import pytest

from strongwolfe.interpolation import secant_minimum
from strongwolfe.line_search import trial_value


def f(a: float) -> float:
    return a**3 - 3.0 * a


def df(a: float) -> float:
    return 3.0 * a**2 - 3.0


def bracket(lo: float, hi: float) -> tuple:
    return lo, hi, f(lo), f(hi), df(lo), df(hi)


def test_higher_value_at_hi_averages_cubic_and_quadratic():
    # cubic -> 1.0, quadratic -> 0.875; the cubic is not closer to lo.
    assert trial_value(*bracket(0.5, 2.0)) == pytest.approx(0.9375, abs=1e-12)


def test_higher_value_at_hi_prefers_closer_cubic():
    # cubic -> 1.0, quadratic -> 0.875; the cubic is closer to lo = 1.5.
    assert trial_value(*bracket(1.5, 0.0)) == pytest.approx(1.0, abs=1e-12)


def test_opposite_slopes_prefer_cubic_when_not_farther_from_hi():
    # cubic -> 1.0 (0.5 from hi), secant -> 2/3 (5/6 from hi).
    assert trial_value(*bracket(0.0, 1.5)) == pytest.approx(1.0, abs=1e-12)


def test_opposite_slopes_symmetric_bracket():
    alpha = trial_value(0.0, 2.0, 1.0, 1.0, -2.0, 2.0)
    assert alpha == pytest.approx(1.0, abs=1e-12)


def test_flatter_hi_slope_uses_secant():
    # Parabola (a - 2)^2 sampled at 0 and 1: same-sign slopes, |d_hi| < |d_lo|.
    alpha = trial_value(0.0, 1.0, 4.0, 1.0, -4.0, -2.0)
    assert alpha == pytest.approx(2.0, abs=1e-12)


def test_steeper_hi_slope_uses_cubic_anchored_at_hi():
    args = bracket(-0.8, -0.2)
    alpha = trial_value(*args)
    assert alpha == pytest.approx(1.0, abs=1e-9)
    lo, hi, _, _, d_lo, d_hi = args
    assert secant_minimum(lo, hi, d_lo, d_hi) == pytest.approx(-1.16, abs=1e-9)


def test_trial_value_does_not_raise_on_degenerate_bracket():
    alpha = trial_value(1.0, 1.0, 0.0, 0.0, -1.0, -1.0)
    assert not math.isfinite(alpha)


def test_opposite_slopes_use_secant_when_cubic_is_farther_from_hi():
    # cubic -> ~0.419, secant -> 100/101, which lies closer to hi = 1.
    alpha = trial_value(0.0, 1.0, 0.0, -0.1, -1.0, 0.01)
    assert alpha == pytest.approx(100.0 / 101.0, abs=1e-12)
