import math

import numpy as np
import pytest

from strongwolfe.interpolation import (
    cubic_minimum,
    quadratic_minimum,
    secant_minimum,
    three_point_minimum,
)


def parabola(a: float) -> float:
    return (a - 2.0) ** 2


def parabola_slope(a: float) -> float:
    return 2.0 * (a - 2.0)


def cubic(a: float) -> float:
    return a**3 - 3.0 * a


def cubic_slope(a: float) -> float:
    return 3.0 * a**2 - 3.0


def test_three_point_minimum_recovers_parabola_vertex():
    alpha = three_point_minimum(0.0, 1.0, 3.0, parabola(0.0), parabola(1.0), parabola(3.0))
    assert alpha == pytest.approx(2.0, abs=1e-9)


def test_quadratic_minimum_from_value_and_slope():
    alpha = quadratic_minimum(0.0, 3.0, parabola(0.0), parabola(3.0), parabola_slope(0.0))
    assert alpha == pytest.approx(2.0, abs=1e-9)


def test_quadratic_minimum_with_reversed_points():
    alpha = quadratic_minimum(3.0, 0.0, parabola(3.0), parabola(0.0), parabola_slope(3.0))
    assert alpha == pytest.approx(2.0, abs=1e-9)


def test_secant_minimum_is_root_of_linear_slope():
    alpha = secant_minimum(0.0, 3.0, parabola_slope(0.0), parabola_slope(3.0))
    assert alpha == pytest.approx(2.0, abs=1e-9)


def test_cubic_minimum_exact_for_parabola():
    alpha = cubic_minimum(
        0.0, 3.0, parabola(0.0), parabola(3.0), parabola_slope(0.0), parabola_slope(3.0)
    )
    assert alpha == pytest.approx(2.0, abs=1e-9)


def test_cubic_minimum_exact_for_cubic():
    alpha = cubic_minimum(0.0, 2.0, cubic(0.0), cubic(2.0), cubic_slope(0.0), cubic_slope(2.0))
    assert alpha == pytest.approx(1.0, abs=1e-9)


def test_cubic_minimum_is_symmetric_in_point_order():
    forward = cubic_minimum(0.5, 2.0, cubic(0.5), cubic(2.0), cubic_slope(0.5), cubic_slope(2.0))
    backward = cubic_minimum(2.0, 0.5, cubic(2.0), cubic(0.5), cubic_slope(2.0), cubic_slope(0.5))
    assert forward == pytest.approx(1.0, abs=1e-9)
    assert backward == pytest.approx(forward, abs=1e-12)


def test_degenerate_inputs_do_not_raise():
    assert not math.isfinite(quadratic_minimum(1.0, 1.0, 2.0, 2.0, -1.0))
    assert not math.isfinite(secant_minimum(0.0, 1.0, -1.0, -1.0))
    assert not math.isfinite(cubic_minimum(1.0, 1.0, 0.0, 0.0, -1.0, 1.0))
    assert not math.isfinite(three_point_minimum(0.0, 1.0, 2.0, 1.0, 1.0, 1.0))


def test_cubic_minimum_negative_discriminant_is_nan():
    # e1 vanishes while d0 * d1 > 0, so the square root has a negative argument.
    assert np.isnan(cubic_minimum(0.0, 1.0, 0.0, 2.0 / 3.0, 1.0, 1.0))


def test_helpers_return_python_floats():
    assert type(secant_minimum(0.0, 3.0, -4.0, 2.0)) is float
    assert type(cubic_minimum(0.0, 2.0, 0.0, 2.0, -3.0, 9.0)) is float
