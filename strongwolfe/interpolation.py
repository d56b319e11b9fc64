"""Polynomial interpolation minimizers used to pick zoom trial steps.

All arithmetic runs on ``np.float64`` with floating-point warnings silenced,
so degenerate inputs (coincident abscissas, vanishing curvature, a negative
cubic discriminant) produce ``inf`` or ``nan`` instead of raising. The zoom
phase replaces non-finite trials with bisection.
"""

from __future__ import annotations

import numpy as np


def quadratic_minimum(
    a0: float, a1: float, f0: float, f1: float, d0: float
) -> float:
    """Minimizer of the quadratic matching ``f(a0)``, ``f'(a0)`` and ``f(a1)``.

    With ``h = a1 - a0`` the model is ``f0 + d0 (a - a0) + c (a - a0)^2`` where
    ``c = (f1 - f0 - d0 h) / h^2``, minimized at ``a0 - d0 / (2 c)``.
    """
    a0, a1, f0, f1, d0 = map(np.float64, (a0, a1, f0, f1, d0))
    with np.errstate(all="ignore"):
        h = a1 - a0
        denom = 2.0 * (f1 - f0 - d0 * h)
        return float(a0 - d0 * h * h / denom)


def three_point_minimum(
    a: float, b: float, c: float, fa: float, fb: float, fc: float
) -> float:
    """Vertex of the parabola through ``(a, fa)``, ``(b, fb)`` and ``(c, fc)``."""
    a, b, c, fa, fb, fc = map(np.float64, (a, b, c, fa, fb, fc))
    with np.errstate(all="ignore"):
        num = (b - a) ** 2 * (fb - fc) - (b - c) ** 2 * (fb - fa)
        den = (b - a) * (fb - fc) - (b - c) * (fb - fa)
        return float(b - 0.5 * num / den)


def secant_minimum(a0: float, a1: float, d0: float, d1: float) -> float:
    """Root of the line through ``(a0, d0)`` and ``(a1, d1)`` in slope space."""
    a0, a1, d0, d1 = map(np.float64, (a0, a1, d0, d1))
    with np.errstate(all="ignore"):
        return float(a1 - d1 * (a1 - a0) / (d1 - d0))


def cubic_minimum(
    a0: float, a1: float, f0: float, f1: float, d0: float, d1: float
) -> float:
    """Local minimizer of the Hermite cubic through two points.

    Uses Nocedal & Wright (3.59)::

        e1 = d0 + d1 - 3 (f0 - f1) / (a0 - a1)
        e2 = sign(a1 - a0) sqrt(e1^2 - d0 d1)
        a  = a1 - (a1 - a0) (d1 + e2 - e1) / (d1 - d0 + 2 e2)

    The formula is symmetric in the order of the two points.
    """
    a0, a1, f0, f1, d0, d1 = map(np.float64, (a0, a1, f0, f1, d0, d1))
    with np.errstate(all="ignore"):
        e1 = d0 + d1 - 3.0 * (f0 - f1) / (a0 - a1)
        e2 = np.sign(a1 - a0) * np.sqrt(e1 * e1 - d0 * d1)
        return float(a1 - (a1 - a0) * (d1 + e2 - e1) / (d1 - d0 + 2.0 * e2))


__all__ = [
    "cubic_minimum",
    "quadratic_minimum",
    "secant_minimum",
    "three_point_minimum",
]
