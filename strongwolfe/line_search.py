"""Strong Wolfe line search with safeguarded interpolation.

The search runs in two phases following Nocedal & Wright (Algorithms 3.5 and
3.6). The bracketing phase extrapolates trial steps until it either accepts a
step or detects an interval containing a strong Wolfe point. The zoom phase
then shrinks that interval using cubic, quadratic and secant trial steps
chosen as in Moré & Thuente, falling back to bisection whenever interpolation
stagnates or degenerates.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np

from .config import LineSearchConfig, LineSearchConfigBuilder
from .core import (
    DELTA_MAX,
    MAX_UPDATE_ITERATIONS,
    STAGNATION_RATIO,
    STAGNATION_TRIALS,
    LineSearchResult,
    ScalarObjective,
    Status,
    curvature_condition,
    sufficient_decrease,
)
from .interpolation import cubic_minimum, quadratic_minimum, secant_minimum
from .logging import get_logger
from .objectives import RayObjective

logger = get_logger(__name__)

_Outcome = tuple[float, Status, Optional[float], Optional[float]]


def trial_value(
    alpha_lo: float,
    alpha_hi: float,
    f_lo: float,
    f_hi: float,
    d_lo: float,
    d_hi: float,
) -> float:
    """
    Choose the next zoom trial from the bracket endpoints.

    Never evaluates the objective. The four cases are tried in order:

    1. ``f_hi > f_lo``: the cubic step if it is closer to ``alpha_lo`` than
       the quadratic step, otherwise the midpoint of the two.
    2. Slopes of opposite sign: the cubic step, unless it lies farther from
       ``alpha_hi`` than the secant step does.
    3. ``|d_hi| <= |d_lo|``: the secant step.
    4. Otherwise the cubic step anchored at ``alpha_hi``.
    """
    if f_hi > f_lo:
        alpha_c = cubic_minimum(alpha_lo, alpha_hi, f_lo, f_hi, d_lo, d_hi)
        alpha_q = quadratic_minimum(alpha_lo, alpha_hi, f_lo, f_hi, d_lo)
        if abs(alpha_c - alpha_lo) < abs(alpha_q - alpha_lo):
            return alpha_c
        return 0.5 * (alpha_q + alpha_c)
    if d_lo * d_hi < 0:
        alpha_c = cubic_minimum(alpha_lo, alpha_hi, f_lo, f_hi, d_lo, d_hi)
        alpha_s = secant_minimum(alpha_lo, alpha_hi, d_lo, d_hi)
        if abs(alpha_c - alpha_hi) > abs(alpha_s - alpha_hi):
            return alpha_s
        return alpha_c
    if abs(d_hi) <= abs(d_lo):
        return secant_minimum(alpha_lo, alpha_hi, d_lo, d_hi)
    return cubic_minimum(alpha_hi, alpha_lo, f_hi, f_lo, d_hi, d_lo)


def _relative_shrinkage(initial: float, current: float) -> float:
    if initial > 0:
        return abs((current - initial) / initial)
    return math.inf


def _zoom(
    phi: Callable[[float], float],
    dphi: Callable[[float], float],
    config: LineSearchConfig,
    alpha_lo: float,
    alpha_hi: float,
    f_lo: float,
    f_hi: float,
    d_lo: float,
    d_hi: float,
) -> _Outcome:
    """Zoom stage enforcing strong Wolfe conditions on a bracket."""
    f0, slope0 = config.f0, config.slope0
    alpha_j = 0.0
    f_j: Optional[float] = None
    d_j = 1.0
    interval_length = 0.0
    trials = 0

    k = 1
    while k < MAX_UPDATE_ITERATIONS and abs(d_j) > config.gradient_tolerance:
        width = abs(alpha_hi - alpha_lo)
        if trials == 0:
            interval_length = width
        if (
            trials > STAGNATION_TRIALS
            and _relative_shrinkage(interval_length, width) < STAGNATION_RATIO
        ):
            alpha_j = 0.5 * abs(alpha_hi + alpha_lo)
            trials = 0
            logger.debug("Bracket stagnated at width %.3e, bisecting.", width)
        else:
            alpha_j = trial_value(alpha_lo, alpha_hi, f_lo, f_hi, d_lo, d_hi)
            trials += 1
            if not np.isfinite(alpha_j) or alpha_j > config.alpha_max:
                logger.debug("Interpolation produced %r, bisecting.", alpha_j)
                alpha_j = 0.5 * abs(alpha_hi + alpha_lo)
        if alpha_j < config.alpha_min:
            logger.debug("Trial %.3e below floor, returning alpha_min.", alpha_j)
            return config.alpha_min, Status.ALPHA_MIN, None, None

        f_j = phi(alpha_j)
        d_j = dphi(alpha_j)
        if not sufficient_decrease(f_j, alpha_j, f0, slope0, config.c1) or f_j >= f_lo:
            alpha_hi, f_hi, d_hi = alpha_j, f_j, d_j
        else:
            if curvature_condition(d_j, slope0, config.c2):
                return alpha_j, Status.CONVERGED, f_j, d_j
            if d_j * (alpha_hi - alpha_lo) >= 0:
                alpha_hi, f_hi, d_hi = alpha_lo, f_lo, d_lo
            alpha_lo, f_lo, d_lo = alpha_j, f_j, d_j
        k += 1

    if abs(d_j) <= config.gradient_tolerance:
        return alpha_j, Status.STATIONARY, f_j, d_j
    logger.info("Zoom exhausted %d iterations at alpha=%.6g.", MAX_UPDATE_ITERATIONS, alpha_j)
    return alpha_j, Status.MAX_ITER, f_j, d_j


class StrongWolfeLineSearch:
    """
    Line search locating a step that satisfies the strong Wolfe conditions.

    A configured instance holds no per-search state, so :meth:`search` may be
    called repeatedly and yields identical results for a pure objective.

    Example:
        >>> from strongwolfe import FunctionObjective, LineSearchConfig
        >>> objective = FunctionObjective(lambda a: a * a - 2 * a, lambda a: 2 * a - 2)
        >>> config = LineSearchConfig.builder(objective, 0.0, -2.0).c2(0.9).build()
        >>> StrongWolfeLineSearch(config).search()
        1.0
    """

    def __init__(self, config: LineSearchConfig) -> None:
        self.config = config

    @staticmethod
    def builder(
        objective: ScalarObjective, f0: float, slope0: float
    ) -> LineSearchConfigBuilder:
        return LineSearchConfigBuilder(objective, f0, slope0)

    def search(self) -> float:
        """Return a step length, satisfying the strong Wolfe conditions unless
        the iteration budget ran out."""
        return self.search_result().alpha

    def search_result(self) -> LineSearchResult:
        """Run the search and report the step together with its exit status."""
        cfg = self.config
        f0, slope0 = cfg.f0, cfg.slope0
        nfev = 0

        def phi(alpha: float) -> float:
            nonlocal nfev
            nfev += 1
            return float(cfg.objective.value(alpha))

        def dphi(alpha: float) -> float:
            return float(cfg.objective.slope(alpha))

        alpha_old = 0.0
        alpha_t, f_t, d_t = 0.0, f0, slope0
        alpha_new = cfg.alpha0
        outcome: _Outcome

        i = 1
        while i < MAX_UPDATE_ITERATIONS:
            f_new = phi(alpha_new)
            while math.isinf(f_new) and i < MAX_UPDATE_ITERATIONS:
                logger.debug("Objective infinite at alpha=%.6g, halving.", alpha_new)
                alpha_new /= 2.0
                f_new = phi(alpha_new)
                i += 1
            d_new = dphi(alpha_new)

            if not sufficient_decrease(f_new, alpha_new, f0, slope0, cfg.c1) or (
                i > 1 and f_new >= f_t
            ):
                logger.debug("Bracket [%.6g, %.6g] found, zooming.", alpha_t, alpha_new)
                outcome = _zoom(phi, dphi, cfg, alpha_t, alpha_new, f_t, f_new, d_t, d_new)
                break
            if curvature_condition(d_new, slope0, cfg.c2):
                outcome = (alpha_new, Status.CONVERGED, f_new, d_new)
                break
            if d_new >= 0:
                logger.debug("Overshot minimum at alpha=%.6g, zooming back.", alpha_new)
                outcome = _zoom(phi, dphi, cfg, alpha_new, alpha_t, f_new, f_t, d_new, d_t)
                break

            alpha_old = alpha_t
            alpha_t, f_t, d_t = alpha_new, f_new, d_new
            alpha_new = min(alpha_t + DELTA_MAX * (alpha_t - alpha_old), cfg.alpha_max)
            i += 1
        else:
            logger.info(
                "Bracketing exhausted %d iterations at alpha=%.6g.",
                MAX_UPDATE_ITERATIONS,
                alpha_new,
            )
            outcome = (alpha_new, Status.MAX_ITER, None, None)

        alpha, status, value, slope = outcome
        if alpha < cfg.alpha_min:
            alpha, status, value, slope = cfg.alpha_min, Status.ALPHA_MIN, None, None
        return LineSearchResult(
            alpha=alpha, status=status, evaluations=nfev, value=value, slope=slope
        )


def wolfe_line_search(
    f: Callable[[np.ndarray], float],
    grad: Callable[[np.ndarray], np.ndarray],
    x: np.ndarray,
    p: np.ndarray,
    alpha0: float = 1.0,
    c1: float = 1e-3,
    c2: float = 0.5,
    alpha_max: float = 1000.0,
) -> tuple[float, int]:
    """Perform a strong Wolfe line search from ``x`` along ``p``.

    Returns:
        The step length and the number of objective evaluations, counting the
        evaluation at ``x``.
    """
    objective = RayObjective(f, grad, x, p)
    f0, slope0 = objective.initial_values()
    config = LineSearchConfig(
        objective=objective,
        f0=f0,
        slope0=slope0,
        c1=c1,
        c2=c2,
        alpha0=alpha0,
        alpha_max=alpha_max,
    )
    result = StrongWolfeLineSearch(config).search_result()
    return result.alpha, result.evaluations + 1


__all__ = ["StrongWolfeLineSearch", "trial_value", "wolfe_line_search"]
