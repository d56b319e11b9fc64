"""Core interfaces shared across the line-search components.

Constants follow the Moré–Thuente style strong Wolfe search: a shared budget
of ``MAX_UPDATE_ITERATIONS`` per phase, extrapolation by ``DELTA_MAX`` times
the previous increment, and the stagnation safeguard that switches the zoom
phase to bisection when interpolation stops shrinking the bracket.

References:
    - Nocedal & Wright, *Numerical Optimization* (2006), Algorithms 3.5 and 3.6
    - Moré & Thuente, *Line search algorithms with guaranteed sufficient
      decrease* (1994)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, runtime_checkable

MAX_UPDATE_ITERATIONS = 40
DELTA_MAX = 4.0
ALPHA_MIN = 5e-3
GRADIENT_TOLERANCE = 1e-8

# Zoom falls back to bisection when the bracket has shrunk by less than this
# fraction over more than STAGNATION_TRIALS interpolation steps.
STAGNATION_RATIO = 0.667
STAGNATION_TRIALS = 2

ScalarFunction = Callable[[float], float]


@runtime_checkable
class ScalarObjective(Protocol):
    """Objective restricted to the search ray ``x0 + alpha * d``."""

    def value(self, alpha: float) -> float:
        ...

    def slope(self, alpha: float) -> float:
        ...


class InvalidConfiguration(ValueError):
    """Raised when a line-search configuration violates its constraints.

    Attributes:
        parameter: Name of the offending parameter.
        constraint: Human-readable constraint the parameter must satisfy.
        value: The rejected value.
    """

    def __init__(self, parameter: str, constraint: str, value: object = None) -> None:
        self.parameter = parameter
        self.constraint = constraint
        self.value = value
        super().__init__(f"{parameter} must satisfy {constraint}, got {value!r}.")


class Status(Enum):
    """Exit status of a line search."""

    CONVERGED = "converged"
    STATIONARY = "stationary"
    ALPHA_MIN = "alpha_min"
    MAX_ITER = "max_iter"


@dataclass(frozen=True)
class LineSearchResult:
    """
    Outcome of a single line search.

    Only ``Status.CONVERGED`` guarantees that the strong Wolfe conditions hold
    at ``alpha``; every other status is a best-effort step that callers should
    verify before trusting.

    Attributes:
        alpha: Returned step length.
        status: Enumeration describing how the search terminated.
        evaluations: Number of objective value evaluations performed.
        value: Objective value at ``alpha`` when it was evaluated.
        slope: Directional derivative at ``alpha`` when it was evaluated.
    """

    alpha: float
    status: Status
    evaluations: int
    value: Optional[float] = None
    slope: Optional[float] = None

    @property
    def converged(self) -> bool:
        return self.status is Status.CONVERGED


def sufficient_decrease(
    f_alpha: float, alpha: float, f0: float, slope0: float, c1: float
) -> bool:
    """Return True if the Armijo condition ``f(a) <= f0 + c1 a f'(0)`` holds."""
    return f_alpha <= f0 + c1 * alpha * slope0


def curvature_condition(d_alpha: float, slope0: float, c2: float) -> bool:
    """Return True if the strong curvature condition ``|f'(a)| <= -c2 f'(0)`` holds."""
    return abs(d_alpha) <= -c2 * slope0


def satisfies_strong_wolfe(
    f_alpha: float,
    d_alpha: float,
    alpha: float,
    f0: float,
    slope0: float,
    c1: float,
    c2: float,
    tol: float = 0.0,
) -> bool:
    """Check both strong Wolfe conditions, each relaxed by ``tol``."""
    return (
        f_alpha <= f0 + c1 * alpha * slope0 + tol
        and abs(d_alpha) <= -c2 * slope0 + tol
    )


__all__ = [
    "ALPHA_MIN",
    "DELTA_MAX",
    "GRADIENT_TOLERANCE",
    "MAX_UPDATE_ITERATIONS",
    "STAGNATION_RATIO",
    "STAGNATION_TRIALS",
    "InvalidConfiguration",
    "LineSearchResult",
    "ScalarFunction",
    "ScalarObjective",
    "Status",
    "curvature_condition",
    "satisfies_strong_wolfe",
    "sufficient_decrease",
]
