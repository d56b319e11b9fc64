"""Immutable line-search configuration and its chainable builder."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .core import ALPHA_MIN, GRADIENT_TOLERANCE, InvalidConfiguration, ScalarObjective


@dataclass(frozen=True)
class LineSearchConfig:
    """
    Configuration for a strong Wolfe line search.

    Args:
        objective: Objective restricted to the search ray, exposing
            ``value(alpha)`` and ``slope(alpha)``.
        f0: Objective value at ``alpha = 0``.
        slope0: Directional derivative at ``alpha = 0``. Must be negative.
        c1: Sufficient-decrease constant. Defaults to 1e-3.
        c2: Curvature constant. Must satisfy ``c1 < c2 < 1``. Defaults to 0.5.
        alpha0: Initial trial step. Defaults to 1.0.
        alpha_max: Upper bound on the step length. Defaults to 1000.0.
        alpha_min: Floor returned when zoom proposes a smaller step.
        gradient_tolerance: Zoom stops once ``|slope|`` drops to this value.
    """

    objective: ScalarObjective
    f0: float
    slope0: float
    c1: float = 1e-3
    c2: float = 0.5
    alpha0: float = 1.0
    alpha_max: float = 1000.0
    alpha_min: float = ALPHA_MIN
    gradient_tolerance: float = GRADIENT_TOLERANCE

    def __post_init__(self) -> None:
        """Validate LineSearchConfig invariants."""
        if not callable(getattr(self.objective, "value", None)) or not callable(
            getattr(self.objective, "slope", None)
        ):
            raise InvalidConfiguration(
                "objective", "exposing callable value() and slope()", self.objective
            )
        if not math.isfinite(self.f0):
            raise InvalidConfiguration("f0", "a finite value", self.f0)
        if not (math.isfinite(self.slope0) and self.slope0 < 0):
            raise InvalidConfiguration(
                "slope0", "slope0 < 0 (a descent direction)", self.slope0
            )
        if not (0 < self.c1 < 1):
            raise InvalidConfiguration("c1", "0 < c1 < 1", self.c1)
        if not (0 < self.c2 < 1):
            raise InvalidConfiguration("c2", "0 < c2 < 1", self.c2)
        if self.c1 >= self.c2:
            raise InvalidConfiguration("c2", f"c1 < c2 (c1={self.c1})", self.c2)
        if not (0 < self.alpha_min):
            raise InvalidConfiguration("alpha_min", "alpha_min > 0", self.alpha_min)
        if not (self.alpha_max > self.alpha_min):
            raise InvalidConfiguration(
                "alpha_max", f"alpha_max > alpha_min ({self.alpha_min})", self.alpha_max
            )
        if not (0 < self.alpha0 <= self.alpha_max):
            raise InvalidConfiguration(
                "alpha0", f"0 < alpha0 <= alpha_max ({self.alpha_max})", self.alpha0
            )
        if not (self.gradient_tolerance >= 0):
            raise InvalidConfiguration(
                "gradient_tolerance", "gradient_tolerance >= 0", self.gradient_tolerance
            )

    @staticmethod
    def builder(
        objective: ScalarObjective, f0: float, slope0: float
    ) -> "LineSearchConfigBuilder":
        """Start a chainable builder for the given objective and ray origin."""
        return LineSearchConfigBuilder(objective, f0, slope0)


class LineSearchConfigBuilder:
    """
    Mutable builder producing a frozen :class:`LineSearchConfig`.

    Example:
        >>> config = (
        ...     LineSearchConfigBuilder(objective, f0=0.0, slope0=-2.0)
        ...     .c2(0.9)
        ...     .alpha0(1.0)
        ...     .build()
        ... )
    """

    def __init__(self, objective: ScalarObjective, f0: float, slope0: float) -> None:
        self._objective = objective
        self._f0 = float(f0)
        self._slope0 = float(slope0)
        self._c1 = 1e-3
        self._c2 = 0.5
        self._alpha0 = 1.0
        self._alpha_max = 1000.0

    def c1(self, c1: float) -> "LineSearchConfigBuilder":
        self._c1 = float(c1)
        return self

    def c2(self, c2: float) -> "LineSearchConfigBuilder":
        self._c2 = float(c2)
        return self

    def alpha0(self, alpha0: float) -> "LineSearchConfigBuilder":
        self._alpha0 = float(alpha0)
        return self

    def alpha_max(self, alpha_max: float) -> "LineSearchConfigBuilder":
        self._alpha_max = float(alpha_max)
        return self

    def build(self) -> LineSearchConfig:
        """Validate the accumulated parameters and freeze them.

        Raises:
            InvalidConfiguration: If any parameter violates its constraint.
        """
        return LineSearchConfig(
            objective=self._objective,
            f0=self._f0,
            slope0=self._slope0,
            c1=self._c1,
            c2=self._c2,
            alpha0=self._alpha0,
            alpha_max=self._alpha_max,
        )


__all__ = ["LineSearchConfig", "LineSearchConfigBuilder"]
