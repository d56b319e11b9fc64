"""Adapters exposing a multivariate objective along a fixed search ray.

Each adapter implements the :class:`~strongwolfe.core.ScalarObjective`
protocol: ``value(alpha)`` is ``f(x0 + alpha * d)`` and ``slope(alpha)`` is
the directional derivative ``grad f(x0 + alpha * d) . d``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
import torch

from .core import ScalarFunction


@dataclass(frozen=True)
class FunctionObjective:
    """Objective given directly as two scalar functions of the step length."""

    value_fn: ScalarFunction
    slope_fn: ScalarFunction

    def value(self, alpha: float) -> float:
        return float(self.value_fn(alpha))

    def slope(self, alpha: float) -> float:
        return float(self.slope_fn(alpha))


class RayObjective:
    """
    NumPy objective restricted to the ray ``x0 + alpha * direction``.

    Args:
        fun: Objective returning a scalar given a point.
        grad: Gradient of ``fun`` returning an array shaped like the point.
        x0: Origin of the ray.
        direction: Search direction.
    """

    def __init__(
        self,
        fun: Callable[[np.ndarray], float],
        grad: Callable[[np.ndarray], np.ndarray],
        x0: np.ndarray,
        direction: np.ndarray,
    ) -> None:
        x0 = np.asarray(x0, dtype=float)
        direction = np.asarray(direction, dtype=float)
        if x0.shape != direction.shape:
            raise ValueError(
                f"x0 shape {x0.shape} does not match direction shape {direction.shape}."
            )
        self.fun = fun
        self.grad = grad
        self.x0 = x0.copy()
        self.direction = direction.copy()

    def point(self, alpha: float) -> np.ndarray:
        return self.x0 + alpha * self.direction

    def value(self, alpha: float) -> float:
        return float(self.fun(self.point(alpha)))

    def slope(self, alpha: float) -> float:
        g = np.asarray(self.grad(self.point(alpha)), dtype=float)
        return float(np.dot(g.ravel(), self.direction.ravel()))

    def initial_values(self) -> tuple[float, float]:
        """Return ``(f0, slope0)`` at the origin of the ray."""
        return self.value(0.0), self.slope(0.0)


class TorchRayObjective:
    """
    PyTorch objective restricted to a ray, with slopes from autograd.

    ``fun`` must map a tensor shaped like ``x0`` to a scalar tensor built from
    differentiable operations.

    Args:
        fun: Differentiable objective.
        x0: Origin of the ray.
        direction: Search direction.
        dtype: Floating dtype for the ray. Defaults to ``torch.float64``.
    """

    def __init__(
        self,
        fun: Callable[[torch.Tensor], torch.Tensor],
        x0: torch.Tensor,
        direction: torch.Tensor,
        dtype: Optional[torch.dtype] = None,
    ) -> None:
        if dtype is None:
            dtype = torch.float64
        x0 = torch.as_tensor(x0, dtype=dtype).detach()
        direction = torch.as_tensor(direction, dtype=dtype, device=x0.device).detach()
        if x0.shape != direction.shape:
            raise ValueError(
                f"x0 shape {tuple(x0.shape)} does not match direction shape "
                f"{tuple(direction.shape)}."
            )
        self.fun = fun
        self.x0 = x0
        self.direction = direction

    def point(self, alpha: float) -> torch.Tensor:
        return self.x0 + alpha * self.direction

    def value(self, alpha: float) -> float:
        with torch.no_grad():
            return float(self.fun(self.point(alpha)).item())

    def slope(self, alpha: float) -> float:
        x = self.point(alpha).requires_grad_(True)
        y = self.fun(x)
        (g,) = torch.autograd.grad(y, x)
        return float(torch.dot(g.reshape(-1), self.direction.reshape(-1)).item())

    def initial_values(self) -> tuple[float, float]:
        """Return ``(f0, slope0)`` at the origin of the ray."""
        return self.value(0.0), self.slope(0.0)


__all__ = ["FunctionObjective", "RayObjective", "TorchRayObjective"]
