"""
Timing curves for the layout transition.

``ease_in_out`` is the standard ease-in-ease-out curve, the cubic bezier
through (0, 0), (0.42, 0), (0.58, 1), (1, 1). It works on scalars and on
numpy arrays so a whole row of cells can be eased in one call.
"""
from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

    Progress = Union[float, npt.NDArray[np.float64]]

# Control points x1, y1, x2, y2
EASE_IN_OUT_POINTS: tuple[float, float, float, float] = (0.42, 0.0, 0.58, 1.0)

_NEWTON_ITERATIONS = 8
_BISECTION_ITERATIONS = 30


def _bezier(t: npt.NDArray[np.float64], p1: float, p2: float) -> npt.NDArray[np.float64]:
    """One coordinate of a cubic bezier with endpoints fixed at 0 and 1."""
    u = 1.0 - t
    return 3.0 * u * u * t * p1 + 3.0 * u * t * t * p2 + t ** 3


def _bezier_slope(t: npt.NDArray[np.float64], p1: float, p2: float) -> npt.NDArray[np.float64]:
    u = 1.0 - t
    return 3.0 * u * u * p1 + 6.0 * u * t * (p2 - p1) + 3.0 * t * t * (1.0 - p2)


def _solve_parameter(x: npt.NDArray[np.float64], x1: float, x2: float) -> npt.NDArray[np.float64]:
    """Find the curve parameter whose x coordinate equals ``x``."""
    t = x.copy()
    for _ in range(_NEWTON_ITERATIONS):
        slope = _bezier_slope(t, x1, x2)
        safe = np.abs(slope) > 1e-6
        t = np.where(safe, t - (_bezier(t, x1, x2) - x) / np.where(safe, slope, 1.0), t)
        t = np.clip(t, 0.0, 1.0)

    # Newton can stall where the slope is flat; bisection is always correct
    residual = np.abs(_bezier(t, x1, x2) - x)
    if np.any(residual > 1e-7):
        lo = np.zeros_like(x)
        hi = np.ones_like(x)
        for _ in range(_BISECTION_ITERATIONS):
            mid = 0.5 * (lo + hi)
            below = _bezier(mid, x1, x2) < x
            lo = np.where(below, mid, lo)
            hi = np.where(below, hi, mid)
        t = np.where(residual > 1e-7, 0.5 * (lo + hi), t)
    return t


def cubic_bezier(progress: Progress, x1: float, y1: float, x2: float, y2: float) -> Progress:
    """Evaluate a CSS-style timing curve at ``progress`` (clamped to [0, 1])."""
    x = np.clip(np.asarray(progress, dtype=np.float64), 0.0, 1.0)
    scalar = x.ndim == 0
    x = np.atleast_1d(x)

    y = _bezier(_solve_parameter(x, x1, x2), y1, y2)
    # Exact endpoints, so settled cells land precisely on the layout
    y = np.where(x <= 0.0, 0.0, np.where(x >= 1.0, 1.0, y))

    return float(y[0]) if scalar else y


def ease_in_out(progress: Progress) -> Progress:
    return cubic_bezier(progress, *EASE_IN_OUT_POINTS)


def linear(progress: Progress) -> Progress:
    x = np.clip(np.asarray(progress, dtype=np.float64), 0.0, 1.0)
    return float(x) if x.ndim == 0 else x


class Easing(StrEnum):
    """Named timing curves; members are callable."""
    EASE_IN_OUT = "easeInOut"
    LINEAR = "linear"

    def __call__(self, progress: Progress) -> Progress:
        return _CURVES[self](progress)


_CURVES = {
    Easing.EASE_IN_OUT: ease_in_out,
    Easing.LINEAR: linear,
}
