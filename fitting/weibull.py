"""
Weibull fit by linear regression.

S(x) = exp(-(x / theta)^beta)  =>  ln ln(1 / S(x)) = beta * ln x - beta * ln theta

so the slope of the transformed points is beta and
theta = exp(mean(ln x) - mean(ln ln(1/S)) / beta).
"""

from __future__ import annotations

import math
from typing import Iterable, Tuple

import numpy as np

from core.errors import InvalidInput
from core.schema import Point
from distributions.weibull import Weibull

from .regression import linearize
from .result import FitResult


def weibull_transform(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    return np.log(x), np.log(np.log(1.0 / y))


def fit_weibull(points: Iterable[Point]) -> FitResult:
    """Fit a Weibull distribution to the survival function sampled by points."""
    m = linearize(points, weibull_transform, name="weibull fit")
    if m.sum_dxdy == 0:
        raise InvalidInput("weibull fit: linearized points are uncorrelated, the shape is zero")
    beta = m.slope
    try:
        theta = math.exp(m.x_mean - m.y_mean / beta)
    except OverflowError:
        raise InvalidInput(f"weibull fit: scale overflows for shape {beta}") from None
    return FitResult(
        distribution=Weibull(shape=beta, scale=theta),
        r=m.r,
        n_points=m.n,
    )
