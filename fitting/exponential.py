"""
Exponential fit by linear regression.

S(x) = exp(-rate * x)  =>  ln(1 / S(x)) = rate * x

The slope comes from a regression through the origin (raw sums), while
the index of fit is the ordinary mean-centred correlation.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from core.schema import Point
from distributions.exponential import Exponential

from .regression import linearize
from .result import FitResult


def exponential_transform(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    return x, np.log(1.0 / y)


def fit_exponential(points: Iterable[Point]) -> FitResult:
    """Fit an Exponential distribution to the survival function sampled by points."""
    m = linearize(points, exponential_transform, name="exponential fit")
    return FitResult(
        distribution=Exponential(rate=m.slope_through_origin),
        r=m.r,
        n_points=m.n,
    )
