"""
Fitting package — least-squares fits of lifetime distributions to survival samples.
"""

from typing import Dict, Iterable

from core.schema import Point

from .regression import LinearMoments, linear_moments, linearize, prepare_points
from .result import FitResult
from .exponential import fit_exponential, exponential_transform
from .weibull import fit_weibull, weibull_transform


def fit_all(points: Iterable[Point]) -> Dict[str, FitResult]:
    """Fit both distributions to the same points, Weibull first."""
    points = list(points)
    return {
        "weibull": fit_weibull(points),
        "exponential": fit_exponential(points),
    }


__all__ = [
    "LinearMoments",
    "linear_moments",
    "linearize",
    "prepare_points",
    "FitResult",
    "fit_exponential",
    "exponential_transform",
    "fit_weibull",
    "weibull_transform",
    "fit_all",
]
