"""
Linearized least squares shared by the Exponential and Weibull fitters.

Each fitter maps the survival samples (x, S(x)) through a transform under
which its survival function becomes a straight line, then reads the
parameters off the moments computed here. The index of fit r is the
ordinary Pearson correlation of the transformed coordinates, using
population standard deviations.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

import numpy as np

from core.errors import InvalidInput
from core.schema import Point
from core.utils import stable_sort_by

logger = logging.getLogger(__name__)

Transform = Callable[[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]


@dataclass(frozen=True)
class LinearMoments:
    """Sums and means of a set of (x, y) coordinates."""
    n: int
    x_mean: float
    y_mean: float

    # raw sums
    sum_xy: float
    sum_xx: float

    # sums of deviations from the means
    sum_dxdy: float
    sum_dxdx: float
    sum_dydy: float

    @property
    def slope(self) -> float:
        """Ordinary least-squares slope."""
        return self.sum_dxdy / self.sum_dxdx

    @property
    def slope_through_origin(self) -> float:
        """Least-squares slope of a line forced through (0, 0)."""
        return self.sum_xy / self.sum_xx

    @property
    def intercept(self) -> float:
        return self.y_mean - self.slope * self.x_mean

    @property
    def r(self) -> float:
        """Pearson correlation coefficient (index of fit)."""
        sx = math.sqrt(self.sum_dxdx / self.n)
        sy = math.sqrt(self.sum_dydy / self.n)
        return (self.sum_dxdy / self.n) / (sx * sy)


def linear_moments(x: np.ndarray, y: np.ndarray) -> LinearMoments:
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise InvalidInput(f"coordinate arrays differ in shape: {x.shape} vs {y.shape}")
    n = len(x)
    if n == 0:
        raise InvalidInput("no coordinates to regress")

    x_mean = float(np.mean(x))
    y_mean = float(np.mean(y))
    dx = x - x_mean
    dy = y - y_mean
    return LinearMoments(
        n=n,
        x_mean=x_mean,
        y_mean=y_mean,
        sum_xy=float(np.sum(x * y)),
        sum_xx=float(np.sum(x * x)),
        sum_dxdy=float(np.sum(dx * dy)),
        sum_dxdx=float(np.sum(dx * dx)),
        sum_dydy=float(np.sum(dy * dy)),
    )


def prepare_points(points: Iterable[Point]) -> List[Point]:
    """
    Sort points by x and drop those at x == 0.
    Negative times and probabilities outside [0, 1] raise InvalidInput.
    """
    points = list(points)
    for p in points:
        if p.x < 0:
            raise InvalidInput(f"cannot fit on negative time {p.x} in point {p}")
        if not 0.0 <= p.y <= 1.0:
            raise InvalidInput(f"survival probability {p.y} outside [0, 1] in point {p}")
    ordered = stable_sort_by(points, [p.x for p in points])
    return [p for p in ordered if p.x != 0]


def linearize(points: Iterable[Point], transform: Transform, *, name: str = "fit") -> LinearMoments:
    """
    Prepare points, map them through `transform` and return the moments
    of the transformed coordinates.

    Points whose transformed coordinates are not finite (S(x) == 0, or
    S(x) == 1 under a double log) cannot sit on the line and are dropped.
    """
    prepared = prepare_points(points)
    x = np.array([p.x for p in prepared], dtype=float)
    y = np.array([p.y for p in prepared], dtype=float)

    with np.errstate(divide="ignore", invalid="ignore"):
        tx, ty = transform(x, y)
    finite = np.isfinite(tx) & np.isfinite(ty)
    n_dropped = int((~finite).sum())
    if n_dropped:
        logger.warning(
            "%s: dropping %d point(s) with no finite linearized coordinates: %s",
            name,
            n_dropped,
            ", ".join(str(p) for p, ok in zip(prepared, finite) if not ok),
        )
    tx, ty = tx[finite], ty[finite]

    if len(tx) < 2:
        raise InvalidInput(f"{name}: need at least 2 usable points, got {len(tx)}")
    moments = linear_moments(tx, ty)
    if moments.sum_dxdx == 0 or moments.sum_dydy == 0:
        raise InvalidInput(f"{name}: linearized points have no spread, the fit is undefined")
    logger.debug("%s: regressing %d points", name, moments.n)
    return moments
