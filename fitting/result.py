from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import pandas as pd

from distributions.base import LifetimeDistribution


@dataclass(frozen=True)
class FitResult:
    """
    A fitted distribution and its index of fit r.

    Unpacks like a pair: `dist, r = fit_weibull(points)`.
    """
    distribution: LifetimeDistribution
    r: float
    n_points: int

    def __iter__(self) -> Iterator:
        return iter((self.distribution, self.r))

    def summary(self) -> pd.DataFrame:
        row = {"Distribution": self.distribution.name, **self.distribution.params()}
        row["r"] = self.r
        row["n"] = self.n_points
        return pd.DataFrame([row])
