"""
Exponential lifetime distribution: constant hazard, S(x) = exp(-rate * x).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from core.utils import require_positive

from .base import LifetimeDistribution


@dataclass(frozen=True)
class Exponential(LifetimeDistribution):
    rate: float

    name = "Exponential"

    def __post_init__(self) -> None:
        object.__setattr__(self, "rate", require_positive("rate", self.rate))

    @property
    def mean(self) -> float:
        return 1.0 / self.rate

    def log_density(self, x: float) -> float:
        if x < 0:
            return -math.inf
        return math.log(self.rate) - self.rate * x

    def density(self, x: float) -> float:
        return math.exp(self.log_density(x))

    def cumulative(self, x: float) -> float:
        if x < 0:
            return 0.0
        return -math.expm1(-self.rate * x)

    def survival(self, x: float) -> float:
        if x < 0:
            return 1.0
        return math.exp(-self.rate * x)

    def params(self) -> dict:
        return {"rate": self.rate}
