"""
Two-parameter Weibull lifetime distribution.

    f(x) = (beta / theta) * (x / theta)^(beta - 1) * exp(-(x / theta)^beta)
    S(x) = exp(-(x / theta)^beta)

At x == 0 the density depends only on the shape:
    beta <  1  ->  +inf
    beta == 1  ->  1 / theta
    beta >  1  ->  0
These branches are returned explicitly instead of evaluating 0 ** (beta - 1).

(x / theta)^beta is evaluated in log space; when it exceeds the float range
the survival is 0, the cumulative 1 and the density 0.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from core.utils import require_positive

from .base import LifetimeDistribution

# exp() overflows above this
_MAX_LOG = math.log(sys.float_info.max)


@dataclass(frozen=True)
class Weibull(LifetimeDistribution):
    shape: float   # beta
    scale: float   # theta

    name = "Weibull"

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", require_positive("shape", self.shape))
        object.__setattr__(self, "scale", require_positive("scale", self.scale))

    @property
    def beta(self) -> float:
        return self.shape

    @property
    def theta(self) -> float:
        return self.scale

    def _log_cumulative_hazard(self, x: float) -> float:
        """ln((x / theta)^beta) for x > 0."""
        return self.shape * (math.log(x) - math.log(self.scale))

    def _cumulative_hazard(self, x: float) -> float:
        z = self._log_cumulative_hazard(x)
        if z > _MAX_LOG:
            return math.inf
        return math.exp(z)

    def log_density(self, x: float) -> float:
        if x < 0:
            return -math.inf
        if x == 0:
            if self.shape == 1:
                return -math.log(self.scale)
            return math.inf if self.shape < 1 else -math.inf
        return (
            math.log(self.shape)
            - math.log(self.scale)
            + (self.shape - 1) * (math.log(x) - math.log(self.scale))
            - self._cumulative_hazard(x)
        )

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        if x == 0:
            if self.shape == 1:
                return 1.0 / self.scale
            return math.inf if self.shape < 1 else 0.0
        lp = self.log_density(x)
        if lp > _MAX_LOG:
            return math.inf
        return math.exp(lp)

    def cumulative(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return -math.expm1(-self._cumulative_hazard(x))

    def survival(self, x: float) -> float:
        if x <= 0:
            return 1.0
        return math.exp(-self._cumulative_hazard(x))

    def params(self) -> dict:
        return {"shape": self.shape, "scale": self.scale}
