"""
Interface for parametric lifetime distributions.
Every method is total over the real line: times before zero are valid input.
"""

from __future__ import annotations

import math

import pandas as pd


class LifetimeDistribution:
    """Capability set shared by the Exponential and Weibull evaluators."""

    name: str = ""

    def log_density(self, x: float) -> float:
        raise NotImplementedError

    def density(self, x: float) -> float:
        raise NotImplementedError

    def cumulative(self, x: float) -> float:
        raise NotImplementedError

    def survival(self, x: float) -> float:
        raise NotImplementedError

    def hazard(self, x: float) -> float:
        """Instantaneous failure rate f(x) / S(x)."""
        s = self.survival(x)
        if s == 0:
            return math.inf
        return self.density(x) / s

    def params(self) -> dict:
        raise NotImplementedError

    def summary(self) -> pd.DataFrame:
        """One-row table of the distribution parameters."""
        return pd.DataFrame([{"Distribution": self.name, **self.params()}])
