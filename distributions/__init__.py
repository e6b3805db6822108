"""
Distributions package — parametric lifetime models fitted to survival samples.

  1. base.py        — shared evaluator interface (density, cumulative, survival)
  2. exponential.py — Exponential(rate)
  3. weibull.py     — Weibull(shape, scale)
"""

from .base import LifetimeDistribution
from .exponential import Exponential
from .weibull import Weibull

__all__ = [
    "LifetimeDistribution",
    "Exponential",
    "Weibull",
]
