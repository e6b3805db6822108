"""
Tabular views of estimates and fits for console output.

Each builder returns a DataFrame; render_table turns one into aligned text.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Sequence

import pandas as pd

from core.config import GridConfig
from core.schema import Point, points_to_frame
from core.utils import grid
from distributions.base import LifetimeDistribution
from fitting.result import FitResult


def points_table(
    points: Sequence[Point],
    *,
    weibull: Optional[LifetimeDistribution] = None,
    exponential: Optional[LifetimeDistribution] = None,
) -> pd.DataFrame:
    """
    Empirical survival samples next to the fitted survival functions.

    Columns: i, t, R(t), and Weibull / Exp when the fits are given.
    """
    df = points_to_frame(points).rename(columns={"x": "t", "y": "R(t)"})
    df.insert(0, "i", list(range(len(df))))
    if weibull is not None:
        df["Weibull"] = [weibull.survival(p.x) for p in points]
    if exponential is not None:
        df["Exp"] = [exponential.survival(p.x) for p in points]
    return df


def distribution_table(dist: LifetimeDistribution, config: GridConfig = GridConfig()) -> pd.DataFrame:
    """Density and cumulative distribution on the grid [start, stop)."""
    xs = grid(config.start, config.stop, config.step)
    return pd.DataFrame({
        "x": xs,
        "f(x)": [dist.density(float(x)) for x in xs],
        "F(x)": [dist.cumulative(float(x)) for x in xs],
    })


def fit_summary(results: Mapping[str, FitResult]) -> pd.DataFrame:
    """One row per fit with its parameters, index of fit and point count."""
    frames = [r.summary() for r in results.values()]
    if not frames:
        return pd.DataFrame(columns=["Distribution", "r", "n"])
    return pd.concat(frames, ignore_index=True)


def render_table(
    df: pd.DataFrame,
    *,
    digits: int = 3,
    column_digits: Optional[Dict[str, int]] = None,
) -> str:
    """Right-aligned text table; floats get `digits` decimals unless overridden per column."""
    column_digits = column_digits or {}
    formatters = {}
    for col in df.columns:
        if pd.api.types.is_float_dtype(df[col]):
            d = column_digits.get(col, digits)
            formatters[col] = lambda v, d=d: f"{v:.{d}f}"
    return df.to_string(index=False, formatters=formatters, justify="right")


def format_fit_lines(results: Mapping[str, FitResult]) -> Iterable[str]:
    """The one-line fit reports printed by the fit command."""
    for key, res in results.items():
        d = res.distribution
        if key == "weibull":
            yield f"Weibull:\tbeta/theta/r = {d.shape:f}/{d.scale:f}/{res.r:f}"
        elif key == "exponential":
            yield f"Exponential:\trate/r = {d.rate:f}/{res.r:f}"
        else:
            params = "/".join(f"{v:f}" for v in d.params().values())
            yield f"{d.name}:\t{'/'.join(d.params())}/r = {params}/{res.r:f}"
