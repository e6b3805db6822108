from __future__ import annotations

import math
from typing import Iterable, List, Sequence, TypeVar

import numpy as np
import pandas as pd

from .errors import InvalidInput

T = TypeVar("T")


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def stable_sort_by(items: Sequence[T], keys: Sequence[float]) -> List[T]:
    """Sort items ascending by keys; equal keys keep their input order."""
    order = np.argsort(np.asarray(keys, dtype=float), kind="stable")
    return [items[i] for i in order]


def require_positive(name: str, value: float) -> float:
    """Return value as float, raising InvalidInput unless it is finite and > 0."""
    v = float(value)
    if not math.isfinite(v) or v <= 0:
        raise InvalidInput(f"{name} must be a finite positive number, got {value!r}")
    return v


def grid(start: float, stop: float, step: float) -> np.ndarray:
    """
    Points start, start+step, ... strictly below stop.
    Built by multiplication so long grids do not accumulate rounding drift.
    """
    if not step > 0:
        raise InvalidInput(f"step must be positive, got {step}")
    n = max(int(math.ceil((stop - start) / step)), 0)
    xs = start + step * np.arange(n)
    return xs[xs < stop]
