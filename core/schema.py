"""
Canonical data model: lifetime events in, survival samples out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

import pandas as pd

from .errors import EventParseError, InvalidInput


class EventKind(str, Enum):
    """Observation tag of an event record."""

    FAILURE = "ttf"    # time-to-failure
    CENSORED = "t+"    # right-censored, survived at least this long

    @classmethod
    def parse(cls, text: str) -> "EventKind":
        try:
            return cls(text.strip())
        except ValueError:
            raise EventParseError(
                f"invalid event type {text!r}, expected one of {[k.value for k in cls]}"
            ) from None


@dataclass(frozen=True)
class Event:
    """A single observation at a non-negative time."""
    time: float
    kind: EventKind = EventKind.FAILURE

    def __post_init__(self) -> None:
        t = float(self.time)
        if not math.isfinite(t) or t < 0:
            raise InvalidInput(f"event time must be a finite non-negative number, got {self.time!r}")
        object.__setattr__(self, "time", t)
        object.__setattr__(self, "kind", EventKind(self.kind))

    @property
    def is_failure(self) -> bool:
        return self.kind is EventKind.FAILURE


@dataclass(frozen=True)
class Point:
    """A sample (x, y) of a survival function; x is a time, y a probability."""
    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f})"


EVENT_COLUMNS: Tuple[str, ...] = ("time", "kind")
POINT_COLUMNS: Tuple[str, ...] = ("x", "y")


def events_to_frame(events: Iterable[Event]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"time": e.time, "kind": e.kind.value} for e in events],
        columns=list(EVENT_COLUMNS),
    )


def points_to_frame(points: Iterable[Point]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"x": p.x, "y": p.y} for p in points],
        columns=list(POINT_COLUMNS),
    )
