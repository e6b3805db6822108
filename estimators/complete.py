"""
Rank-based estimators for complete data: Direct Method, Improved Direct
Method and Median Rank Method.

Only failure events are used; censored events are dropped. With n failures
sorted ascending, the i-th failure (1-based) gets the survival estimate

    DM:   1 - i / n
    IDM:  1 - i / (n + 1)
    MRM:  1 - (i - 0.3) / (n + 0.4)

The returned sequence always starts with the synthetic point (0, 1).
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from core.errors import InvalidInput
from core.schema import Event, Point
from core.utils import stable_sort_by

logger = logging.getLogger(__name__)

RankFunction = Callable[[int, int], float]


def dm_rank(i: int, n: int) -> float:
    return 1.0 - i / n


def idm_rank(i: int, n: int) -> float:
    return 1.0 - i / (n + 1)


def mrm_rank(i: int, n: int) -> float:
    return 1.0 - (i - 0.3) / (n + 0.4)


def estimate_complete_data(events: Iterable[Event], rank: RankFunction) -> List[Point]:
    """Sample the survival function at each failure time using a rank formula."""
    events = list(events)
    failures = [e for e in events if e.is_failure]
    n = len(failures)
    if n == 0:
        raise InvalidInput(
            f"no failure events among {len(events)} events; "
            "complete-data estimators need at least one failure"
        )
    logger.debug(
        "complete data (%s): %d failures, %d censored events ignored",
        getattr(rank, "__name__", "rank"), n, len(events) - n,
    )

    ordered = stable_sort_by(failures, [e.time for e in failures])
    points = [Point(0.0, 1.0)]
    for i, e in enumerate(ordered, start=1):
        points.append(Point(e.time, rank(i, n)))
    return points


def estimate_dm(events: Iterable[Event]) -> List[Point]:
    """Survival function estimate by the Direct Method."""
    return estimate_complete_data(events, dm_rank)


def estimate_idm(events: Iterable[Event]) -> List[Point]:
    """Survival function estimate by the Improved Direct Method."""
    return estimate_complete_data(events, idm_rank)


def estimate_mrm(events: Iterable[Event]) -> List[Point]:
    """Survival function estimate by the Median Rank Method."""
    return estimate_complete_data(events, mrm_rank)
