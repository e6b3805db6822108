"""
Product-Limit Estimator (Kaplan-Meier form) for failure and right-censored data.

All n events are sorted by time behind a synthetic start event at time 0.
Walking the sorted sequence with 1-based position i, the running survival
estimate is multiplied by

    (n + 1 - i) / (n + 2 - i)    at a failure
    1                            at a censoring

Censorings shrink the population at risk for later failures but produce no
point of their own: the output holds the start (0, 1) and one point per
failure, so it is non-increasing in x.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from core.errors import InvalidInput
from core.schema import Event, Point
from core.utils import stable_sort_by

logger = logging.getLogger(__name__)


def estimate_ple(events: Iterable[Event]) -> List[Point]:
    """Survival function estimate by the Product Limit Estimator."""
    events = list(events)
    n = len(events)
    if n == 0:
        raise InvalidInput("cannot estimate a survival function from an empty event batch")

    ordered = stable_sort_by(events, [e.time for e in events])

    survival = 1.0
    points = [Point(0.0, 1.0)]
    for i, e in enumerate(ordered, start=1):
        if not e.is_failure:
            continue
        survival *= (n + 1 - i) / (n + 2 - i)
        points.append(Point(e.time, survival))

    logger.debug("product limit: %d events, %d failures", n, len(points) - 1)
    return points
