"""Tests for the survival-function estimators."""

import pytest

from core.errors import InvalidInput
from core.schema import Event, EventKind, Point
from estimators import (
    EstimationMethod,
    estimate,
    estimate_dm,
    estimate_idm,
    estimate_mrm,
    estimate_ple,
)

F = EventKind.FAILURE
C = EventKind.CENSORED


def failures(*times):
    return [Event(t, F) for t in times]


def as_pairs(points):
    return [(p.x, pytest.approx(p.y)) for p in points]


def test_dm_four_failures():
    points = estimate_dm(failures(1, 2, 3, 4))
    assert as_pairs(points) == [(0, 1), (1, 0.75), (2, 0.5), (3, 0.25), (4, 0.0)]


def test_idm_four_failures():
    points = estimate_idm(failures(1, 2, 3, 4))
    assert as_pairs(points) == [(0, 1), (1, 0.8), (2, 0.6), (3, 0.4), (4, 0.2)]


def test_mrm_four_failures():
    points = estimate_mrm(failures(1, 2, 3, 4))
    expected = [1 - (i - 0.3) / 4.4 for i in range(1, 5)]
    assert points[0] == Point(0.0, 1.0)
    assert [p.y for p in points[1:]] == pytest.approx(expected)


def test_complete_data_sorts_input():
    points = estimate_idm(failures(4, 1, 3, 2))
    assert [p.x for p in points] == [0, 1, 2, 3, 4]


def test_complete_data_drops_censored():
    events = [Event(1, F), Event(2, C), Event(3, F), Event(5, C)]
    points = estimate_dm(events)
    assert as_pairs(points) == [(0, 1), (1, 0.5), (3, 0.0)]


@pytest.mark.parametrize("estimator", [estimate_dm, estimate_idm, estimate_mrm])
def test_complete_data_without_failures_is_invalid(estimator):
    with pytest.raises(InvalidInput):
        estimator([Event(2, C), Event(3, C)])
    with pytest.raises(InvalidInput):
        estimator([])


def test_ple_without_censoring_matches_idm():
    events = failures(3, 1, 2, 4)
    ple = estimate_ple(events)
    idm = estimate_idm(events)
    assert [p.x for p in ple] == [p.x for p in idm]
    assert [p.y for p in ple] == pytest.approx([p.y for p in idm])


def test_ple_with_censoring():
    events = [Event(1, F), Event(2, C), Event(3, F), Event(4, F)]
    points = estimate_ple(events)
    # n = 4: corr at i=1 is 4/5, i=3 is 2/3, i=4 is 1/2
    s1 = 4 / 5
    s3 = s1 * 2 / 3
    s4 = s3 * 1 / 2
    assert as_pairs(points) == [(0, 1), (1, s1), (3, s3), (4, s4)]


def test_ple_censoring_emits_no_point():
    events = [Event(5, C), Event(1, F), Event(7, C)]
    points = estimate_ple(events)
    assert [p.x for p in points] == [0, 1]


def test_ple_non_increasing():
    events = [Event(t, F if t % 3 else C) for t in range(1, 20)]
    ys = [p.y for p in estimate_ple(events)]
    assert all(a >= b for a, b in zip(ys, ys[1:]))
    assert all(0.0 <= y <= 1.0 for y in ys)


def test_ple_all_censored_and_empty():
    assert estimate_ple([Event(1, C), Event(2, C)]) == [Point(0.0, 1.0)]
    with pytest.raises(InvalidInput):
        estimate_ple([])


def test_ple_ties_keep_input_order():
    events = [Event(2, C), Event(2, F), Event(1, F)]
    points = estimate_ple(events)
    # sorted: (1,F) i=1, (2,C) i=2, (2,F) i=3, n=3
    assert as_pairs(points) == [(0, 1), (1, 3 / 4), (2, 3 / 4 * 1 / 2)]


@pytest.mark.parametrize("method", list(EstimationMethod))
def test_all_methods_share_output_shape(method):
    events = [Event(t, F) for t in (5.0, 2.0, 9.0, 7.5, 1.0)] + [Event(3.0, C)]
    points = estimate(events, method)
    assert points[0] == Point(0.0, 1.0)
    xs = [p.x for p in points]
    assert all(a < b for a, b in zip(xs, xs[1:]))
    assert all(0.0 <= p.y <= 1.0 for p in points)


def test_estimate_dispatch_by_name():
    events = failures(1, 2, 3, 4)
    assert estimate(events, "DM") == estimate_dm(events)
    assert estimate(events) == estimate_idm(events)
    with pytest.raises(InvalidInput):
        estimate(events, "km")


def test_event_rejects_negative_time():
    with pytest.raises(InvalidInput):
        Event(-1.0, F)
    assert Event(3, "t+").kind is C
    assert str(Point(1, 0.5)) == "(1.000000, 0.500000)"
