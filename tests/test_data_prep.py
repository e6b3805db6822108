"""Tests for event parsing, loading and validation."""

import io

import pandas as pd
import pytest

from core.errors import EventParseError
from core.schema import Event, EventKind, events_to_frame
from data_prep import (
    events_from_frame,
    load_events_csv,
    open_events,
    parse_event,
    read_events,
    validate_events,
)


def test_parse_event():
    assert parse_event("12.5,ttf") == Event(12.5, EventKind.FAILURE)
    assert parse_event(" 3 , t+ \n") == Event(3.0, EventKind.CENSORED)


@pytest.mark.parametrize("text", ["1,ttf,extra", "1", "abc,ttf", "1,fail", "-2,ttf"])
def test_parse_event_errors(text):
    with pytest.raises(EventParseError):
        parse_event(text)


def test_parse_error_reports_line():
    stream = io.StringIO("1,ttf\n\n2,ttf\nx,t+\n")
    with pytest.raises(EventParseError) as exc:
        read_events(stream)
    assert exc.value.line == 4
    assert str(exc.value).startswith("line 4:")


def test_read_events_skips_blank_lines():
    events = read_events(io.StringIO("1,ttf\n\n2,t+\n"))
    assert events == [Event(1, EventKind.FAILURE), Event(2, EventKind.CENSORED)]


def test_load_events_csv(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("10,ttf\n20,t+\n35,ttf\n")
    events = load_events_csv(str(path))
    assert [e.time for e in events] == [10.0, 20.0, 35.0]
    assert [e.kind for e in events] == [EventKind.FAILURE, EventKind.CENSORED, EventKind.FAILURE]
    assert open_events(path=str(path)) == events


def test_events_frame_round_trip():
    events = [Event(1, EventKind.FAILURE), Event(4, EventKind.CENSORED)]
    df = events_to_frame(events)
    assert list(df.columns) == ["time", "kind"]
    assert events_from_frame(df) == events


def test_events_from_frame_missing_column():
    with pytest.raises(ValueError):
        events_from_frame(pd.DataFrame({"time": [1.0]}))


def test_open_events_needs_a_source():
    with pytest.raises(ValueError):
        open_events()


def test_validate_empty_batch():
    result = validate_events([], "idm")
    assert not result.is_valid
    assert result.n_events == 0
    assert result.summary().splitlines()[1].startswith("error: ")


def test_validate_no_failures():
    events = [Event(1, EventKind.CENSORED)]
    assert not validate_events(events, "dm").is_valid
    ple = validate_events(events, "ple")
    assert ple.is_valid
    assert ple.warnings


def test_validate_warns_on_dropped_censoring_and_ties():
    events = [
        Event(0, EventKind.FAILURE),
        Event(2, EventKind.FAILURE),
        Event(2, EventKind.FAILURE),
        Event(3, EventKind.CENSORED),
    ]
    result = validate_events(events, "mrm")
    assert result.is_valid
    text = " ".join(result.warnings)
    assert "1 censored events are ignored" in text
    assert "time 0" in text
    assert "tied" in text


def test_validate_clean_batch():
    events = [Event(t, EventKind.FAILURE) for t in (1, 2, 3)]
    result = validate_events(events, "ple")
    assert result.is_valid
    assert result.summary() == "3 events: 3 failures, 0 censored"


def test_validation_summary_counts():
    events = [Event(1, EventKind.FAILURE), Event(2, EventKind.CENSORED), Event(3, EventKind.FAILURE)]
    result = validate_events(events, "idm")
    assert (result.n_failures, result.n_censored) == (2, 1)
    lines = result.summary().splitlines()
    assert lines[0] == "3 events: 2 failures, 1 censored"
    assert lines[1].startswith("warning: 1 censored events")


def test_load_events_csv_rejects_extra_fields(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("1,ttf,extra\n2,ttf\n")
    with pytest.raises(EventParseError) as exc:
        load_events_csv(str(path))
    assert exc.value.line == 1

    path.write_text("1,ttf\n2,ttf,extra\n")
    with pytest.raises(EventParseError):
        load_events_csv(str(path))


def test_load_events_csv_rejects_single_field(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("1\n2\n")
    with pytest.raises(EventParseError):
        load_events_csv(str(path))


def test_load_events_csv_empty_file(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("")
    assert load_events_csv(str(path)) == []
