"""
Reading lifetime event records.

One record per line, two comma-separated fields:

    <time>,<kind>        e.g.  "120.5,ttf"  or  "300,t+"

where kind is "ttf" (time to failure) or "t+" (censored, survived at least).
"""

from __future__ import annotations

from typing import Iterable, List, Optional, TextIO

import numpy as np
import pandas as pd

from core.errors import EventParseError, InvalidInput
from core.schema import EVENT_COLUMNS, Event, EventKind
from core.utils import require_columns


def parse_event(text: str, line: Optional[int] = None) -> Event:
    """Parse one "time,kind" record."""
    fields = text.strip().split(",")
    if len(fields) != 2:
        raise EventParseError(
            f"could not parse event {text.strip()!r}: expected 2 fields, got {len(fields)}", line
        )
    time_text, kind_text = (f.strip() for f in fields)
    try:
        time = float(time_text)
    except ValueError:
        raise EventParseError(f"could not parse event time {time_text!r}", line) from None
    try:
        kind = EventKind.parse(kind_text)
        return Event(time, kind)
    except (EventParseError, InvalidInput) as exc:
        raise EventParseError(f"could not parse event: {exc}", line) from None


def read_events(stream: Iterable[str]) -> List[Event]:
    """Parse every non-blank line of a text stream; errors carry the 1-based line number."""
    events = []
    for i, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        events.append(parse_event(line, line=i))
    return events


def events_from_frame(
    df: pd.DataFrame,
    *,
    time_col: str = "time",
    kind_col: str = "kind",
) -> List[Event]:
    """Build events from a two-column frame; row numbers in errors are 1-based."""
    require_columns(df, [time_col, kind_col])
    events = []
    for i, (t, k) in enumerate(zip(df[time_col], df[kind_col]), start=1):
        events.append(parse_event(f"{t},{k}", line=i))
    return events


def load_events_csv(path: str) -> List[Event]:
    """Load a headerless "time,kind" CSV file; every row must have exactly two fields."""
    try:
        df = pd.read_csv(
            path,
            header=None,
            dtype=str,
            skip_blank_lines=True,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as exc:
        raise EventParseError(f"could not parse events file {path}: {exc}") from None

    if df.shape[1] != 2:
        # rows shorter than the widest one are padded with ""
        if df.shape[1] > 2:
            extra = (df.iloc[:, 2:] != "").any(axis=1).to_numpy()
        else:
            extra = np.ones(len(df), dtype=bool)
        line = int(extra.argmax()) + 1 if extra.any() else None
        raise EventParseError(f"expected 2 fields per record, got {df.shape[1]}", line)

    df.columns = list(EVENT_COLUMNS)
    return events_from_frame(df)


def open_events(source: Optional[TextIO] = None, path: Optional[str] = None) -> List[Event]:
    """Events from a file path when given, else from an open text stream."""
    if path is not None:
        return load_events_csv(path)
    if source is None:
        raise ValueError("Provide either a path or a stream of event records.")
    return read_events(source)
