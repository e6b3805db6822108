"""
Data preparation — reading event records and validating event batches.
"""

from .loader import (
    parse_event,
    read_events,
    events_from_frame,
    load_events_csv,
    open_events,
)
from .validators import ValidationResult, validate_events

__all__ = [
    "parse_event",
    "read_events",
    "events_from_frame",
    "load_events_csv",
    "open_events",
    "ValidationResult",
    "validate_events",
]
