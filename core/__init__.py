"""
Core package — data model, error types, configuration, and shared utilities.
No business logic lives here.
"""

from .errors import EventParseError, InvalidInput
from .schema import Event, EventKind, Point, events_to_frame, points_to_frame
from .config import AnalysisConfig, GridConfig
from .utils import require_columns, require_positive, stable_sort_by, grid

__all__ = [
    "EventParseError",
    "InvalidInput",
    "Event",
    "EventKind",
    "Point",
    "events_to_frame",
    "points_to_frame",
    "AnalysisConfig",
    "GridConfig",
    "require_columns",
    "require_positive",
    "stable_sort_by",
    "grid",
]
