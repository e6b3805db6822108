"""
Report outputs — tables of survival samples, fits and distribution evaluations.
"""

from .tables import (
    points_table,
    distribution_table,
    fit_summary,
    render_table,
    format_fit_lines,
)

__all__ = [
    "points_table",
    "distribution_table",
    "fit_summary",
    "render_table",
    "format_fit_lines",
]
