"""
Error types shared by every layer of the analysis.
"""

from __future__ import annotations

from typing import Optional


class InvalidInput(ValueError):
    """Raised when data or parameters cannot be used by an estimator, fitter or distribution."""


class EventParseError(ValueError):
    """A single event record could not be parsed."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
