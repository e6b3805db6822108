"""
Analysis configuration.
Defaults mirror the command-line defaults in app/cli.py.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidInput


@dataclass(frozen=True)
class AnalysisConfig:
    # estimator used to sample the survival function (dm, idm, mrm, ple)
    method: str = "idm"
    verbose: bool = False

    # output precision of the points table
    float_digits: int = 3
    time_digits: int = 1


@dataclass(frozen=True)
class GridConfig:
    """Half-open grid [start, stop) used to tabulate a distribution."""
    start: float = 0.0
    stop: float = 10.0
    step: float = 1.0
    float_digits: int = 3

    def __post_init__(self) -> None:
        if not self.step > 0:
            raise InvalidInput(f"grid step must be positive, got {self.step}")
        if self.stop < self.start:
            raise InvalidInput(f"grid stop ({self.stop}) is before start ({self.start})")
