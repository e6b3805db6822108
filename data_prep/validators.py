"""
Data quality validation for event batches before they reach an estimator.

Catches problems early:
- Empty batches
- No failures for a method that only uses failures
- Censored events a complete-data method is going to ignore
- Failures at time zero and tied failure times
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from core.schema import Event
from estimators.methods import EstimationMethod


@dataclass
class ValidationResult:
    """Counts of an event batch plus blocking errors and informational warnings."""
    n_failures: int = 0
    n_censored: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def n_events(self) -> int:
        return self.n_failures + self.n_censored

    def summary(self) -> str:
        lines = [f"{self.n_events} events: {self.n_failures} failures, {self.n_censored} censored"]
        lines += [f"error: {e}" for e in self.errors]
        lines += [f"warning: {w}" for w in self.warnings]
        return "\n".join(lines)


def validate_events(
    events: Sequence[Event],
    method: Union[str, EstimationMethod] = EstimationMethod.IDM,
) -> ValidationResult:
    """
    Run all validation checks on an event batch for the given estimation method.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    method = EstimationMethod.parse(method)
    failures = [e for e in events if e.is_failure]
    n = len(events)
    n_censored = n - len(failures)
    result = ValidationResult(n_failures=len(failures), n_censored=n_censored)

    if n == 0:
        result.errors.append("Event batch is empty (0 events).")
        return result

    if not failures:
        if method.handles_censoring:
            result.warnings.append(
                f"All {n} events are censored; the survival estimate never drops below 1."
            )
        else:
            result.errors.append(
                f"No failure events among {n} events; method '{method.value}' needs at least one."
            )
            return result

    if n_censored and not method.handles_censoring:
        result.warnings.append(
            f"{n_censored} censored events are ignored by method '{method.value}'; "
            f"use 'ple' to account for them."
        )

    n_zero = sum(1 for e in failures if e.time == 0)
    if n_zero:
        result.warnings.append(f"{n_zero} failures recorded at time 0 are not used by the fits.")

    ties = {t: c for t, c in Counter(e.time for e in failures).items() if c > 1}
    if ties:
        result.warnings.append(
            f"{sum(ties.values())} failures share {len(ties)} tied time(s); "
            f"they keep their input order."
        )

    return result
