"""
Closed set of estimation methods and the dispatcher used by the CLI.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from core.errors import InvalidInput
from core.schema import Event, Point

from .complete import estimate_dm, estimate_idm, estimate_mrm
from .product_limit import estimate_ple


class EstimationMethod(str, Enum):
    DM = "dm"     # Direct Method
    IDM = "idm"   # Improved Direct Method
    MRM = "mrm"   # Median Rank Method
    PLE = "ple"   # Product Limit Estimator

    @classmethod
    def parse(cls, name: Union[str, "EstimationMethod"]) -> "EstimationMethod":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise InvalidInput(
                f"invalid method {name!r}, expected one of {[m.value for m in cls]}"
            ) from None

    @property
    def handles_censoring(self) -> bool:
        return self is EstimationMethod.PLE


_ESTIMATORS: Dict[EstimationMethod, Callable[[Iterable[Event]], List[Point]]] = {
    EstimationMethod.DM: estimate_dm,
    EstimationMethod.IDM: estimate_idm,
    EstimationMethod.MRM: estimate_mrm,
    EstimationMethod.PLE: estimate_ple,
}


def estimate(
    events: Iterable[Event],
    method: Union[str, EstimationMethod] = EstimationMethod.IDM,
) -> List[Point]:
    """Run the estimator selected by `method` on the event batch."""
    return _ESTIMATORS[EstimationMethod.parse(method)](events)
