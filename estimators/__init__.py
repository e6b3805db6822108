"""
Estimators package — non-parametric survival-function samples from lifetime events.
"""

from .complete import estimate_dm, estimate_idm, estimate_mrm, estimate_complete_data
from .product_limit import estimate_ple
from .methods import EstimationMethod, estimate

__all__ = [
    "estimate_dm",
    "estimate_idm",
    "estimate_mrm",
    "estimate_complete_data",
    "estimate_ple",
    "EstimationMethod",
    "estimate",
]
