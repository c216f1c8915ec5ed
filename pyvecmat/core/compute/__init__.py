"""
Shared numeric infrastructure for pyvecmat.

Submodules:
    precision: Machine epsilon, scalar dtype lookup, scalar closeness test
    tolerances: Tolerance tiers per scalar precision
"""

from pyvecmat.core.compute.precision import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    is_close,
    machine_epsilon,
    scalar_dtype,
)
from pyvecmat.core.compute.tolerances import (
    EXACT,
    FP16,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Precision
    "DEFAULT_ATOL",
    "DEFAULT_RTOL",
    "is_close",
    "machine_epsilon",
    "scalar_dtype",
    # Tolerances
    "EXACT",
    "FP16",
    "FP32",
    "FP64",
    "ToleranceTier",
    "select_tolerance",
]
