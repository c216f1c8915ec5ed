"""
Numerical precision constants and utilities.

Provides machine epsilon, dtype lookup for scalar types, and the scalar
closeness test used by ``is_close`` on vectors and matrices.
"""

from typing import Any

import numpy as np


# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def scalar_dtype(scalar_type: type) -> np.dtype:
    """
    NumPy dtype used to hold elements of a scalar type.

    Python and NumPy numeric types map to their native dtype; anything else
    (Fraction, Decimal, user classes) is held as ``object``.
    """
    try:
        dtype = np.dtype(scalar_type)
    except TypeError:
        return np.dtype(object)
    if dtype.kind not in 'biufc':
        return np.dtype(object)
    return dtype


def is_close(a: Any, b: Any, rtol: float = DEFAULT_RTOL, atol: float = DEFAULT_ATOL) -> bool:
    """
    Check if two scalars are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    With both tolerances zero the test is plain equality, which keeps it
    usable for exact scalar types that do not mix with float.
    """
    if rtol == 0 and atol == 0:
        return bool(a == b)
    return bool(abs(a - b) <= atol + rtol * abs(b))
