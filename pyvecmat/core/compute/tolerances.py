"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each family of scalar types:
- Exact (integers, rationals, unknown scalar classes): equality
- FP16 / FP32 / FP64: scaled from the format's machine epsilon

Used by ``TVector.is_close`` / ``TMatrix.is_close`` and by the test suite.
"""

import numbers
from dataclasses import dataclass

import numpy as np

from pyvecmat.core.compute.precision import machine_epsilon, scalar_dtype

# Float tiers allow this many ulps of relative and absolute error
RTOL_ULPS = 100
ATOL_ULPS = 10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


def float_tier(dtype: type, name: str, description: str) -> ToleranceTier:
    """Build a tier whose tolerances are multiples of the dtype's epsilon."""
    eps = machine_epsilon(dtype)
    return ToleranceTier(
        rtol=RTOL_ULPS * eps,
        atol=ATOL_ULPS * eps,
        name=name,
        description=description,
    )


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer and rational scalars: exact equality',
)

FP16 = float_tier(np.float16, 'fp16', 'Half precision: a few significant digits')

FP32 = float_tier(np.float32, 'fp32', 'Single precision: about five significant digits')

FP64 = float_tier(np.float64, 'fp64', 'Double precision: about fourteen significant digits')


def select_tolerance(scalar_type: type) -> ToleranceTier:
    """Select the tolerance tier for a scalar type."""
    dtype = scalar_dtype(scalar_type)

    if dtype.kind in 'fc':
        # complex64 carries float32 parts
        component_size = dtype.itemsize // 2 if dtype.kind == 'c' else dtype.itemsize
        if component_size <= 2:
            return FP16
        if component_size <= 4:
            return FP32
        return FP64

    if dtype.kind in 'biu':
        return EXACT

    if issubclass(scalar_type, numbers.Rational):
        return EXACT

    # Real but not rational (user float-like classes registered with numbers)
    if issubclass(scalar_type, numbers.Real):
        return FP64

    return EXACT
