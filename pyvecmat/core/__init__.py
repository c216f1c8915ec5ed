"""
Core infrastructure for pyvecmat.

This module provides the shared abstractions used by the vector and matrix
sub-packages.

Key components:
    exceptions: Exception hierarchy
    capabilities: Scalar capability constants and checks
    validation: Fail-fast validators for shapes, counts and indices
    shape: Shape-tagged specialization of fixed-size types
    elementwise: Pairwise combination kernels
    compute: Precision constants and tolerance tiers
"""

from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    ScalarTypeError,
    CapabilityError,
    ElementIndexError,
)
from pyvecmat.core.shape import PrecisionAlias, ShapeSpecialized

__all__ = [
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "ScalarTypeError",
    "CapabilityError",
    "ElementIndexError",
    # Specialization
    "PrecisionAlias",
    "ShapeSpecialized",
]
