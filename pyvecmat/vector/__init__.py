"""
Fixed-length vector module.

Public API:
    TVector[T, N]       - Generic vector over scalar type T with N elements
    Vector[N]           - Single-precision vector (float32)
    DVector[N]          - Double-precision vector (float64)
    Vec2, Vec3, Vec4    - Single-precision 2, 3, 4 component vectors
    DVec2, DVec3, DVec4 - Double-precision 2, 3, 4 component vectors
"""

from pyvecmat.vector._vector import TVector
from pyvecmat.vector.aliases import (
    Vector,
    DVector,
    Vec2,
    Vec3,
    Vec4,
    DVec2,
    DVec3,
    DVec4,
)

__all__ = [
    "TVector",
    "Vector",
    "DVector",
    "Vec2",
    "Vec3",
    "Vec4",
    "DVec2",
    "DVec3",
    "DVec4",
]
