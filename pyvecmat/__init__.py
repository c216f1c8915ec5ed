"""
pyvecmat: fixed-size vectors and matrices over a generic scalar type.

Shapes are part of the type: ``TVector[np.float32, 3]`` and
``TMatrix[float, 2, 3]`` are distinct specializations, and operands whose
shapes do not fit are rejected before any arithmetic runs.

Submodules:
    vector: TVector and single/double precision aliases
    matrix: TMatrix, column-major storage, products
    core: Exceptions, capability checks, validation, tolerances
"""

__version__ = "0.1.0"

from pyvecmat import core
from pyvecmat import vector
from pyvecmat import matrix
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    ScalarTypeError,
    CapabilityError,
    ElementIndexError,
)
from pyvecmat.vector import (
    TVector,
    Vector,
    DVector,
    Vec2,
    Vec3,
    Vec4,
    DVec2,
    DVec3,
    DVec4,
)
from pyvecmat.matrix import (
    TMatrix,
    Matrix,
    DMatrix,
    Mat2,
    Mat3,
    Mat4,
    DMat2,
    DMat3,
    DMat4,
)

__all__ = [
    "__version__",
    # Submodules
    "core",
    "vector",
    "matrix",
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "ScalarTypeError",
    "CapabilityError",
    "ElementIndexError",
    # Vectors
    "TVector",
    "Vector",
    "DVector",
    "Vec2",
    "Vec3",
    "Vec4",
    "DVec2",
    "DVec3",
    "DVec4",
    # Matrices
    "TMatrix",
    "Matrix",
    "DMatrix",
    "Mat2",
    "Mat3",
    "Mat4",
    "DMat2",
    "DMat3",
    "DMat4",
]
