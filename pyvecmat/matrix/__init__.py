"""
Fixed-size matrix module.

Storage is column-major; constructors and indexing use logical
(row, col) order.

Public API:
    TMatrix[T, M, N]    - Generic M x N matrix over scalar type T
    Matrix[M, N]        - Single-precision matrix (float32)
    DMatrix[M, N]       - Double-precision matrix (float64)
    Mat2, Mat3, Mat4    - Single-precision square matrices
    DMat2, DMat3, DMat4 - Double-precision square matrices
"""

from pyvecmat.matrix._matrix import TMatrix
from pyvecmat.matrix.aliases import (
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
