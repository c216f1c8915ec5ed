"""
Tests for the top-level package surface and alias precision.
"""

import numpy as np

import pyvecmat
from pyvecmat import (
    DMat2,
    DMatrix,
    DVec3,
    DVector,
    Mat2,
    Mat3,
    Mat4,
    Matrix,
    TMatrix,
    TVector,
    Vec2,
    Vec3,
    Vec4,
    Vector,
)


class TestAliases:

    def test_single_precision_vectors(self):
        for n, alias in [(2, Vec2), (3, Vec3), (4, Vec4)]:
            assert alias is TVector[np.float32, n]
            assert alias is Vector[n]

    def test_double_precision_vectors(self):
        assert DVec3 is TVector[np.float64, 3]
        assert DVector[5] is TVector[np.float64, 5]

    def test_single_precision_matrices(self):
        for n, alias in [(2, Mat2), (3, Mat3), (4, Mat4)]:
            assert alias is TMatrix[np.float32, n, n]
            assert alias is Matrix[n, n]

    def test_double_precision_matrices(self):
        assert DMat2 is TMatrix[np.float64, 2, 2]
        assert DMatrix[2, 3] is TMatrix[np.float64, 2, 3]


class TestSurface:

    def test_version(self):
        assert pyvecmat.__version__ == "0.1.0"

    def test_all_exports_resolve(self):
        for name in pyvecmat.__all__:
            assert hasattr(pyvecmat, name)
