"""
Shorthands for common matrix specializations.

Single precision is numpy.float32, double precision numpy.float64.
"""

import numpy as np

from pyvecmat.core.shape import PrecisionAlias
from pyvecmat.matrix._matrix import TMatrix

Matrix = PrecisionAlias(TMatrix, np.float32, "Matrix")
DMatrix = PrecisionAlias(TMatrix, np.float64, "DMatrix")

Mat2 = Matrix[2, 2]
Mat3 = Matrix[3, 3]
Mat4 = Matrix[4, 4]

DMat2 = DMatrix[2, 2]
DMat3 = DMatrix[3, 3]
DMat4 = DMatrix[4, 4]
