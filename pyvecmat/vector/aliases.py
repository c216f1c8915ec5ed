"""
Shorthands for common vector specializations.

Single precision is numpy.float32, double precision numpy.float64.
"""

import numpy as np

from pyvecmat.core.shape import PrecisionAlias
from pyvecmat.vector._vector import TVector

Vector = PrecisionAlias(TVector, np.float32, "Vector")
DVector = PrecisionAlias(TVector, np.float64, "DVector")

Vec2 = Vector[2]
Vec3 = Vector[3]
Vec4 = Vector[4]

DVec2 = DVector[2]
DVec3 = DVector[3]
DVec4 = DVector[4]
