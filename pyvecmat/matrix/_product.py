"""
Matrix-vector and matrix-matrix products on column-major storage.

Every dot product is reduced strictly left to right in ascending index
order, starting from the scalar type's additive identity:

    ((zero + a[0]*b[0]) + a[1]*b[1]) + ...

functools.reduce is used rather than the built-in sum(), which applies
compensated summation to Python floats and would make float results differ
from every other scalar type's ordering.
"""

import operator
from functools import reduce
from typing import Any, Iterable

from pyvecmat.matrix._layout import Columns


def dot(left: Iterable[Any], right: Iterable[Any], zero: Any) -> Any:
    """Sum of pairwise products, ascending index order."""
    return reduce(operator.add, map(operator.mul, left, right), zero)


def matvec(data: Columns, rows: int, vector: tuple[Any, ...], zero: Any) -> tuple[Any, ...]:
    """
    Product of an M x N matrix (column-major) and a length-N vector.

    result[i] = sum_j data[j][i] * vector[j]
    """
    return tuple(
        dot((column[i] for column in data), vector, zero)
        for i in range(rows)
    )


def matmul(left: Columns, rows: int, right: Columns, zero: Any) -> Columns:
    """
    Product of an L x M and an M x N matrix, both column-major.

    Column j of the result is the left matrix applied to column j of the
    right matrix, so the result comes out column-major without reshuffling.
    """
    return tuple(matvec(left, rows, column, zero) for column in right)
