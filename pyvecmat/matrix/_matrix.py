"""
Fixed-size matrix over a generic scalar type.

``TMatrix[T, M, N]`` has M rows and N columns. Constructors take values in
row-major (reading) order; storage is column-major, ``data[col][row]``, and
``m[row, col]`` translates between the two.
"""

from __future__ import annotations

import operator
import warnings
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.capabilities import (
    CAPABILITY_ADD,
    CAPABILITY_ADDITIVE_IDENTITY,
    CAPABILITY_MUL,
    CAPABILITY_SUB,
    additive_identity,
    multiplicative_identity,
    require,
)
from pyvecmat.core.compute.precision import is_close, scalar_dtype
from pyvecmat.core.compute.tolerances import select_tolerance
from pyvecmat.core.elementwise import BinaryOp, combine_grid
from pyvecmat.core.exceptions import DimensionError
from pyvecmat.core.shape import ShapeSpecialized
from pyvecmat.core.validation import (
    check_component_count,
    check_index,
    check_inner_dimension,
    check_matrix_index,
    check_same_scalar_type,
)
from pyvecmat.matrix._layout import Columns, row_major_to_columns, transpose_storage
from pyvecmat.matrix._product import matmul, matvec
from pyvecmat.vector import TVector


@dataclass(frozen=True, init=False, repr=False)
class TMatrix(ShapeSpecialized):
    """
    Fixed-size, column-major 2D numeric grid.

    Specialize before use::

        Mat2 = TMatrix[np.float32, 2, 2]
        m = Mat2(1.0, 2.0,
                 3.0, 4.0)      # row-major: m[0, 1] == 2.0

    Supports element-wise ``+`` and ``-`` between equal shapes, and ``@``
    (also spelled ``*``) against a TVector of length N or a TMatrix with N
    rows.

    Attributes:
        data: Column-major storage, data[col][row]
        scalar_type: Element type T (class attribute of the specialization)
        rows: Row count M (class attribute of the specialization)
        cols: Column count N (class attribute of the specialization)
    """

    _dimension_names: ClassVar[tuple[str, ...]] = ('rows', 'cols')
    rows: ClassVar[int]
    cols: ClassVar[int]

    data: Columns

    # Element order would be ambiguous; use row(), column() or data.
    __iter__ = None

    def __init__(self, *components: Any):
        cls = type(self)
        cls._require_specialized()
        check_component_count(components, cls.rows * cls.cols, cls.__name__)
        scalar_type = cls.scalar_type
        values = [scalar_type(c) for c in components]
        object.__setattr__(self, 'data', row_major_to_columns(values, cls.rows, cls.cols))

    @classmethod
    def _wrap(cls, data: Columns) -> TMatrix:
        # Trusted constructor for already-validated column-major storage
        matrix = object.__new__(cls)
        object.__setattr__(matrix, 'data', data)
        return matrix

    # === Alternative constructors ===

    @classmethod
    def from_array(cls, values: Iterable[Any]) -> TMatrix:
        """
        Build from a flat sequence of rows * cols values in row-major order.

        Value k = row * cols + col is stored at data[col][row].
        """
        return cls(*values)

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[Any]]) -> TMatrix:
        """Build from M rows of N values each (plain sequences or TVectors)."""
        cls._require_specialized()
        rows = [tuple(row) for row in rows]
        check_component_count(rows, cls.rows, f"{cls.__name__} rows")
        for row in rows:
            check_component_count(row, cls.cols, f"{cls.__name__} row")
        return cls(*(value for row in rows for value in row))

    @classmethod
    def from_columns(cls, columns: Sequence[Iterable[Any]]) -> TMatrix:
        """Build from N columns of M values each (plain sequences or TVectors)."""
        cls._require_specialized()
        columns = [tuple(column) for column in columns]
        check_component_count(columns, cls.cols, f"{cls.__name__} columns")
        for column in columns:
            check_component_count(column, cls.rows, f"{cls.__name__} column")
        scalar_type = cls.scalar_type
        return cls._wrap(tuple(
            tuple(scalar_type(value) for value in column) for column in columns
        ))

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> TMatrix:
        """
        Build from a 2-D array of shape (rows, cols).

        Warns with RuntimeWarning when the array's dtype cannot be cast to
        T without loss.

        Raises:
            DimensionError: If the array shape is not (rows, cols)
        """
        cls._require_specialized()
        arr = np.asarray(array)
        if arr.shape != (cls.rows, cls.cols):
            raise DimensionError(
                f"{cls.__name__}: expected array of shape ({cls.rows}, {cls.cols}), got {arr.shape}",
                expected=(cls.rows, cls.cols),
                actual=arr.shape,
                operation="from_numpy",
            )
        target = scalar_dtype(cls.scalar_type)
        if not np.can_cast(arr.dtype, target, casting='safe'):
            warnings.warn(
                f"{cls.__name__}: casting {arr.dtype} to {target} may lose precision",
                RuntimeWarning,
                stacklevel=2,
            )
        return cls.from_array(arr.reshape(-1).tolist())

    @classmethod
    def zero(cls) -> TMatrix:
        """Matrix with every element equal to T's additive identity."""
        cls._require_specialized()
        zero = additive_identity(cls.scalar_type)
        return cls._wrap(((zero,) * cls.rows,) * cls.cols)

    @classmethod
    def identity(cls) -> TMatrix:
        """
        Square identity matrix.

        Raises:
            DimensionError: If rows != cols
        """
        cls._require_specialized()
        if cls.rows != cls.cols:
            raise DimensionError(
                f"{cls.__name__}: identity requires a square shape, got {cls.rows}x{cls.cols}",
                expected=(cls.rows, cls.rows),
                actual=(cls.rows, cls.cols),
                operation="identity",
            )
        zero = additive_identity(cls.scalar_type)
        one = multiplicative_identity(cls.scalar_type)
        return cls._wrap(tuple(
            tuple(one if row == col else zero for row in range(cls.rows))
            for col in range(cls.cols)
        ))

    # === Element access ===

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self.rows, self.cols

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = check_matrix_index(key, self.rows, self.cols, type(self).__name__)
        return self.data[col][row]

    def row(self, i: int) -> TVector:
        """Logical row i as a vector of length cols."""
        i = check_index(i, self.rows, f"{type(self).__name__} row")
        return TVector[self.scalar_type, self.cols]._wrap(
            tuple(column[i] for column in self.data)
        )

    def column(self, j: int) -> TVector:
        """Column j as a vector of length rows."""
        j = check_index(j, self.cols, f"{type(self).__name__} column")
        return TVector[self.scalar_type, self.rows]._wrap(self.data[j])

    def transpose(self) -> TMatrix:
        """The cols x rows matrix with rows and columns exchanged."""
        return TMatrix[self.scalar_type, self.cols, self.rows]._wrap(
            transpose_storage(self.data)
        )

    def to_numpy(self) -> NDArray[Any]:
        """Copy the elements into a new (rows, cols) array of T's dtype."""
        return np.array(transpose_storage(self.data), dtype=scalar_dtype(self.scalar_type))

    def is_close(
        self,
        other: TMatrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise closeness within a tolerance.

        Tolerances default to the tier selected for T.

        Raises:
            DimensionError: If the shapes differ
            ScalarTypeError: If the scalar types differ
            TypeError: If other is not a TMatrix
        """
        if not isinstance(other, TMatrix):
            raise TypeError(
                f"{type(self).__name__}.is_close: expected a TMatrix, got {type(other).__name__}"
            )
        self._check_compatible(other, "is_close")
        tier = select_tolerance(self.scalar_type)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return all(
            is_close(a, b, rtol, atol)
            for left, right in zip(self.data, other.data)
            for a, b in zip(left, right)
        )

    # === Arithmetic ===

    def _elementwise(self, other: Any, op: BinaryOp, capability: str, operation: str) -> Any:
        if not isinstance(other, TMatrix):
            return NotImplemented
        self._check_compatible(other, operation)
        require(self.scalar_type, capability, operation=operation)
        return type(self)._wrap(combine_grid(self.data, other.data, op))

    def __add__(self, other: TMatrix) -> TMatrix:
        return self._elementwise(other, operator.add, CAPABILITY_ADD, "matrix addition")

    def __sub__(self, other: TMatrix) -> TMatrix:
        return self._elementwise(other, operator.sub, CAPABILITY_SUB, "matrix subtraction")

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, TVector):
            operation = "matrix-vector product"
            check_inner_dimension(self.cols, other.length, operation)
        elif isinstance(other, TMatrix):
            operation = "matrix-matrix product"
            check_inner_dimension(self.cols, other.rows, operation)
        else:
            return NotImplemented

        scalar_type = self.scalar_type
        check_same_scalar_type(scalar_type, other.scalar_type, operation)
        require(
            scalar_type,
            CAPABILITY_ADD,
            CAPABILITY_MUL,
            CAPABILITY_ADDITIVE_IDENTITY,
            operation=operation,
        )
        zero = additive_identity(scalar_type)

        if isinstance(other, TVector):
            return TVector[scalar_type, self.rows]._wrap(
                matvec(self.data, self.rows, other.data, zero)
            )
        return TMatrix[scalar_type, self.rows, other.cols]._wrap(
            matmul(self.data, self.rows, other.data, zero)
        )

    __mul__ = __matmul__

    # === Value semantics ===

    def __repr__(self) -> str:
        values = (value for row in transpose_storage(self.data) for value in row)
        return f"{type(self).__name__}({', '.join(str(x) for x in values)})"

