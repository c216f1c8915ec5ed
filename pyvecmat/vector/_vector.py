"""
Fixed-length vector over a generic scalar type.

``TVector[T, N]`` holds exactly N elements of scalar type T. Instances are
immutable values: every operator returns a new vector and nothing is shared
between instances except the (immutable) elements themselves.
"""

from __future__ import annotations

import operator
import warnings
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.capabilities import (
    CAPABILITY_ADD,
    CAPABILITY_DIV,
    CAPABILITY_MUL,
    CAPABILITY_SUB,
    additive_identity,
    require,
)
from pyvecmat.core.compute.precision import is_close, scalar_dtype
from pyvecmat.core.compute.tolerances import select_tolerance
from pyvecmat.core.elementwise import BinaryOp, combine
from pyvecmat.core.exceptions import DimensionError
from pyvecmat.core.shape import ShapeSpecialized
from pyvecmat.core.validation import check_component_count, check_index


@dataclass(frozen=True, init=False, repr=False)
class TVector(ShapeSpecialized):
    """
    Fixed-length numeric tuple with element-wise arithmetic.

    Specialize before use::

        Vec3 = TVector[np.float32, 3]
        v = Vec3(1.0, 2.0, 3.0)

    Components passed to the constructor are converted with ``T(value)``.
    Results of arithmetic hold whatever T's operators return; for T = int,
    division therefore yields float elements, exactly as ``int / int`` does.

    Attributes:
        data: Elements in order
        scalar_type: Element type T (class attribute of the specialization)
        length: Number of elements N (class attribute of the specialization)
    """

    _dimension_names: ClassVar[tuple[str, ...]] = ('length',)
    length: ClassVar[int]

    data: tuple[Any, ...]

    def __init__(self, *components: Any):
        cls = type(self)
        cls._require_specialized()
        check_component_count(components, cls.length, cls.__name__)
        scalar_type = cls.scalar_type
        object.__setattr__(self, 'data', tuple(scalar_type(c) for c in components))

    @classmethod
    def _wrap(cls, data: tuple[Any, ...]) -> TVector:
        # Trusted constructor for already-validated element tuples
        vector = object.__new__(cls)
        object.__setattr__(vector, 'data', data)
        return vector

    # === Alternative constructors ===

    @classmethod
    def zero(cls) -> TVector:
        """Vector with every element equal to T's additive identity."""
        cls._require_specialized()
        return cls._wrap((additive_identity(cls.scalar_type),) * cls.length)

    @classmethod
    def from_array(cls, values: Iterable[Any]) -> TVector:
        """Build from any iterable of exactly N values."""
        return cls(*values)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> TVector:
        """
        Build from a 1-D array of length N.

        Warns with RuntimeWarning when the array's dtype cannot be cast to
        T without loss (e.g. int64 or float64 into float32).

        Raises:
            DimensionError: If the array is not 1-D of length N
        """
        cls._require_specialized()
        arr = np.asarray(array)
        if arr.shape != (cls.length,):
            raise DimensionError(
                f"{cls.__name__}: expected array of shape ({cls.length},), got {arr.shape}",
                expected=(cls.length,),
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
        return cls(*arr.tolist())

    # === Element access ===

    def __getitem__(self, index: int) -> Any:
        return self.data[check_index(index, self.length, type(self).__name__)]

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def to_numpy(self) -> NDArray[Any]:
        """Copy the elements into a new 1-D array of T's dtype."""
        return np.array(self.data, dtype=scalar_dtype(self.scalar_type))

    # === Predicates ===

    def is_zero(self) -> bool:
        """True iff every element equals T's additive identity."""
        zero = additive_identity(self.scalar_type)
        return all(element == zero for element in self.data)

    def is_close(
        self,
        other: TVector,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Element-wise closeness within a tolerance.

        Tolerances default to the tier selected for T (exact equality for
        integer and rational types).

        Raises:
            DimensionError: If the lengths differ
            ScalarTypeError: If the scalar types differ
            TypeError: If other is not a TVector
        """
        if not isinstance(other, TVector):
            raise TypeError(
                f"{type(self).__name__}.is_close: expected a TVector, got {type(other).__name__}"
            )
        self._check_compatible(other, "is_close")
        tier = select_tolerance(self.scalar_type)
        rtol = tier.rtol if rtol is None else rtol
        atol = tier.atol if atol is None else atol
        return all(is_close(a, b, rtol, atol) for a, b in zip(self.data, other.data))

    # === Arithmetic ===

    def _elementwise(self, other: Any, op: BinaryOp, capability: str, operation: str) -> Any:
        if not isinstance(other, TVector):
            return NotImplemented
        self._check_compatible(other, operation)
        require(self.scalar_type, capability, operation=operation)
        return type(self)._wrap(combine(self.data, other.data, op))

    def __add__(self, other: TVector) -> TVector:
        return self._elementwise(other, operator.add, CAPABILITY_ADD, "vector addition")

    def __sub__(self, other: TVector) -> TVector:
        return self._elementwise(other, operator.sub, CAPABILITY_SUB, "vector subtraction")

    def __mul__(self, other: TVector) -> TVector:
        return self._elementwise(other, operator.mul, CAPABILITY_MUL, "vector multiplication")

    def __truediv__(self, other: TVector) -> TVector:
        return self._elementwise(other, operator.truediv, CAPABILITY_DIV, "vector division")

    # === Value semantics ===

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(x) for x in self.data)})"

