"""
Shape-tagged specialization of fixed-size value types.

Python cannot carry integer constants in a type the way C++ templates or
Rust const generics do, so fixed-size containers are specialized at runtime
instead:

    TVector[np.float32, 3]      -> cached subclass with length = 3
    TMatrix[float, 2, 3]        -> cached subclass with rows = 2, cols = 3

A specialization is created once per (generic, scalar type, dimensions) key
and reused afterwards, so ``TVector[float, 3] is TVector[float, 3]``. Binary
operations compare specializations before touching any data, which moves
shape mismatches to the earliest point Python allows.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, ClassVar

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.validation import (
    check_dimension,
    check_same_scalar_type,
    check_same_shape,
    check_scalar_type,
)

_SPECIALIZATIONS: dict[tuple[type, type, tuple[int, ...]], type] = {}
_SPECIALIZATIONS_LOCK = threading.Lock()


class ShapeSpecialized:
    """
    Base class for value types parameterized by scalar type and dimensions.

    Subclasses name their dimensions in ``_dimension_names``; each
    specialization receives the scalar type as ``scalar_type`` and every
    dimension as a class attribute of that name.

    Subclasses are frozen dataclasses; specializations inherit their
    fields, equality and hash.
    """

    __slots__ = ()

    _dimension_names: ClassVar[tuple[str, ...]] = ()
    scalar_type: ClassVar[type | None] = None

    def __class_getitem__(cls, params: Any) -> type:
        if cls.scalar_type is not None:
            raise ValidationError(
                f"{cls.__name__} is already specialized; "
                f"subscript the generic {cls.__mro__[1].__name__} instead"
            )

        if not isinstance(params, tuple):
            params = (params,)
        expected = 1 + len(cls._dimension_names)
        if len(params) != expected:
            names = ", ".join(("T",) + cls._dimension_names)
            raise ValidationError(
                f"{cls.__name__}[{names}]: expected {expected} parameters, got {len(params)}"
            )

        scalar_type = check_scalar_type(params[0], f"{cls.__name__} scalar type")
        dims = tuple(
            check_dimension(value, f"{cls.__name__} {name}")
            for name, value in zip(cls._dimension_names, params[1:])
        )

        key = (cls, scalar_type, dims)
        with _SPECIALIZATIONS_LOCK:
            specialized = _SPECIALIZATIONS.get(key)
            if specialized is None:
                specialized = cls._make_specialization(scalar_type, dims)
                _SPECIALIZATIONS[key] = specialized
        return specialized

    @classmethod
    def _make_specialization(cls, scalar_type: type, dims: tuple[int, ...]) -> type:
        name = f"{cls.__name__}[{scalar_type.__name__}, {', '.join(map(str, dims))}]"
        namespace: dict[str, Any] = {
            '__slots__': (),
            '__module__': cls.__module__,
            '__qualname__': name,
            'scalar_type': scalar_type,
        }
        namespace.update(zip(cls._dimension_names, dims))
        # Re-freeze so the subclass rejects new attributes too
        return dataclass(frozen=True, init=False, repr=False, eq=False)(
            type(name, (cls,), namespace)
        )

    @classmethod
    def _require_specialized(cls) -> None:
        if cls.scalar_type is None:
            example = ", ".join(["float"] + ["3"] * len(cls._dimension_names))
            raise ValidationError(
                f"{cls.__name__} must be specialized before use, e.g. {cls.__name__}[{example}]"
            )

    @classmethod
    def dimensions(cls) -> tuple[int, ...]:
        """Dimensions of this specialization, in declaration order."""
        cls._require_specialized()
        return tuple(getattr(cls, name) for name in cls._dimension_names)

    def _check_compatible(self, other: ShapeSpecialized, operation: str) -> None:
        """Reject operands whose shape or scalar type differs from ours."""
        check_same_shape(self.dimensions(), other.dimensions(), operation)
        check_same_scalar_type(self.scalar_type, other.scalar_type, operation)


class PrecisionAlias:
    """
    Subscriptable shorthand that fixes the scalar type of a generic.

    ``Vector = PrecisionAlias(TVector, np.float32, "Vector")`` makes
    ``Vector[3]`` equivalent to ``TVector[np.float32, 3]``.
    """

    def __init__(self, generic: type, scalar_type: type, name: str):
        self._generic = generic
        self._scalar_type = scalar_type
        self._name = name

    def __getitem__(self, dims: Any) -> type:
        if not isinstance(dims, tuple):
            dims = (dims,)
        return self._generic[(self._scalar_type, *dims)]

    def __repr__(self) -> str:
        return f"{self._name} = {self._generic.__name__}[{self._scalar_type.__name__}, ...]"
