"""
Input validation utilities for pyvecmat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent coercion of shapes or indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any, Sequence

from pyvecmat.core.exceptions import (
    DimensionError,
    ElementIndexError,
    ScalarTypeError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a shape parameter (vector length, row or column count).

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a positive integer
    """
    # bool is an Integral, but True is not a dimension
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: dimension must be an int, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: dimension must be positive, got {value}")
    return int(value)


def check_scalar_type(scalar_type: Any, name: str) -> type:
    """
    Validate a scalar element type parameter.

    Raises:
        ValidationError: If scalar_type is not a class
    """
    if not isinstance(scalar_type, type):
        raise ValidationError(
            f"{name}: scalar type must be a class, got {scalar_type!r}"
        )
    return scalar_type


def check_component_count(
    components: Sequence[Any],
    expected: int,
    name: str,
) -> None:
    """
    Verify a constructor received exactly the expected number of values.

    Raises:
        DimensionError: If len(components) != expected
    """
    if len(components) != expected:
        raise DimensionError(
            f"{name}: expected {expected} components, got {len(components)}",
            expected=expected,
            actual=len(components),
            operation="construction",
        )


def check_index(index: Any, length: int, name: str) -> int:
    """
    Verify an element index lies in [0, length).

    Negative indices are rejected: containers here are fixed-size arrays,
    not Python sequences.

    Raises:
        ElementIndexError: If index is not an int or is out of range
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ElementIndexError(
            f"{name}: index must be an int, got {type(index).__name__} {index!r}",
            index=index,
            bounds=length,
        )
    if not 0 <= index < length:
        raise ElementIndexError(
            f"{name}: index {index} out of bounds for length {length}",
            index=index,
            bounds=length,
        )
    return int(index)


def check_matrix_index(key: Any, rows: int, cols: int, name: str) -> tuple[int, int]:
    """
    Verify a (row, col) key addresses an element of a rows x cols matrix.

    Raises:
        ElementIndexError: If key is not a pair or either part is out of range
    """
    if not isinstance(key, tuple) or len(key) != 2:
        raise ElementIndexError(
            f"{name}: expected a (row, col) index, got {key!r}",
            index=key,
            bounds=(rows, cols),
        )
    row, col = key
    try:
        row = check_index(row, rows, f"{name} row")
        col = check_index(col, cols, f"{name} column")
    except ElementIndexError as e:
        raise ElementIndexError(str(e), index=key, bounds=(rows, cols)) from e
    return row, col


def check_same_scalar_type(left: type, right: type, operation: str) -> None:
    """
    Verify both operands share a scalar type.

    Raises:
        ScalarTypeError: If the scalar types differ
    """
    if left is not right:
        raise ScalarTypeError(
            f"{operation}: scalar types differ ({left.__name__} vs {right.__name__})",
            expected=left,
            actual=right,
        )


def check_same_shape(
    expected: tuple[int, ...],
    actual: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if expected != actual:
        raise DimensionError(
            f"{operation}: shape mismatch, expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
            operation=operation,
        )


def check_inner_dimension(left_cols: int, right_rows: int, operation: str) -> None:
    """
    Verify the shared inner dimension of a product.

    The left operand's column count must equal the right operand's row
    count (or vector length).

    Raises:
        DimensionError: If the inner dimensions disagree
    """
    if left_cols != right_rows:
        raise DimensionError(
            f"{operation}: inner dimensions disagree "
            f"(left has {left_cols} columns, right has {right_rows} rows)",
            expected=left_cols,
            actual=right_rows,
            operation=operation,
        )
