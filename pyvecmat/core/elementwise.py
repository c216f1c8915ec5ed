"""
Element-wise combination kernels.

Every element-wise operator in pyvecmat (vector + - * /, matrix + -) is a
call to one of these functions with a different scalar operator, so the
per-index iteration lives in exactly one place.
"""

from typing import Any, Callable, Sequence

BinaryOp = Callable[[Any, Any], Any]


def combine(left: Sequence[Any], right: Sequence[Any], op: BinaryOp) -> tuple[Any, ...]:
    """
    Combine two equal-length sequences pairwise.

    Args:
        left: Left operand elements
        right: Right operand elements, same length as left
        op: Scalar operator applied as op(left[i], right[i])

    Returns:
        Tuple with op applied at every index

    Raises:
        ValueError: If the lengths differ (callers validate shapes first)
    """
    return tuple(op(a, b) for a, b in zip(left, right, strict=True))


def combine_grid(
    left: Sequence[Sequence[Any]],
    right: Sequence[Sequence[Any]],
    op: BinaryOp,
) -> tuple[tuple[Any, ...], ...]:
    """
    Combine two equal-shape nested sequences position by position.

    The nesting order is irrelevant to the result, which is why matrix
    addition and subtraction can work on column-major storage directly.
    """
    return tuple(combine(a, b, op) for a, b in zip(left, right, strict=True))
