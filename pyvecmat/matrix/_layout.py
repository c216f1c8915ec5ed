"""
Row-major / column-major index translation.

Callers write matrix values in reading order (row by row); storage keeps
one tuple per column. These helpers are the only place where the two orders
meet; every other matrix routine works on the column-major tuples directly.
"""

from typing import Any, Sequence

Columns = tuple[tuple[Any, ...], ...]


def storage_position(k: int, cols: int) -> tuple[int, int]:
    """
    Physical (column, row) slot of the k-th row-major input value.

    For k = row * cols + col the value lands at data[col][row].
    """
    row, col = divmod(k, cols)
    return col, row


def row_major_to_columns(values: Sequence[Any], rows: int, cols: int) -> Columns:
    """Place rows * cols row-major values into column-major storage."""
    columns: list[list[Any]] = [[None] * rows for _ in range(cols)]
    for k, value in enumerate(values):
        col, row = storage_position(k, cols)
        columns[col][row] = value
    return tuple(tuple(column) for column in columns)


def transpose_storage(data: Columns) -> Columns:
    """
    Swap the roles of the outer and inner storage axes.

    Reading column-major storage row-wise: element i of the result is
    logical row i of the input matrix.
    """
    return tuple(zip(*data))
