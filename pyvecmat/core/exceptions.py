"""
Exception hierarchy for pyvecmat.

All exceptions inherit from PyVecMatError to allow catching any
library-specific error. Shape problems that a statically typed language would
reject at compile time are raised here as DimensionError / ScalarTypeError
before any arithmetic runs.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyVecMatError(Exception):
    """Base exception for all pyvecmat errors."""
    pass


class ValidationError(PyVecMatError):
    """
    Input validation failed.

    Raised when user-provided inputs (constructor components, shape
    parameters) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or incompatible.

    Raised when a constructor receives the wrong number of components, or
    when two operands of a binary operation have shapes that do not fit
    together (different vector lengths, inner dimension mismatch in a
    product).

    Attributes:
        expected: The shape or count that was required
        actual: The shape or count that was supplied
        operation: Name of the operation that rejected the operands
    """

    def __init__(
        self,
        message: str,
        expected: object | None = None,
        actual: object | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.operation = operation


class ScalarTypeError(ValidationError):
    """
    Operands are specialized over different scalar types.

    Attributes:
        expected: Scalar type of the left operand
        actual: Scalar type of the right operand
    """

    def __init__(
        self,
        message: str,
        expected: type | None = None,
        actual: type | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CapabilityError(PyVecMatError, TypeError):
    """
    Scalar type does not provide what an operation needs.

    Raised when an operation requires an operator (addition, division, ...)
    or an identity element that the scalar type does not supply. Also a
    TypeError, since that is what Python raises for unsupported operands.

    Attributes:
        scalar_type: The scalar type that was checked
        capability: The missing capability constant
        operation: Name of the operation that required it
    """

    def __init__(
        self,
        message: str,
        scalar_type: type | None = None,
        capability: str | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.scalar_type = scalar_type
        self.capability = capability
        self.operation = operation


class ElementIndexError(PyVecMatError, IndexError):
    """
    Element access outside a fixed-size container.

    Indicates a programming defect, not an expected runtime condition.
    Callers should not catch it to recover.

    Attributes:
        index: The offending index (int or (row, col) tuple)
        bounds: Valid extent (length, or (rows, cols))
    """

    def __init__(
        self,
        message: str,
        index: object | None = None,
        bounds: object | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds
