"""
Scalar capability constants and checks for pyvecmat.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Each operation declares the minimal set of capabilities its scalar type
must supply instead of requiring one monolithic numeric interface:

    element-wise addition     -> CAPABILITY_ADD
    element-wise division     -> CAPABILITY_DIV
    zero(), is_zero()         -> CAPABILITY_ADDITIVE_IDENTITY
    matrix products           -> CAPABILITY_ADD, CAPABILITY_MUL,
                                 CAPABILITY_ADDITIVE_IDENTITY

Usage:
    from pyvecmat.core.capabilities import CAPABILITY_ADD, require

    require(np.float32, CAPABILITY_ADD, operation="vector addition")
"""

import operator
from typing import Any

from pyvecmat.core.exceptions import CapabilityError

# Scalar supports a + b
CAPABILITY_ADD = 'add'

# Scalar supports a - b
CAPABILITY_SUB = 'sub'

# Scalar supports a * b
CAPABILITY_MUL = 'mul'

# Scalar supports a / b
CAPABILITY_DIV = 'div'

# T(0) yields the additive identity
CAPABILITY_ADDITIVE_IDENTITY = 'additive_identity'

# T(1) yields the multiplicative identity
CAPABILITY_MULTIPLICATIVE_IDENTITY = 'multiplicative_identity'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_ADD,
    CAPABILITY_SUB,
    CAPABILITY_MUL,
    CAPABILITY_DIV,
    CAPABILITY_ADDITIVE_IDENTITY,
    CAPABILITY_MULTIPLICATIVE_IDENTITY,
})

_OPERATORS = {
    CAPABILITY_ADD: ('__add__', operator.add),
    CAPABILITY_SUB: ('__sub__', operator.sub),
    CAPABILITY_MUL: ('__mul__', operator.mul),
    CAPABILITY_DIV: ('__truediv__', operator.truediv),
}

_IDENTITIES = {
    CAPABILITY_ADDITIVE_IDENTITY: (0, operator.add),
    CAPABILITY_MULTIPLICATIVE_IDENTITY: (1, operator.mul),
}


def _supports_operator(scalar_type: type, capability: str) -> bool:
    method, op = _OPERATORS[capability]
    if not callable(getattr(scalar_type, method, None)):
        return False
    try:
        one = scalar_type(1)
    except (TypeError, ValueError):
        # Not constructible from 1: the method is all we can check
        return True
    try:
        op(one, one)
    except TypeError:
        return False
    return True


def _supports_identity(scalar_type: type, capability: str) -> bool:
    seed, op = _IDENTITIES[capability]
    try:
        identity = scalar_type(seed)
    except (TypeError, ValueError):
        return False
    try:
        return bool(op(identity, identity) == identity)
    except TypeError:
        # No operator to hold the identity against
        return True


def supports(scalar_type: type, capability: str) -> bool:
    """
    Check whether a scalar type provides a capability.

    Operator capabilities need the dunder method on the type (as Python's
    operator dispatch does) and must succeed on T(1) op T(1) when T can be
    built from 1. Identity capabilities need T(0) / T(1) to construct and,
    where the matching operator exists, to be idempotent under it
    (0 + 0 == 0, 1 * 1 == 1).

    Raises:
        ValueError: If capability is not one of ALL_CAPABILITIES
    """
    if capability not in ALL_CAPABILITIES:
        raise ValueError(f"Unknown capability: {capability!r}")

    if capability in _OPERATORS:
        return _supports_operator(scalar_type, capability)
    return _supports_identity(scalar_type, capability)


def require(scalar_type: type, *capabilities: str, operation: str) -> None:
    """
    Verify a scalar type provides every listed capability.

    Args:
        scalar_type: Element type of the operands
        *capabilities: Capability constants the operation needs
        operation: Operation name for error messages

    Raises:
        CapabilityError: On the first missing capability
    """
    for capability in capabilities:
        if not supports(scalar_type, capability):
            raise CapabilityError(
                f"{operation}: scalar type {scalar_type.__name__} "
                f"does not support '{capability}'",
                scalar_type=scalar_type,
                capability=capability,
                operation=operation,
            )


def additive_identity(scalar_type: type) -> Any:
    """Return T(0), or raise CapabilityError if T has no additive identity."""
    require(scalar_type, CAPABILITY_ADDITIVE_IDENTITY, operation="additive identity")
    return scalar_type(0)


def multiplicative_identity(scalar_type: type) -> Any:
    """Return T(1), or raise CapabilityError if T has no multiplicative identity."""
    require(scalar_type, CAPABILITY_MULTIPLICATIVE_IDENTITY, operation="multiplicative identity")
    return scalar_type(1)


__all__ = [
    'CAPABILITY_ADD',
    'CAPABILITY_SUB',
    'CAPABILITY_MUL',
    'CAPABILITY_DIV',
    'CAPABILITY_ADDITIVE_IDENTITY',
    'CAPABILITY_MULTIPLICATIVE_IDENTITY',
    'ALL_CAPABILITIES',
    'supports',
    'require',
    'additive_identity',
    'multiplicative_identity',
]
