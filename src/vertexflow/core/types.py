"""Core type definitions for VertexFlow."""

from typing import Any, TypeGuard

type Scalar = int | float
"""An int or float usable as a scalar operand (bool excluded)."""


def is_scalar(value: Any) -> TypeGuard[Scalar]:
    """Check whether a value can scale or divide a vector.

    Args:
        value: Candidate scalar operand.

    Returns:
        True for int and float (including subclasses) except bool.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)
