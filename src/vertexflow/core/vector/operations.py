"""Pure functions naming the vector operations.

Each function mirrors an operator on Vector3 but raises TypeError with a
descriptive message instead of relying on Python's operator fallback. Useful
where operations are passed around as values, e.g. ``reduce(add, vectors)``.
"""

from __future__ import annotations

from typing import Any

from vertexflow.core.types import Scalar, is_scalar
from vertexflow.core.vector.models import Vector3


def _require_vector(op: str, value: Any) -> None:
    if not isinstance(value, Vector3):
        raise TypeError(f"Operation {op} not defined for {type(value).__name__}, expected Vector3")


def _require_scalar(op: str, value: Any) -> None:
    if not is_scalar(value):
        raise TypeError(f"Operation {op} not defined for Vector3 and {type(value).__name__}")


def equals[T: (int, float)](a: Vector3[T], b: Vector3[T]) -> bool:
    """Check componentwise equality using native numeric equality.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        True if all three components compare equal.

    Raises:
        TypeError: If either operand is not a Vector3.
    """
    _require_vector("equals", a)
    _require_vector("equals", b)
    return a == b


def vector_hash(v: Vector3[Any]) -> int:
    """Hash a vector consistently with equals()."""
    _require_vector("hash", v)
    return hash(v)


def add[T: (int, float)](a: Vector3[T], b: Vector3[T]) -> Vector3[T]:
    """Componentwise sum of two vectors.

    Raises:
        TypeError: If either operand is not a Vector3.
    """
    _require_vector("add", a)
    _require_vector("add", b)
    return a + b


def subtract[T: (int, float)](a: Vector3[T], b: Vector3[T]) -> Vector3[T]:
    """Componentwise difference ``a - b``.

    Raises:
        TypeError: If either operand is not a Vector3.
    """
    _require_vector("subtract", a)
    _require_vector("subtract", b)
    return a - b


def scale(v: Vector3[Any], s: Scalar) -> Vector3[Any]:
    """Multiply every component by a scalar.

    Args:
        v: Vector to scale.
        s: Real scalar; need not share the vector's element type.

    Returns:
        New scaled vector.

    Raises:
        TypeError: If v is not a Vector3 or s is not a real number.
    """
    _require_vector("scale", v)
    _require_scalar("scale", s)
    return v * s


def divide(v: Vector3[Any], s: Scalar) -> Vector3[Any]:
    """Divide every component by a scalar.

    Integer components divided by an integer truncate toward zero. Any float
    operand gives IEEE 754 results, including ``inf``/``nan`` for a zero
    divisor.

    Args:
        v: Vector to divide.
        s: Real scalar divisor.

    Returns:
        New divided vector.

    Raises:
        TypeError: If v is not a Vector3 or s is not a real number.
        ZeroDivisionError: If an integer component is divided by integer zero.
    """
    _require_vector("divide", v)
    _require_scalar("divide", s)
    return v / s
