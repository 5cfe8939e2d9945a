"""Vector functionality: the Vector3 value type and its named operations."""

from vertexflow.core.vector.models import Vector3
from vertexflow.core.vector.operations import (
    add,
    divide,
    equals,
    scale,
    subtract,
    vector_hash,
)

__all__ = [
    # Models
    "Vector3",
    # Operations
    "add",
    "subtract",
    "scale",
    "divide",
    "equals",
    "vector_hash",
]
