"""VertexFlow: geometric primitives for mapping.

Usage:
    from vertexflow import Vector3, VertexAllocator

    a = Vector3(1, 3, 2)
    b = Vector3(-3, 0, 4)
    assert a + b == Vector3(-2, 3, 6)
    assert 2 * a == a * 2

    allocator = VertexAllocator()
    vertex = allocator.create_vertex(Vector3(1200, -50, 3))
"""

__version__ = "0.1.0"

# Core primitives
from vertexflow.core import (
    POSITION_MAX,
    POSITION_MIN,
    Matrix,
    Position,
    PositionRangeError,
    Scalar,
    Vector3,
    Vertex,
    VertexId,
    add,
    divide,
    equals,
    position_in_range,
    scale,
    subtract,
    vector_hash,
)

# Configuration
from vertexflow.config import GeometrySettings

# Storage
from vertexflow.storage import VertexAllocator

__all__ = [
    # Version
    "__version__",
    # Core
    "Scalar",
    "Vector3",
    "add",
    "subtract",
    "scale",
    "divide",
    "equals",
    "vector_hash",
    "Matrix",
    "Position",
    "POSITION_MIN",
    "POSITION_MAX",
    "PositionRangeError",
    "position_in_range",
    "Vertex",
    "VertexId",
    # Config
    "GeometrySettings",
    # Storage
    "VertexAllocator",
]
