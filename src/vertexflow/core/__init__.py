"""Core functionalities: stateless geometric value types and pure operations.

Architecture Note:
    core/ contains immutable value types and pure functions with no runtime
    state. For the stateful vertex allocator, see storage/.
"""

from vertexflow.core.arithmetic import divide_scalar, ieee_divide, truncating_divide
from vertexflow.core.matrix import Matrix
from vertexflow.core.types import Scalar, is_scalar
from vertexflow.core.vector import (
    Vector3,
    add,
    divide,
    equals,
    scale,
    subtract,
    vector_hash,
)
from vertexflow.core.vertex import (
    POSITION_BITS,
    POSITION_MAX,
    POSITION_MIN,
    Position,
    PositionRangeError,
    Vertex,
    VertexId,
    position_in_range,
)

__all__ = [
    # Types
    "Scalar",
    "is_scalar",
    # Arithmetic
    "truncating_divide",
    "ieee_divide",
    "divide_scalar",
    # Vector
    "Vector3",
    "add",
    "subtract",
    "scale",
    "divide",
    "equals",
    "vector_hash",
    # Matrix
    "Matrix",
    # Vertex
    "Position",
    "POSITION_BITS",
    "POSITION_MIN",
    "POSITION_MAX",
    "PositionRangeError",
    "position_in_range",
    "Vertex",
    "VertexId",
]
