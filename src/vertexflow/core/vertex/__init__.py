"""Vertex functionality: positions, identities and the vertex entity."""

from vertexflow.core.vertex.models import (
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
    "Position",
    "POSITION_BITS",
    "POSITION_MIN",
    "POSITION_MAX",
    "PositionRangeError",
    "position_in_range",
    "Vertex",
    "VertexId",
]
