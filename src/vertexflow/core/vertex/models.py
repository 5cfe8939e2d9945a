"""Vertex models: positions and the vertex entity.

VertexFlow is unit and datum agnostic. A position is merely a point in
3-space expressed in some arbitrary unit; datums and units belong to import
and export pipelines that transform vertices.

Positions are integers to avoid floating point precision decay. A signed
64-bit component covers roughly +-9.2e18 units per axis: at a 1 mm unit that
is about 18.45 trillion km per axis at millimetre precision.

Usage:
    vertex = Vertex(id=VertexId(index=0), position=Vector3(1200, -50, 3))
    moved = vertex.moved_by(Vector3(0, 0, 10))
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from vertexflow.core.vector import Vector3

type Position = Vector3[int]
"""A point in 3-space with signed 64-bit integer components."""

POSITION_BITS = 64
POSITION_MIN = -(2 ** (POSITION_BITS - 1))
POSITION_MAX = 2 ** (POSITION_BITS - 1) - 1


class PositionRangeError(ValueError):
    """Raised when a position component does not fit the configured integer width."""


def position_in_range(position: Position, bits: int = POSITION_BITS) -> bool:
    """Check every component fits a signed integer of the given width.

    Args:
        position: Position to check.
        bits: Width of the signed integer, 64 by default.

    Returns:
        True if all components lie in [-2**(bits-1), 2**(bits-1) - 1].
    """
    low = -(2 ** (bits - 1))
    high = 2 ** (bits - 1) - 1
    return all(low <= component <= high for component in position)


@dataclass(frozen=True, slots=True)
class VertexId:
    """Vertex identifier with generation for safe handle reuse."""

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))


@dataclass(frozen=True, slots=True)
class Vertex:
    """A point in Cartesian 3-space plus the metadata used to track it.

    A vertex might be a spot height, or the intersection of the lines,
    splines and polygons that make up map data.
    """

    id: VertexId
    position: Position

    def moved_by(self, displacement: Position) -> Vertex:
        """Return a copy of this vertex translated by a displacement.

        Args:
            displacement: Vector added to the current position.

        Returns:
            New vertex with the same id.
        """
        return replace(self, position=self.position + displacement)
