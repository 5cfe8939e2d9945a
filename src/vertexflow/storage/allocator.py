"""Vertex allocation service.

VertexAllocator is a stateful service that manages the vertex ID lifecycle.
"""

from __future__ import annotations

import logging

from vertexflow.config import GeometrySettings
from vertexflow.core.vertex import (
    Position,
    PositionRangeError,
    Vertex,
    VertexId,
    position_in_range,
)

logger = logging.getLogger(__name__)


class VertexAllocator:
    """Allocates vertex IDs with generation tracking for recycling.

    Maintains a free list of deallocated indices with incremented generations
    so a recycled index never matches a stale handle.

    Args:
        settings: Geometry settings; loaded from the environment if omitted.
    """

    def __init__(self, settings: GeometrySettings | None = None):
        self._settings = settings if settings is not None else GeometrySettings()
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._free_indices: set[int] = set()
        self._generations: dict[int, int] = {}

    @property
    def settings(self) -> GeometrySettings:
        return self._settings

    def allocate(self) -> VertexId:
        """Allocate a new vertex ID, reusing recycled slots when available.

        Returns:
            Newly allocated VertexId. Reused IDs carry an incremented generation.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            self._free_indices.discard(index)
            logger.debug("Reusing vertex index %d at generation %d", index, gen)
            return VertexId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return VertexId(index=index, generation=0)

    def deallocate(self, vertex_id: VertexId) -> None:
        """Return a vertex ID for reuse with incremented generation.

        Args:
            vertex_id: ID to release.

        Raises:
            ValueError: If the ID is not alive (never allocated or already freed).
        """
        if not self.is_alive(vertex_id):
            raise ValueError(f"Cannot deallocate {vertex_id}: not alive")

        new_gen = vertex_id.generation + 1
        self._generations[vertex_id.index] = new_gen
        self._free_list.append((vertex_id.index, new_gen))
        self._free_indices.add(vertex_id.index)
        logger.debug("Released vertex index %d, next generation %d", vertex_id.index, new_gen)

    def is_alive(self, vertex_id: VertexId) -> bool:
        """Check whether a vertex ID is still valid (not recycled).

        Returns:
            True if the ID's generation matches the current one for its index
            and the index is not waiting on the free list.
        """
        current_gen = self._generations.get(vertex_id.index, -1)
        if current_gen != vertex_id.generation:
            return False
        return vertex_id.index not in self._free_indices

    def create_vertex(self, position: Position) -> Vertex:
        """Allocate an ID and build a vertex at the given position.

        Args:
            position: Integer position of the new vertex.

        Returns:
            The new Vertex.

        Raises:
            PositionRangeError: If range checking is enabled and a component
                does not fit ``settings.position_bits``.
        """
        if self._settings.check_position_range and not position_in_range(
            position, self._settings.position_bits
        ):
            raise PositionRangeError(
                f"Position {position} does not fit a signed "
                f"{self._settings.position_bits}-bit integer"
            )
        return Vertex(id=self.allocate(), position=position)
