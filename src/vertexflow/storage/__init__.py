"""Stateful services."""

from vertexflow.storage.allocator import VertexAllocator

__all__ = [
    "VertexAllocator",
]
