"""Matrix functionality."""

from vertexflow.core.matrix.models import Matrix

__all__ = [
    "Matrix",
]
