"""Vector models: the generic 3-vector value type.

Usage:
    a = Vector3(1, 3, 2)
    b = Vector3(-3, 0, 4)
    a + b        # Vector3(x=-2, y=3, z=6)
    2 * a        # Vector3(x=2, y=6, z=4)
    a / -2       # truncates toward zero for integer components
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from vertexflow.core.arithmetic import divide_scalar
from vertexflow.core.types import Scalar, is_scalar


@dataclass(frozen=True, slots=True, eq=False)
class Vector3[T: (int, float)]:
    """A point or displacement in Cartesian 3-space.

    Components are read-only after construction. Every arithmetic operation
    returns a new vector, so one instance can be shared by any number of
    owners without copying.

    Supported operators:
        - Vector3 + Vector3
        - Vector3 - Vector3
        - Vector3 * scalar, scalar * Vector3
        - Vector3 / scalar

    Anything else (e.g. ``scalar + Vector3``) raises TypeError.
    """

    x: T
    y: T
    z: T

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[T]:
        """Yield x, y, z in order, allowing ``x, y, z = vector``."""
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3[T]) -> Vector3[T]:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3[T]) -> Vector3[T]:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: Scalar) -> Vector3[Any]:
        if not is_scalar(scalar):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: Scalar) -> Vector3[Any]:
        # Scalar multiplication commutes.
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Scalar) -> Vector3[Any]:
        if not is_scalar(scalar):
            return NotImplemented
        return Vector3(
            divide_scalar(self.x, scalar),
            divide_scalar(self.y, scalar),
            divide_scalar(self.z, scalar),
        )
