"""Matrix models.

Only construction and indexing exist for now; matrix arithmetic on vertices
will build on this type.

Usage:
    m = Matrix.of([[5, 1], [2, 5], [2, 3]], rows=3, columns=2)
    m[2][1]     # 3
    m[2, 1]     # 3
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Matrix[T: (int, float)]:
    """Immutable rows-by-columns matrix of elements of type T.

    Rows are stored as a tuple of tuples. Construction rejects empty and
    ragged input.
    """

    elements: tuple[tuple[T, ...], ...]

    def __init__(self, elements: Iterable[Iterable[T]]) -> None:
        rows = tuple(tuple(row) for row in elements)
        if not rows or not rows[0]:
            raise ValueError("Matrix must have at least one row and one column")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} columns, expected {width}")
        object.__setattr__(self, "elements", rows)

    @classmethod
    def of(cls, elements: Iterable[Iterable[T]], *, rows: int, columns: int) -> Matrix[T]:
        """Build a matrix and check it has the declared shape.

        Args:
            elements: Row-major nested iterable.
            rows: Expected number of rows.
            columns: Expected number of columns.

        Returns:
            The new matrix.

        Raises:
            ValueError: If the elements are ragged or the shape differs.
        """
        matrix = cls(elements)
        if matrix.shape != (rows, columns):
            raise ValueError(
                f"Expected a {rows}x{columns} matrix, got {matrix.rows}x{matrix.columns}"
            )
        return matrix

    @property
    def rows(self) -> int:
        return len(self.elements)

    @property
    def columns(self) -> int:
        return len(self.elements[0])

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self.rows, self.columns)

    def __getitem__(self, key: int | tuple[int, int]) -> tuple[T, ...] | T:
        if isinstance(key, tuple):
            row, column = key
            return self.elements[row][column]
        return self.elements[key]
