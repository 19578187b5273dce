"""Dense adjacency matrix store.

A ``capacity x capacity`` matrix of booleans, allocated once. Suitable
for the small, fixed city counts the network is designed for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class AdjacencyMatrix:
    """Adjacency store backed by a square boolean matrix.

    Implements AdjacencyStorePort.

    Attributes:
        size: Number of rows and columns (the network capacity)
    """

    size: int
    _matrix: List[List[bool]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._matrix = [[False] * self.size for _ in range(self.size)]

    @property
    def capacity(self) -> int:
        return self.size

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"City index {index} outside store of size {self.size}")

    def add_edge(self, first: int, second: int) -> None:
        self._check(first)
        self._check(second)
        self._matrix[first][second] = True
        self._matrix[second][first] = True

    def remove_edge(self, first: int, second: int) -> None:
        self._check(first)
        self._check(second)
        self._matrix[first][second] = False
        self._matrix[second][first] = False

    def has_edge(self, first: int, second: int) -> bool:
        return self._matrix[first][second]

    def neighbors(self, index: int) -> List[int]:
        return [column for column, linked in enumerate(self._matrix[index]) if linked]

    def edge_count(self) -> int:
        return sum(
            1
            for row in range(self.size)
            for column in range(row + 1, self.size)
            if self._matrix[row][column]
        )

    def rows(self) -> List[List[bool]]:
        """Return a copy of the matrix."""
        return [list(row) for row in self._matrix]
