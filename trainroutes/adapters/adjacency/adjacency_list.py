"""Sparse adjacency store.

Keeps one neighbour set per city index. Memory grows with the number
of routes rather than with the square of the capacity.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict, List, Set


@dataclass
class AdjacencyList:
    """Adjacency store backed by per-city neighbour sets.

    Implements AdjacencyStorePort. Neighbours are returned sorted so
    traversal order matches the matrix store.

    Attributes:
        size: Highest city index plus one that the store accepts
    """

    size: int
    _neighbors: DefaultDict[int, Set[int]] = field(
        default_factory=lambda: defaultdict(set), init=False, repr=False
    )

    @property
    def capacity(self) -> int:
        return self.size

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"City index {index} outside store of size {self.size}")

    def add_edge(self, first: int, second: int) -> None:
        self._check(first)
        self._check(second)
        self._neighbors[first].add(second)
        self._neighbors[second].add(first)

    def remove_edge(self, first: int, second: int) -> None:
        self._check(first)
        self._check(second)
        self._neighbors[first].discard(second)
        self._neighbors[second].discard(first)

    def has_edge(self, first: int, second: int) -> bool:
        return second in self._neighbors.get(first, ())

    def neighbors(self, index: int) -> List[int]:
        return sorted(self._neighbors.get(index, ()))

    def edge_count(self) -> int:
        return sum(len(linked) for linked in self._neighbors.values()) // 2
