"""Adjacency ports - Abstraction over how routes are stored.

The graph engine only needs to add, remove and query edges and to
enumerate the neighbours of a city. This protocol hides the storage
layout so a dense matrix and a sparse adjacency list can be swapped
without changing the engine.
"""

from __future__ import annotations

from typing import List, Protocol


class AdjacencyStorePort(Protocol):
    """Port for the undirected, unweighted adjacency relation.

    Implementations:
    - adapters/adjacency/matrix.py (AdjacencyMatrix) - Default
    - adapters/adjacency/adjacency_list.py (AdjacencyList)

    Indices are city indices in ``[0, capacity)``. Stores do not check
    whether a city exists at an index; the engine does. Every mutation
    sets or clears both directions and raises IndexError for an index
    outside ``[0, capacity)``.
    """

    @property
    def capacity(self) -> int:
        """Maximum number of cities the store can index."""
        ...

    def add_edge(self, first: int, second: int) -> None:
        """Mark ``first`` and ``second`` as connected, both directions."""
        ...

    def remove_edge(self, first: int, second: int) -> None:
        """Clear the connection between ``first`` and ``second``."""
        ...

    def has_edge(self, first: int, second: int) -> bool:
        """Check if ``first`` and ``second`` are connected."""
        ...

    def neighbors(self, index: int) -> List[int]:
        """Return the indices connected to ``index``, ascending.

        The returned list is a snapshot; later mutations do not affect it.
        """
        ...

    def edge_count(self) -> int:
        """Return the number of undirected edges."""
        ...
