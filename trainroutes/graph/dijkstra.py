"""Shortest-path computation using Dijkstra's algorithm.

Every route has unit weight, so distances equal hop counts, but the
relaxation is kept in Dijkstra form. The unvisited node with the
smallest distance is chosen by a linear ``<=`` scan over city indices:
among equally distant candidates the highest index wins. This fixes
which of several equally short paths is returned.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..ports.adjacency import AdjacencyStorePort

EDGE_WEIGHT = 1.0
INFINITY = float("inf")


def dijkstra(
    store: AdjacencyStorePort, node_count: int, start: int, end: int
) -> Tuple[List[int], float]:
    """Compute the shortest path between two cities using Dijkstra.

    Parameters
    ----------
    store:
        Adjacency relation of the network.
    node_count:
        Number of cities; only indices below it are considered.
    start:
        Index of the departure city.
    end:
        Index of the arrival city.

    Returns
    -------
    list[int], float
        The sequence of city indices from ``start`` to ``end``
        (inclusive) and the total distance. ``start == end`` yields
        ``([start], 0.0)``. If no path exists, returns
        ``([], float("inf"))``.
    """
    if not (0 <= start < node_count and 0 <= end < node_count):
        return [], INFINITY

    distances: List[float] = [INFINITY] * node_count
    parents: List[Optional[int]] = [None] * node_count
    visited: List[bool] = [False] * node_count
    distances[start] = 0.0

    for _ in range(node_count - 1):
        u = _min_distance(distances, visited)
        visited[u] = True

        if distances[u] == INFINITY:
            continue

        for v in store.neighbors(u):
            if v >= node_count or visited[v]:
                continue
            new_distance = distances[u] + EDGE_WEIGHT
            if new_distance < distances[v]:
                distances[v] = new_distance
                parents[v] = u

    if end != start and parents[end] is None:
        return [], INFINITY

    return _walk_back(parents, end), distances[end]


def _min_distance(distances: Sequence[float], visited: Sequence[bool]) -> int:
    min_dist = INFINITY
    min_index = -1

    for v, distance in enumerate(distances):
        if not visited[v] and distance <= min_dist:
            min_dist = distance
            min_index = v

    return min_index


def _walk_back(parents: Sequence[Optional[int]], end: int) -> List[int]:
    path: List[int] = []
    current: Optional[int] = end
    while current is not None:
        path.append(current)
        current = parents[current]

    path.reverse()
    return path
