"""Enumeration of every simple path between two cities.

Depth-first search with backtracking: a city is marked as used while it
is on the current path and unmarked when the search leaves it, so it
can appear again in a later, different path. Neighbours are explored in
ascending index order.

The number of simple paths can grow exponentially with the number of
cycles in the network. Results are produced lazily so callers can stop
early.
"""

from __future__ import annotations

from typing import Iterator, List, Set, Tuple

from ..ports.adjacency import AdjacencyStorePort


def iter_simple_paths(
    store: AdjacencyStorePort, start: int, end: int
) -> Iterator[Tuple[int, ...]]:
    """Yield every simple path from ``start`` to ``end`` as index tuples.

    The traversal keeps its own stack of neighbour iterators instead of
    recursing, so depth is bounded by memory rather than by the
    interpreter's recursion limit. Emission order is the same as the
    recursive formulation.
    """
    path: List[int] = [start]
    on_path: Set[int] = {start}

    if start == end:
        yield (start,)
        return

    pending: List[Iterator[int]] = [iter(store.neighbors(start))]

    while pending:
        neighbor = next(pending[-1], None)

        if neighbor is None:
            pending.pop()
            on_path.discard(path.pop())
            continue

        if neighbor in on_path:
            continue

        if neighbor == end:
            yield tuple(path) + (neighbor,)
            continue

        path.append(neighbor)
        on_path.add(neighbor)
        pending.append(iter(store.neighbors(neighbor)))
