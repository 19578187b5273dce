"""Adjacency adapters - Implementations of AdjacencyStorePort.

Available implementations:
- AdjacencyMatrix: Fixed capacity x capacity boolean matrix
- AdjacencyList: Per-city neighbour sets, sparse

STORE_BACKENDS maps the configuration names to the store factories.
"""

from typing import Callable, Dict

from ...ports.adjacency import AdjacencyStorePort
from .adjacency_list import AdjacencyList
from .matrix import AdjacencyMatrix

StoreFactory = Callable[[int], AdjacencyStorePort]

STORE_BACKENDS: Dict[str, StoreFactory] = {
    "matrix": AdjacencyMatrix,
    "adjacency_list": AdjacencyList,
}

__all__ = ["AdjacencyMatrix", "AdjacencyList", "STORE_BACKENDS", "StoreFactory"]
