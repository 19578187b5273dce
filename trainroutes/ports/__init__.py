"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph engine and the storage
adapters it is composed with, so the engine can be tested against any
backing representation.
"""

from .adjacency import AdjacencyStorePort

__all__ = ["AdjacencyStorePort"]
