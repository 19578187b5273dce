"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Adjacency storage (dense matrix, per-city neighbour sets)
"""
