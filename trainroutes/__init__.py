"""Top-level package for the train route network.

This package exposes the graph engine that models cities connected by
train routes and answers shortest-route and all-routes queries, plus a
small interactive shell built on top of it.
"""

from .graph.route_graph import RouteGraph

__all__ = ["RouteGraph"]
