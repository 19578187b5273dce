"""Graph engine for the train route network.

This subpackage contains the RouteGraph engine, the path-finding
algorithms it runs over an adjacency store, and the demo network the
interactive shell starts from.
"""

from .dijkstra import dijkstra
from .network import DEMO_CITIES, DEMO_ROUTES, build_demo_network
from .paths import iter_simple_paths
from .route_graph import RouteGraph

__all__ = [
    "RouteGraph",
    "dijkstra",
    "iter_simple_paths",
    "build_demo_network",
    "DEMO_CITIES",
    "DEMO_ROUTES",
]
