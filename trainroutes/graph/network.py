"""Demo network of Java rail connections.

The interactive shell starts from this network so every menu option has
something to work on. Indices follow the order of DEMO_CITIES.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..config import GraphConfig
from .route_graph import RouteGraph

DEMO_CAPACITY = 20

DEMO_CITIES: Tuple[str, ...] = (
    "Jakarta",  # 0
    "Kediri",  # 1
    "Malang",  # 2
    "Surabaya",  # 3
    "Banyuwangi",  # 4
    "Bandung",  # 5
    "Semarang",  # 6
    "Kutoarjo",  # 7
    "Purwokerto",  # 8
    "Yogyakarta",  # 9
    "Solo",  # 10
    "Nganjuk",  # 11
    "Blitar",  # 12
)

DEMO_ROUTES: Tuple[Tuple[int, int], ...] = (
    (0, 1),  # Jakarta - Kediri
    (0, 3),  # Jakarta - Surabaya
    (0, 4),  # Jakarta - Banyuwangi
    (0, 5),  # Jakarta - Bandung
    (0, 6),  # Jakarta - Semarang
    (0, 7),  # Jakarta - Kutoarjo
    (1, 2),  # Kediri - Malang
    (1, 3),  # Kediri - Surabaya
    (1, 4),  # Kediri - Banyuwangi
    (3, 4),  # Surabaya - Banyuwangi
    (6, 7),  # Semarang - Kutoarjo
    (7, 8),  # Kutoarjo - Purwokerto
    (7, 9),  # Kutoarjo - Yogyakarta
    (7, 10),  # Kutoarjo - Solo
    (8, 9),  # Purwokerto - Yogyakarta
    (10, 11),  # Solo - Nganjuk
    (10, 12),  # Solo - Blitar
    (11, 12),  # Nganjuk - Blitar
)


def build_demo_network(config: Optional[GraphConfig] = None) -> RouteGraph:
    """Build the demo network.

    Args:
        config: Optional graph configuration. Its backend is used; its
            capacity is raised to fit the demo cities if needed.

    Returns:
        A RouteGraph holding DEMO_CITIES connected by DEMO_ROUTES.
    """
    if config is None:
        config = GraphConfig(capacity=DEMO_CAPACITY)
    elif config.capacity < len(DEMO_CITIES):
        config = config.model_copy(update={"capacity": len(DEMO_CITIES)})

    graph = RouteGraph.from_config(config)
    for name in DEMO_CITIES:
        graph.add_city(name)
    for first, second in DEMO_ROUTES:
        graph.add_route(first, second).raise_for_error()
    return graph
