from trainroutes.adapters.adjacency import AdjacencyMatrix
from trainroutes.graph.dijkstra import dijkstra


def _store(size, edges):
    store = AdjacencyMatrix(size)
    for first, second in edges:
        store.add_edge(first, second)
    return store


def test_dijkstra_finds_direct_edge():
    # Minimal graph with a direct edge 0 - 1
    store = _store(2, [(0, 1)])

    path, distance = dijkstra(store, 2, 0, 1)

    assert path == [0, 1]
    assert distance == 1.0


def test_dijkstra_prefers_fewer_hops():
    # 0 - 1 - 2 plus a direct 0 - 2
    store = _store(3, [(0, 1), (1, 2), (0, 2)])

    path, distance = dijkstra(store, 3, 0, 2)

    assert path == [0, 2]
    assert distance == 1.0


def test_dijkstra_walks_chain():
    store = _store(4, [(0, 1), (1, 2), (2, 3)])

    path, distance = dijkstra(store, 4, 3, 0)

    assert path == [3, 2, 1, 0]
    assert distance == 3.0


def test_dijkstra_no_path_returns_inf():
    store = _store(2, [])

    path, distance = dijkstra(store, 2, 0, 1)

    assert path == []
    assert distance == float("inf")


def test_dijkstra_start_equals_end():
    store = _store(3, [(0, 1)])

    path, distance = dijkstra(store, 3, 1, 1)

    assert path == [1]
    assert distance == 0.0


def test_dijkstra_single_city():
    store = _store(1, [])

    assert dijkstra(store, 1, 0, 0) == ([0], 0.0)


def test_dijkstra_invalid_nodes():
    store = _store(3, [(0, 1)])

    assert dijkstra(store, 2, 0, 2) == ([], float("inf"))
    assert dijkstra(store, 2, -1, 0) == ([], float("inf"))


def test_dijkstra_ignores_cities_beyond_node_count():
    # Only the first two cities exist even though the store is larger.
    store = _store(4, [(0, 3), (3, 1)])

    path, _ = dijkstra(store, 2, 0, 1)

    assert path == []


def test_dijkstra_equal_length_tie_goes_to_highest_index():
    # Square 0-1-3 and 0-2-3: both are two hops. The "<=" minimum scan
    # settles city 2 before city 1, so city 2 reaches 3 first.
    # A strict "<" scan would return [0, 1, 3] instead; both are shortest.
    store = _store(4, [(0, 1), (0, 2), (1, 3), (2, 3)])

    path, distance = dijkstra(store, 4, 0, 3)

    assert path == [0, 2, 3]
    assert distance == 2.0
