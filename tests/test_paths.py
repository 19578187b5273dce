import pytest

from trainroutes.adapters.adjacency import AdjacencyList, AdjacencyMatrix
from trainroutes.graph.paths import iter_simple_paths


@pytest.fixture(params=[AdjacencyMatrix, AdjacencyList])
def make_store(request):
    def build(size, edges):
        store = request.param(size)
        for first, second in edges:
            store.add_edge(first, second)
        return store

    return build


def test_triangle_yields_both_paths_in_ascending_neighbor_order(make_store):
    store = make_store(3, [(0, 1), (1, 2), (0, 2)])

    paths = list(iter_simple_paths(store, 0, 2))

    # Neighbour 1 of city 0 is explored before neighbour 2.
    assert paths == [(0, 1, 2), (0, 2)]


def test_start_equals_end_yields_single_city_path(make_store):
    store = make_store(3, [(0, 1), (1, 2)])

    assert list(iter_simple_paths(store, 1, 1)) == [(1,)]


def test_disconnected_target_yields_nothing(make_store):
    store = make_store(3, [(0, 1)])

    assert list(iter_simple_paths(store, 0, 2)) == []


def test_backtracking_allows_city_reuse_across_paths(make_store):
    # Diamond 0-1-3, 0-2-3 plus bridge 1-2: city 1 and 2 each appear
    # in several different paths.
    store = make_store(4, [(0, 1), (0, 2), (1, 3), (2, 3), (1, 2)])

    paths = list(iter_simple_paths(store, 0, 3))

    assert paths == [(0, 1, 2, 3), (0, 1, 3), (0, 2, 1, 3), (0, 2, 3)]


def test_complete_graph_path_count(make_store):
    # K5: between two fixed cities there are sum over k of 3!/(3-k)! paths
    # through k intermediate cities: 1 + 3 + 6 + 6 = 16.
    size = 5
    edges = [(i, j) for i in range(size) for j in range(i + 1, size)]
    store = make_store(size, edges)

    paths = list(iter_simple_paths(store, 0, 4))

    assert len(paths) == 16
    assert len(set(paths)) == 16
    for path in paths:
        assert len(set(path)) == len(path)


def test_generator_is_lazy(make_store):
    store = make_store(3, [(0, 1), (1, 2), (0, 2)])

    paths = iter_simple_paths(store, 0, 2)

    assert next(paths) == (0, 1, 2)
    assert next(paths) == (0, 2)
    assert next(paths, None) is None


def test_long_chain_does_not_hit_recursion_limit():
    size = 3000
    store = AdjacencyList(size)
    for i in range(size - 1):
        store.add_edge(i, i + 1)

    paths = list(iter_simple_paths(store, 0, size - 1))

    assert paths == [tuple(range(size))]
