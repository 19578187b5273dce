"""Tests for the adjacency store adapters."""

import pytest

from trainroutes.adapters.adjacency import STORE_BACKENDS, AdjacencyList, AdjacencyMatrix
from trainroutes.ports.adjacency import AdjacencyStorePort


class TestAdjacencyStores:
    """Behaviour shared by every AdjacencyStorePort implementation."""

    @pytest.fixture(params=[AdjacencyMatrix, AdjacencyList])
    def store(self, request) -> AdjacencyStorePort:
        return request.param(6)

    def test_new_store_has_no_edges(self, store):
        assert store.capacity == 6
        assert store.edge_count() == 0
        assert all(store.neighbors(i) == [] for i in range(6))

    def test_add_edge_is_symmetric(self, store):
        store.add_edge(4, 1)

        assert store.has_edge(1, 4)
        assert store.has_edge(4, 1)
        assert store.edge_count() == 1

    def test_remove_edge_clears_both_directions(self, store):
        store.add_edge(0, 5)
        store.remove_edge(5, 0)

        assert not store.has_edge(0, 5)
        assert not store.has_edge(5, 0)
        assert store.edge_count() == 0

    def test_neighbors_are_ascending(self, store):
        for other in (5, 2, 4, 1):
            store.add_edge(3, other)

        assert store.neighbors(3) == [1, 2, 4, 5]
        assert store.edge_count() == 4

    def test_neighbors_is_a_snapshot(self, store):
        store.add_edge(0, 1)
        neighbors = store.neighbors(0)

        store.add_edge(0, 2)

        assert neighbors == [1]

    def test_adding_twice_counts_once(self, store):
        store.add_edge(2, 3)
        store.add_edge(3, 2)

        assert store.edge_count() == 1

    @pytest.mark.parametrize("pair", [(0, 6), (6, 0), (-1, 2), (2, -1)])
    def test_out_of_range_index_is_rejected(self, store, pair):
        # Negative indices must not wrap around to the last city.
        with pytest.raises(IndexError):
            store.add_edge(*pair)
        with pytest.raises(IndexError):
            store.remove_edge(*pair)

        assert store.edge_count() == 0
        assert store.neighbors(5) == []


def test_registry_names():
    assert STORE_BACKENDS["matrix"] is AdjacencyMatrix
    assert STORE_BACKENDS["adjacency_list"] is AdjacencyList


def test_matrix_rows_are_a_copy():
    store = AdjacencyMatrix(3)
    store.add_edge(0, 2)

    rows = store.rows()
    rows[0][1] = True

    assert rows[0][2] and rows[2][0]
    assert not store.has_edge(0, 1)


def test_adjacency_list_neighbors_are_not_a_constructor_argument():
    with pytest.raises(TypeError):
        AdjacencyList(3, {0: {1}})
