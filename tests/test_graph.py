"""Tests for WeightedGraph."""
import pytest

from campus_map.core.graph import WeightedGraph
from campus_map.errors import InvalidEndpoint


def _graph(*vertices):
    g = WeightedGraph()
    for v in vertices:
        g.add_vertex(v)
    return g


class TestVertices:
    def test_add_vertex_returns_true_when_new(self):
        g = WeightedGraph()
        assert g.add_vertex(1) is True
        assert g.vertices() == {1}

    def test_new_vertex_has_no_neighbors(self):
        g = _graph(1)
        assert g.neighbors(1) == set()

    def test_readding_vertex_is_noop_and_keeps_edges(self):
        g = _graph(1, 2)
        g.add_edge(1, 2, 5.0)
        assert g.add_vertex(1) is False
        assert g.adjacent(1, 2) == 5.0
        assert len(g) == 2

    def test_contains_and_len(self):
        g = _graph("a", "b")
        assert "a" in g
        assert "c" not in g
        assert len(g) == 2


class TestEdges:
    def test_add_edge_then_adjacent_returns_weight(self):
        g = _graph(1, 2)
        assert g.add_edge(1, 2, 2.5) is True
        assert g.adjacent(1, 2) == 2.5
        assert 2 in g.neighbors(1)

    def test_edges_are_directed(self):
        g = _graph(1, 2)
        g.add_edge(1, 2, 2.5)
        assert g.adjacent(2, 1) is None
        assert g.neighbors(2) == set()

    def test_add_edge_overwrites_weight_and_returns_false(self):
        g = _graph(1, 2)
        g.add_edge(1, 2, 2.5)
        assert g.add_edge(1, 2, 7.0) is False
        assert g.adjacent(1, 2) == 7.0
        assert g.edge_count() == 1

    def test_negative_weight_rejected(self):
        g = _graph(1, 2)
        with pytest.raises(ValueError, match="non-negative"):
            g.add_edge(1, 2, -1.0)

    def test_undirected_edge_sets_both_directions(self):
        g = _graph(1, 2)
        assert g.add_undirected_edge(1, 2, 4.0) is True
        assert g.adjacent(1, 2) == g.adjacent(2, 1) == 4.0

    def test_undirected_edge_false_if_one_direction_existed(self):
        g = _graph(1, 2)
        g.add_edge(2, 1, 1.0)
        assert g.add_undirected_edge(1, 2, 4.0) is False
        assert g.adjacent(2, 1) == 4.0

    def test_remove_edge(self):
        g = _graph(1, 2)
        g.add_undirected_edge(1, 2, 4.0)
        assert g.remove_edge(1, 2) is True
        assert g.adjacent(1, 2) is None
        assert g.adjacent(2, 1) == 4.0
        assert g.remove_edge(1, 2) is False

    def test_neighbors_lists_all_targets(self):
        g = _graph(1, 2, 3, 4)
        g.add_edge(1, 2, 1.0)
        g.add_edge(1, 3, 1.0)
        g.add_edge(4, 1, 1.0)
        assert g.neighbors(1) == {2, 3}

    def test_zero_weight_edge_is_reported_not_absent(self):
        g = _graph(1, 2)
        g.add_edge(1, 2, 0.0)
        assert g.adjacent(1, 2) == 0.0


class TestInvalidEndpoint:
    @pytest.mark.parametrize("call", [
        lambda g: g.add_edge(1, 99, 1.0),
        lambda g: g.add_edge(99, 1, 1.0),
        lambda g: g.add_undirected_edge(1, 99, 1.0),
        lambda g: g.remove_edge(99, 1),
        lambda g: g.adjacent(1, 99),
        lambda g: g.adjacent(99, 1),
        lambda g: g.neighbors(99),
    ])
    def test_missing_vertex_raises(self, call):
        g = _graph(1)
        with pytest.raises(InvalidEndpoint):
            call(g)

    def test_failed_add_edge_does_not_create_vertex(self):
        g = _graph(1)
        with pytest.raises(InvalidEndpoint):
            g.add_edge(1, 99, 1.0)
        assert g.vertices() == {1}
        assert g.neighbors(1) == set()

    def test_invalid_endpoint_is_a_key_error_naming_the_vertex(self):
        g = _graph(1)
        with pytest.raises(KeyError, match="99"):
            g.neighbors(99)
