"""Tests for spaces/graph.py."""

import pytest

from search import FrontierExhausted, SearchStats, search
from spaces import Graph, GraphSpace
from tests.conftest import assert_valid_path


def test_adjacency_list_parsing():
    g = Graph.from_adjacency_list("""
        # comment
        A: B C
        B -> D
        C:
    """, directed=True)
    assert sorted(g.vertex_ids()) == ["A", "B", "C", "D"]
    assert g.neighbours("A") == ["B", "C"]
    assert g.neighbours("D") == []


def test_undirected_edges_work_both_ways():
    g = Graph.from_adjacency_list("A: B\nB: A C")
    assert g.neighbours("B") == ["A", "C"]
    assert len(g.edges) == 2


def test_coordinates_feed_heuristics():
    g = Graph.from_adjacency_list("A(0,0): B(3,4)")
    assert (g.vertices["B"].x, g.vertices["B"].y) == (3.0, 4.0)
    space = GraphSpace(g, "B")
    assert space.euclidean("A") == pytest.approx(1.0)
    assert space.manhattan("A") == pytest.approx(1.0)
    assert space.euclidean("B") == 0


def test_bad_coordinates_rejected():
    with pytest.raises(ValueError):
        Graph.from_adjacency_list("A(0,x): B")


def test_spec_scenario_through_graph_space():
    g = Graph.from_adjacency_list("A: B C\nB: D\nC:", directed=True)
    space = GraphSpace(g, "D")
    stats = SearchStats()
    h = space.table({"A": 2, "B": 1, "C": 5, "D": 0})
    assert search("A", space.is_goal, space.successors, h, stats=stats) == ["A", "B", "D"]
    assert (stats.expanded, stats.distinct) == (2, 4)


@pytest.mark.parametrize("h_name", ["zero", "euclidean", "manhattan"])
def test_grid_shortest_hops(h_name):
    g = Graph.generate_grid(rows=3, cols=4)
    space = GraphSpace(g, "2_3")
    h = getattr(space, h_name)
    path = search("0_0", space.is_goal, space.successors, h)
    assert_valid_path(path, "0_0", space.is_goal, space.successors)
    assert len(path) - 1 == 5


def test_blocked_vertices_are_avoided():
    g = Graph.generate_grid(rows=3, cols=4)
    g.vertices["1_1"].blocked = True
    g.vertices["1_2"].blocked = True
    space = GraphSpace(g, "2_3")
    path = search("0_0", space.is_goal, space.successors, space.manhattan)
    assert "1_1" not in path and "1_2" not in path
    assert len(path) - 1 == 5


def test_walled_off_target_exhausts():
    g = Graph.generate_grid(rows=3, cols=3)
    for vid in ("0_1", "1_0", "1_1"):
        g.vertices[vid].blocked = True
    space = GraphSpace(g, "2_2")
    with pytest.raises(FrontierExhausted):
        search("0_0", space.is_goal, space.successors, space.euclidean)


def test_serialisation_round_trip():
    g = Graph.generate_grid(rows=2, cols=2, wall_prob=0.0)
    g.vertices["1_1"].blocked = True
    copy = Graph.from_dict(g.to_dict())
    assert copy.vertex_ids() == g.vertex_ids()
    assert len(copy.edges) == len(g.edges)
    assert copy.vertices["1_1"].blocked


def test_remove_vertex_drops_its_edges():
    g = Graph.from_adjacency_list("A: B C\nB: C")
    g.remove_vertex("B")
    assert g.neighbours("A") == ["C"]
    assert g.edge_between("A", "B") is None


def test_unknown_target_rejected():
    with pytest.raises(KeyError):
        GraphSpace(Graph(), "nope")
