"""Tests for search/path.py."""

import pytest

from search import ExploredSet, Frontier, SearchError, SearchNode, reconstruct_path


def node(state, g, parent=None):
    return SearchNode(g=g, h=0, state=state, parent_state=parent)


def test_start_is_goal():
    goal = node("A", 0)
    fr = Frontier()
    fr.insert(goal)
    assert reconstruct_path(goal, fr, ExploredSet()) == ["A"]


def test_walks_explored_ancestors():
    ex = ExploredSet()
    ex.insert(node("A", 0))
    ex.insert(node("B", 1, "A"))
    ex.insert(node("C", 2, "B"))
    goal = node("D", 3, "C")
    fr = Frontier()
    fr.insert(goal)
    assert reconstruct_path(goal, fr, ex) == ["A", "B", "C", "D"]


def test_finds_ancestor_sitting_on_frontier():
    ex = ExploredSet()
    ex.insert(node("A", 0))
    fr = Frontier()
    fr.insert(node("B", 1, "A"))
    goal = node("C", 2, "B")
    fr.insert(goal)
    assert reconstruct_path(goal, fr, ex) == ["A", "B", "C"]


def test_missing_ancestor_raises():
    goal = node("C", 2, "B")
    fr = Frontier()
    fr.insert(goal)
    with pytest.raises(SearchError):
        reconstruct_path(goal, fr, ExploredSet())


def test_cycle_in_parent_links_raises():
    ex = ExploredSet()
    ex.insert(node("A", 2, "B"))
    ex.insert(node("B", 1, "A"))
    goal = node("C", 3, "A")
    fr = Frontier()
    fr.insert(goal)
    with pytest.raises(SearchError):
        reconstruct_path(goal, fr, ex)
