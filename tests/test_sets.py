"""Tests for search/frontier.py and search/explored.py."""

import pytest

from search import ExploredSet, Frontier, FrontierExhausted, SearchNode


def node(state, g, h=0, parent=None):
    return SearchNode(g=g, h=h, state=state, parent_state=parent)


# ========== Frontier ==========

def test_best_is_minimum_f():
    fr = Frontier()
    fr.insert(node("a", 3))
    fr.insert(node("b", 1, h=1))
    fr.insert(node("c", 4))
    assert fr.best().state == "b"


def test_best_does_not_remove():
    fr = Frontier()
    fr.insert(node("a", 1))
    assert fr.best().state == "a"
    assert len(fr) == 1


def test_ties_go_to_most_recently_inserted():
    fr = Frontier()
    fr.insert(node("a", 2))
    fr.insert(node("b", 1, h=1))
    fr.insert(node("c", 0, h=2))
    assert fr.best().state == "c"
    fr.remove_by_state("c")
    assert fr.best().state == "b"


def test_reinserted_node_counts_as_newest():
    fr = Frontier()
    fr.insert(node("a", 2))
    fr.insert(node("b", 2))
    old = fr.remove_by_state("a")
    fr.insert(node("a", 2, parent="z"))
    assert old.parent_state is None
    assert fr.best().state == "a"
    assert fr.best().parent_state == "z"


def test_removed_node_is_never_selected():
    fr = Frontier()
    fr.insert(node("a", 0))
    fr.insert(node("b", 5))
    fr.remove_by_state("a")
    assert fr.best().state == "b"
    assert fr.contains_state("a") is None
    assert "a" not in fr


def test_heap_is_compacted_after_many_replacements():
    fr = Frontier()
    fr.insert(node("b", 3))
    fr.insert(node("a", 200))
    for g in range(199, 0, -1):
        fr.remove_by_state("a")
        fr.insert(node("a", g))
        assert len(fr._heap) <= 2 * len(fr) + 1
    assert fr.best().state == "a"
    fr.remove_by_state("a")
    fr.insert(node("c", 3))
    # order survives the rebuild: c is newer than b
    assert fr.best().state == "c"


def test_replacement_with_higher_f_entry_left_in_heap():
    fr = Frontier()
    fr.insert(node("a", 5))
    fr.insert(node("b", 3))
    fr.remove_by_state("a")
    fr.insert(node("a", 1))
    assert fr.best().g == 1
    fr.remove_by_state("a")
    assert fr.best().state == "b"


def test_iteration_is_stack_order():
    fr = Frontier()
    for s in "abc":
        fr.insert(node(s, 1))
    assert fr.states() == ["c", "b", "a"]


def test_best_on_empty_frontier_raises():
    fr = Frontier()
    with pytest.raises(FrontierExhausted):
        fr.best()
    fr.insert(node("a", 0))
    fr.remove_by_state("a")
    with pytest.raises(FrontierExhausted):
        fr.best()


def test_duplicate_insert_rejected():
    fr = Frontier()
    fr.insert(node("a", 1))
    with pytest.raises(ValueError):
        fr.insert(node("a", 0))


def test_remove_missing_state_raises_key_error():
    with pytest.raises(KeyError):
        Frontier().remove_by_state("nope")


# ========== Explored set ==========

def test_explored_membership_and_removal():
    ex = ExploredSet()
    n = node("a", 2)
    ex.insert(n)
    assert ex.contains_state("a") is n
    assert "a" in ex
    assert len(ex) == 1
    assert ex.remove_by_state("a") is n
    assert ex.contains_state("a") is None
    assert len(ex) == 0


def test_explored_duplicate_insert_rejected():
    ex = ExploredSet()
    ex.insert(node("a", 1))
    with pytest.raises(ValueError):
        ex.insert(node("a", 1))


def test_states_compare_by_value():
    ex = ExploredSet()
    ex.insert(node((1, 2, 0), 0))
    assert ex.contains_state(tuple([1, 2, 0])) is not None
