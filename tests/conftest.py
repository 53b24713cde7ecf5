"""
Shared fixtures: tiny hand-built state spaces with known answers.
"""

import pytest

from spaces import SlidingPuzzle


class DictSpace:
    """Explicit directed graph {state: [successors]} with a {state: h} table."""

    def __init__(self, edges, h, goal):
        self.edges = edges
        self.h_table = h
        self.goal = goal
        self.calls = {"h": 0, "succ": 0}

    def is_goal(self, state):
        return state == self.goal

    def successors(self, state):
        self.calls["succ"] += 1
        return list(self.edges.get(state, []))

    def heuristic(self, state):
        self.calls["h"] += 1
        return self.h_table.get(state, 0)


@pytest.fixture
def abcd():
    """A→{B,C}, B→{D}, C→{}; h(A)=2 h(B)=1 h(C)=5 h(D)=0; goal D."""
    return DictSpace(
        edges={"A": ["B", "C"], "B": ["D"], "C": []},
        h={"A": 2, "B": 1, "C": 5, "D": 0},
        goal="D",
    )


@pytest.fixture
def replacing_space():
    """
    X is first reached via S→A→A2→X (g=3), then via S→B→X (g=2).
    The cheaper duplicate must replace the frontier entry.
    """
    return DictSpace(
        edges={"S": ["A", "B"], "A": ["A2"], "A2": ["X"], "B": ["X"], "X": ["G"]},
        h={"S": 0, "A": 0, "A2": 0, "B": 1.5, "X": 1, "G": 0},
        goal="G",
    )


@pytest.fixture
def reopening_space():
    """
    Admissible but inconsistent h: X, Y, Z are expanded via the long
    S→A→A2 branch before P (h=4) exposes the short route S→P→X.
    """
    return DictSpace(
        edges={
            "S": ["A", "P"], "A": ["A2"], "A2": ["X"], "P": ["X"],
            "X": ["Y"], "Y": ["Z"], "Z": ["G"],
        },
        h={"P": 4},
        goal="G",
    )


@pytest.fixture
def puzzle3():
    return SlidingPuzzle(size=3)


def bfs_distance(start, is_goal, successors):
    """Uninformed reference: true shortest distance, or None."""
    frontier, seen, depth = [start], {start}, 0
    while frontier:
        nxt = []
        for s in frontier:
            if is_goal(s):
                return depth
            for c in successors(s):
                if c not in seen:
                    seen.add(c)
                    nxt.append(c)
        frontier, depth = nxt, depth + 1
    return None


def assert_valid_path(path, start, is_goal, successors):
    assert path[0] == start
    assert is_goal(path[-1])
    for a, b in zip(path, path[1:]):
        assert b in successors(a), f"{a!r} → {b!r} is not a successor step"
