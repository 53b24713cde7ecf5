"""
path.py — Path Reconstruction
==============================
Walks parent links backwards from the goal node to the start node.

Ancestors are looked up by state in the union of the explored set and
the frontier.  An ancestor is normally explored, but one that was
reopened through a cheaper path may be sitting on the frontier again.
Either way the lookup returns its current (cheapest) node, whose g is
strictly smaller than its child's, so the walk always terminates.
"""

from typing import Any, List

from search.errors import SearchError
from search.explored import ExploredSet
from search.frontier import Frontier
from search.node import SearchNode


def reconstruct_path(goal: SearchNode, frontier: Frontier, explored: ExploredSet) -> List[Any]:
    """Return [start, …, goal.state]."""
    if goal.parent_state is None:
        return [goal.state]

    backwards = [goal.state, goal.parent_state]      # built goal → start
    limit     = len(frontier) + len(explored)

    while True:
        front = backwards[-1]
        node  = explored.contains_state(front)
        if node is None:
            node = frontier.contains_state(front)
        if node is None:
            raise SearchError(f"ancestor {front!r} is in neither frontier nor explored set")
        if node.parent_state is None:
            break
        if len(backwards) > limit:
            raise SearchError("parent links form a cycle")
        backwards.append(node.parent_state)

    backwards.reverse()
    return backwards
