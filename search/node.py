"""
node.py — Search Node
======================
Bookkeeping record pairing an opaque state with its path cost g, its
heuristic estimate h, and the state it was generated from.

    f = g + h        (derived, never stored)

Design decisions:
  - SearchNode is frozen.  A node is never updated in place; a cheaper
    duplicate produces a NEW node that replaces the old one.
  - `parent_state` is a state, not a node reference.  Parent lookups go
    through the frontier / explored indexes, so a reopened ancestor is
    always seen at its current (cheapest) cost.
  - The heuristic runs exactly once, here, and its value is cached in h.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from search.errors import MalformedCollaborator

State     = Hashable
Heuristic = Callable[[Any], float]


@dataclass(frozen=True)
class SearchNode:
    """
    Attributes:
        g            : Steps from the start state to this state.
        h            : Heuristic estimate of the remaining steps.
        state        : The state itself (hashable, value equality).
        parent_state : State this node was generated from; None for the start node.
    """

    g:            int
    h:            float
    state:        Any
    parent_state: Optional[Any] = None

    @property
    def f(self) -> float:
        return self.g + self.h

    @property
    def is_start(self) -> bool:
        return self.g == 0 and self.parent_state is None


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
def start_node(state: Any, heuristic: Heuristic) -> SearchNode:
    """The root of a search: g = 0, no parent."""
    return SearchNode(g=0, h=_estimate(heuristic, state), state=state)


def make_node(state: Any, parent: SearchNode, heuristic: Heuristic) -> SearchNode:
    """Child of `parent`, one step further from the start."""
    return SearchNode(
        g=parent.g + 1,
        h=_estimate(heuristic, state),
        state=state,
        parent_state=parent.state,
    )


def evaluate(node: SearchNode) -> float:
    return node.g + node.h


# ---------------------------------------------------------------------------
# Heuristic contract
# ---------------------------------------------------------------------------
def _estimate(heuristic: Heuristic, state: Any) -> float:
    try:
        h = heuristic(state)
    except Exception as exc:
        raise MalformedCollaborator(
            f"heuristic raised {type(exc).__name__} for state {state!r}: {exc}",
            collaborator="heuristic",
        ) from exc

    if isinstance(h, bool) or not isinstance(h, numbers.Real):
        raise MalformedCollaborator(
            f"heuristic returned {type(h).__name__}, expected a number (state {state!r})",
            collaborator="heuristic",
        )
    if math.isnan(h) or h < 0:
        raise MalformedCollaborator(
            f"heuristic returned {h!r} for state {state!r}; estimates must be >= 0",
            collaborator="heuristic",
        )
    return h
