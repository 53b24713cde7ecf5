"""
spaces/__init__.py — State Spaces & Heuristic Registry
=======================================================
Concrete state spaces the search core can run on, plus a single source
of truth for every heuristic they expose.

    from spaces import SlidingPuzzle, Graph, GraphSpace
    from spaces import REGISTRY, get_heuristic, list_heuristics

REGISTRY is a dict:
    {
        "manhattan": HeuristicInfo(key, label, spaces, admissible, …),
        …
    }

The `key` is also the method name on the space object, so resolving a
heuristic for a given puzzle is `getattr(space, info.key)`.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from spaces.graph   import Edge, Graph, GraphSpace, Vertex
from spaces.sliding import Board, SlidingPuzzle, puzzle_for

SLIDING = "sliding"
GRAPH   = "graph"


# ---------------------------------------------------------------------------
# HeuristicInfo — metadata card for each heuristic
# ---------------------------------------------------------------------------
@dataclass
class HeuristicInfo:
    key:         str                                          # method name, e.g. "manhattan"
    label:       str                                          # human label
    spaces:      List[str] = field(default_factory=list)      # which spaces expose it
    admissible:  bool      = True                             # never overestimates?
    description: str       = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, HeuristicInfo] = {

    "zero": HeuristicInfo(
        key="zero", label="Zero", spaces=[SLIDING, GRAPH],
        description="h = 0. Best-first search becomes uniform-cost search.",
    ),

    "misplaced_tiles": HeuristicInfo(
        key="misplaced_tiles", label="Misplaced tiles", spaces=[SLIDING],
        description="Number of tiles not on their goal square.",
    ),

    "manhattan": HeuristicInfo(
        key="manhattan", label="Manhattan distance", spaces=[SLIDING, GRAPH],
        description="Sum of row + column offsets (graphs: scaled by the longest edge).",
    ),

    "linear_conflict": HeuristicInfo(
        key="linear_conflict", label="Linear conflict", spaces=[SLIDING],
        description="Manhattan plus 2 per tile that must leave its line to unblock it.",
    ),

    "weighted_manhattan": HeuristicInfo(
        key="weighted_manhattan", label="Weighted Manhattan (×2)", spaces=[SLIDING],
        admissible=False,
        description="Twice Manhattan. Expands far fewer nodes but the path may be longer.",
    ),

    "euclidean": HeuristicInfo(
        key="euclidean", label="Euclidean distance", spaces=[GRAPH],
        description="Straight-line distance divided by the longest edge.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_heuristic(key: str) -> Optional[HeuristicInfo]:
    """Return HeuristicInfo by key, or None."""
    if not isinstance(key, str):
        return None
    return REGISTRY.get(key)


def list_heuristics(space: Optional[str] = None) -> List[HeuristicInfo]:
    """All heuristics in insertion order, optionally only those a space exposes."""
    return [h for h in REGISTRY.values() if space is None or space in h.spaces]


def heuristic_for(space_obj, key: str, space: str) -> Callable:
    """Bound heuristic method `key` of `space_obj`; KeyError if unavailable."""
    info = get_heuristic(key)
    if info is None or space not in info.spaces:
        raise KeyError(f"heuristic {key!r} is not available for {space} spaces")
    return getattr(space_obj, info.key)


__all__ = [
    "Board",         "SlidingPuzzle",  "puzzle_for",
    "Graph",         "GraphSpace",     "Vertex",          "Edge",
    "HeuristicInfo", "REGISTRY",       "SLIDING",         "GRAPH",
    "get_heuristic", "list_heuristics", "heuristic_for",
]
