"""
frontier.py — Open Set
=======================
Discovered states whose successors have not been generated yet.

Selection rule:
    best() = the node with minimum f.  On ties, the first node met in
    the frontier's iteration order wins, and iteration order is a stack:
    the most recently inserted node comes first.

Design decisions:
  - `_index[state] → (node, seq)` gives O(1) membership / removal.
  - A binary heap of (f, -seq, state) makes best() O(log n) amortised.
    Removal is lazy: a heap entry is stale once its (state, seq) pair no
    longer matches the index, and stale entries are dropped the next time
    they reach the top.  Once the heap holds more than twice as many
    entries as the index it is rebuilt, so its size tracks the frontier.
    Because -seq is part of the key, the heap picks exactly the node a
    linear scan in stack order would pick.
  - The frontier never holds two nodes for one state.  Replacing a node
    is remove_by_state() + insert(); the newcomer gets a fresh sequence
    number and therefore counts as most recently inserted.
"""

import heapq
import itertools
from typing import Any, Dict, Iterator, List, Optional, Tuple

from search.errors import FrontierExhausted
from search.node import SearchNode


class Frontier:

    def __init__(self):
        self._index: Dict[Any, Tuple[SearchNode, int]] = {}
        self._heap:  List[Tuple[float, int, Any]]      = []
        self._seq = itertools.count()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, node: SearchNode) -> None:
        if node.state in self._index:
            raise ValueError(f"state {node.state!r} is already on the frontier")
        seq = next(self._seq)
        self._index[node.state] = (node, seq)
        heapq.heappush(self._heap, (node.f, -seq, node.state))

    def remove_by_state(self, state: Any) -> SearchNode:
        node, _ = self._index.pop(state)
        if not self._index:
            self._heap.clear()
        elif len(self._heap) > 2 * len(self._index):
            self._compact()
        return node

    def _compact(self) -> None:
        """Rebuild the heap from live entries only."""
        self._heap = [(n.f, -seq, s) for s, (n, seq) in self._index.items()]
        heapq.heapify(self._heap)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains_state(self, state: Any) -> Optional[SearchNode]:
        entry = self._index.get(state)
        return entry[0] if entry else None

    def best(self) -> SearchNode:
        """Minimum-f node (ties → most recently inserted).  Does not remove it."""
        while self._heap:
            _, neg_seq, state = self._heap[0]
            entry = self._index.get(state)
            if entry is not None and entry[1] == -neg_seq:
                return entry[0]
            heapq.heappop(self._heap)       # stale
        raise FrontierExhausted("frontier is empty")

    def states(self) -> List[Any]:
        return [node.state for node in self]

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return bool(self._index)

    def __contains__(self, state: Any) -> bool:
        return state in self._index

    def __iter__(self) -> Iterator[SearchNode]:
        """Stack order: most recently inserted first."""
        for state in reversed(list(self._index)):
            yield self._index[state][0]

    def __repr__(self) -> str:
        return f"Frontier(size={len(self)})"
