"""
explored.py — Closed Set
=========================
States whose successors have already been generated.  Used only for
duplicate detection and, at the end, for walking parent links back to
the start state.
"""

from typing import Any, Dict, Iterator, List, Optional

from search.node import SearchNode


class ExploredSet:

    def __init__(self):
        self._index: Dict[Any, SearchNode] = {}

    def insert(self, node: SearchNode) -> None:
        if node.state in self._index:
            raise ValueError(f"state {node.state!r} is already explored")
        self._index[node.state] = node

    def remove_by_state(self, state: Any) -> SearchNode:
        return self._index.pop(state)

    def contains_state(self, state: Any) -> Optional[SearchNode]:
        return self._index.get(state)

    def states(self) -> List[Any]:
        return list(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, state: Any) -> bool:
        return state in self._index

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(list(self._index.values()))

    def __repr__(self) -> str:
        return f"ExploredSet(size={len(self)})"
