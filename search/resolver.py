"""
resolver.py — Successor Resolution
===================================
Decides the fate of one freshly generated child node.

    explored has the state?  cheaper → reopen onto the frontier, else discard
    frontier has the state?  cheaper → replace the frontier entry, else discard
    otherwise                → new distinct state, push onto the frontier

"Cheaper" is strict:  f(child) < f(incumbent).  An equal-cost duplicate
never displaces the node found first.

Reopening an explored state is what keeps the search correct when the
heuristic is admissible but not consistent.
"""

from enum import Enum

from search.explored import ExploredSet
from search.frontier import Frontier
from search.node import SearchNode, evaluate
from search.stats import SearchStats


class Resolution(Enum):
    NEW       = "new"          # first time this state was seen
    REOPENED  = "reopened"     # explored state found again via a cheaper path
    REPLACED  = "replaced"     # frontier entry superseded by a cheaper duplicate
    DISCARDED = "discarded"    # duplicate no better than the incumbent


def resolve(
    succ: SearchNode,
    frontier: Frontier,
    explored: ExploredSet,
    stats: SearchStats,
) -> Resolution:
    extra = explored.contains_state(succ.state)
    if extra is not None:
        if evaluate(succ) < evaluate(extra):
            explored.remove_by_state(succ.state)
            frontier.insert(succ)
            stats.reopened += 1
            return Resolution.REOPENED
        return Resolution.DISCARDED

    extra = frontier.contains_state(succ.state)
    if extra is not None:
        if evaluate(succ) < evaluate(extra):
            frontier.remove_by_state(succ.state)
            frontier.insert(succ)
            stats.replaced += 1
            return Resolution.REPLACED
        return Resolution.DISCARDED

    frontier.insert(succ)
    stats.distinct += 1
    return Resolution.NEW
