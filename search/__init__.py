"""
search/
-------
Generic best-first state-space search.  Public API:

    from search import search, BestFirstSearch, SearchConfig, SearchStats
    from search import FrontierExhausted, SearchBudgetExceeded, MalformedCollaborator

The package knows nothing about what a state is: callers supply a goal
test, a successor generator and a heuristic.
"""

from search.config   import SearchConfig
from search.driver   import BestFirstSearch, SearchStatus, search
from search.errors   import (
    FrontierExhausted,
    MalformedCollaborator,
    SearchBudgetExceeded,
    SearchError,
)
from search.explored import ExploredSet
from search.frontier import Frontier
from search.node     import SearchNode, evaluate, make_node, start_node
from search.path     import reconstruct_path
from search.resolver import Resolution, resolve
from search.stats    import SearchStats
from search.step     import Step, StepBuilder

__all__ = [
    "search",            "BestFirstSearch",   "SearchStatus",
    "SearchConfig",      "SearchStats",
    "SearchError",       "FrontierExhausted", "SearchBudgetExceeded", "MalformedCollaborator",
    "SearchNode",        "make_node",         "start_node",           "evaluate",
    "Frontier",          "ExploredSet",
    "Resolution",        "resolve",
    "reconstruct_path",
    "Step",              "StepBuilder",
]
