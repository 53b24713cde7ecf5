"""
driver.py — Best-First Search Driver
=====================================
The control loop.  Each transition:

    best ← frontier.best()
    if goal?(best.state):  FOUND — rebuild the path, stop
    else:                  move best to explored,
                           build a child node per successor,
                           resolve each child against both sets

State machine:
    SEARCHING → advance() → SEARCHING
    SEARCHING → advance() → FOUND       (goal selected)
    SEARCHING → advance() → EXHAUSTED   (frontier empty)

Two ways to drive it:
    search(start, is_goal, successors, h)      – run to the end, return the path
    for step in BestFirstSearch(…): …          – generator, one Step per transition

Every run owns its frontier, explored set and SearchStats; nothing here
is module-level state.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional

from search.config import SearchConfig
from search.errors import (
    FrontierExhausted,
    MalformedCollaborator,
    SearchBudgetExceeded,
    SearchError,
)
from search.explored import ExploredSet
from search.frontier import Frontier
from search.node import Heuristic, SearchNode, make_node, start_node
from search.path import reconstruct_path
from search.resolver import resolve
from search.stats import SearchStats
from search.step import (
    EVENT_EXHAUSTED,
    EVENT_EXPAND,
    EVENT_GOAL,
    EVENT_INIT,
    Step,
    StepBuilder,
)

logger = logging.getLogger(__name__)

GoalTest   = Callable[[Any], bool]
Successors = Callable[[Any], Iterable[Any]]


class SearchStatus(Enum):
    SEARCHING = "searching"
    FOUND     = "found"
    EXHAUSTED = "exhausted"


class BestFirstSearch:
    """
    Attributes:
        frontier  : Open set.
        explored  : Closed set.
        stats     : Counters for this run (reset on construction).
        status    : Current SearchStatus.
        path      : Start → goal route once FOUND, else None.
        goal_node : The node that satisfied the goal test, once FOUND.
    """

    def __init__(
        self,
        start: Any,
        is_goal: GoalTest,
        successors: Successors,
        heuristic: Heuristic,
        config: Optional[SearchConfig] = None,
        stats: Optional[SearchStats] = None,
    ):
        self.is_goal    = is_goal
        self.successors = successors
        self.heuristic  = heuristic
        self.config:    SearchConfig         = config or SearchConfig()
        self.stats:     SearchStats          = stats if stats is not None else SearchStats()
        self.frontier:  Frontier             = Frontier()
        self.explored:  ExploredSet          = ExploredSet()
        self.status:    SearchStatus         = SearchStatus.SEARCHING
        self.path:      Optional[List[Any]]  = None
        self.goal_node: Optional[SearchNode] = None

        self._step_no:    int             = 0
        self._started_at: Optional[float] = None

        self.stats.reset()
        _check_hashable(start, "start state", "start", self.stats)
        self._root = self._guarded(start_node, start, heuristic)
        self.frontier.insert(self._root)

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Step]:
        yield self.initial_step()
        while self.status is SearchStatus.SEARCHING:
            yield self.advance()

    def run(self) -> List[Any]:
        """Advance until a goal is found.  Raises FrontierExhausted if none is."""
        while self.status is SearchStatus.SEARCHING:
            self.advance()
        if self.status is SearchStatus.EXHAUSTED:
            raise FrontierExhausted(
                f"no goal reachable after {self.stats.expanded} expansions",
                stats=self.stats,
            )
        return list(self.path)

    def initial_step(self) -> Step:
        root = self._root
        sb = StepBuilder(EVENT_INIT)
        sb.select(root)
        sb.set_sets(self.frontier, self.explored, self.config.record_sets)
        sb.stats = self.stats.snapshot()
        sb.explanation = f"Init: frontier = {{start}}, g=0, h={root.h}, f={root.f}."
        return sb.build(step_number=0)

    def advance(self) -> Step:
        """Perform one transition and return its snapshot."""
        if self.status is not SearchStatus.SEARCHING:
            raise RuntimeError(f"search already {self.status.value}")
        if self._started_at is None:
            self._started_at = time.monotonic()
        self._step_no += 1
        try:
            return self._transition()
        except SearchError as exc:
            self._step_no -= 1
            if exc.stats is None:
                exc.stats = self.stats
            raise

    # ------------------------------------------------------------------
    # One transition
    # ------------------------------------------------------------------
    def _transition(self) -> Step:
        if not self.frontier:
            self.status = SearchStatus.EXHAUSTED
            logger.info(
                "frontier exhausted: expanded=%d generated=%d distinct=%d",
                self.stats.expanded, self.stats.generated, self.stats.distinct,
            )
            sb = StepBuilder(EVENT_EXHAUSTED)
            sb.set_sets(self.frontier, self.explored, self.config.record_sets)
            sb.stats = self.stats.snapshot()
            sb.explanation = "Frontier empty. No goal state is reachable."
            return sb.build(step_number=self._step_no, is_final=True)

        best = self.frontier.best()
        sb = StepBuilder(EVENT_EXPAND)
        sb.select(best)

        if self._goal(best.state):
            self.status    = SearchStatus.FOUND
            self.goal_node = best
            self.path      = reconstruct_path(best, self.frontier, self.explored)
            logger.info(
                "goal found: length=%d expanded=%d generated=%d distinct=%d",
                len(self.path) - 1, self.stats.expanded, self.stats.generated, self.stats.distinct,
            )
            sb.event = EVENT_GOAL
            sb.path  = self.path
            sb.set_sets(self.frontier, self.explored, self.config.record_sets)
            sb.stats = self.stats.snapshot()
            sb.explanation = f"Goal reached at g={best.g}. Path has {len(self.path)} states."
            return sb.build(step_number=self._step_no, is_final=True)

        self._check_budget()

        # collaborators run before the sets change, so a failure leaves them intact
        children = [make_node(s, best, self.heuristic) for s in self._expand(best.state)]

        self.frontier.remove_by_state(best.state)
        self.explored.insert(best)

        for child in children:
            sb.add_child(child.state, resolve(child, self.frontier, self.explored, self.stats))

        self.stats.expanded  += 1
        self.stats.generated += len(children)
        logger.debug(
            "expand #%d: g=%s h=%s f=%s children=%d frontier=%d explored=%d",
            self.stats.expanded, best.g, best.h, best.f,
            len(children), len(self.frontier), len(self.explored),
        )

        sb.set_sets(self.frontier, self.explored, self.config.record_sets)
        sb.stats = self.stats.snapshot()
        sb.explanation = (
            f"Expand f={best.f} (g={best.g}, h={best.h}): "
            f"{len(children)} children, frontier now {len(self.frontier)}."
        )
        return sb.build(step_number=self._step_no)

    # ------------------------------------------------------------------
    # Budget
    # ------------------------------------------------------------------
    def _check_budget(self) -> None:
        cfg = self.config
        if cfg.max_expansions is not None and self.stats.expanded >= cfg.max_expansions:
            raise SearchBudgetExceeded(
                f"expansion budget of {cfg.max_expansions} exhausted",
                stats=self.stats, limit="max_expansions",
            )
        if cfg.max_seconds is not None and time.monotonic() - self._started_at > cfg.max_seconds:
            raise SearchBudgetExceeded(
                f"time budget of {cfg.max_seconds}s exhausted",
                stats=self.stats, limit="max_seconds",
            )

    # ------------------------------------------------------------------
    # Collaborator contracts
    # ------------------------------------------------------------------
    def _goal(self, state: Any) -> bool:
        result = self._guarded(self.is_goal, state, name="is_goal")
        if not isinstance(result, bool):
            raise MalformedCollaborator(
                f"is_goal returned {type(result).__name__}, expected bool",
                stats=self.stats, collaborator="is_goal",
            )
        return result

    def _expand(self, state: Any) -> List[Any]:
        produced = self._guarded(self.successors, state, name="successors")
        try:
            produced = iter(produced)
        except TypeError as exc:
            raise MalformedCollaborator(
                f"successors returned non-iterable {type(produced).__name__}",
                stats=self.stats, collaborator="successors",
            ) from exc
        # generators run their body only now
        children = self._guarded(list, produced, name="successors")

        seen = set()
        for child in children:
            _check_hashable(child, "successor state", "successors", self.stats)
            if child in seen:
                raise MalformedCollaborator(
                    f"successors produced {child!r} twice for one state",
                    stats=self.stats, collaborator="successors",
                )
            seen.add(child)
        return children

    def _guarded(self, fn: Callable, *args, name: str = "heuristic"):
        try:
            return fn(*args)
        except SearchError as exc:
            if exc.stats is None:
                exc.stats = self.stats
            raise
        except Exception as exc:
            raise MalformedCollaborator(
                f"{name} raised {type(exc).__name__}: {exc}",
                stats=self.stats, collaborator=name,
            ) from exc


def _check_hashable(state: Any, what: str, collaborator: str, stats: Optional[SearchStats] = None) -> None:
    try:
        hash(state)
    except TypeError as exc:
        raise MalformedCollaborator(
            f"{what} {state!r} is not hashable", stats=stats, collaborator=collaborator,
        ) from exc


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def search(
    start: Any,
    is_goal: GoalTest,
    successors: Successors,
    heuristic: Heuristic,
    *,
    config: Optional[SearchConfig] = None,
    stats: Optional[SearchStats] = None,
) -> List[Any]:
    """
    Best-first (A*) search from `start` to any state satisfying `is_goal`.

    Args:
        start      : Start state (hashable).
        is_goal    : state → bool.
        successors : state → iterable of states, no duplicates within one call.
        heuristic  : state → number ≥ 0.  Admissible ⇒ shortest path.
        config     : Optional SearchConfig (budgets, step listings).
        stats      : Optional SearchStats; reset, then filled in by this run.

    Returns:
        [start, …, goal] — consecutive states are one successor step apart.

    Raises:
        FrontierExhausted     : no goal is reachable.
        SearchBudgetExceeded  : a configured budget ran out.
        MalformedCollaborator : a collaborator raised or broke its contract.
    """
    return BestFirstSearch(start, is_goal, successors, heuristic, config=config, stats=stats).run()
