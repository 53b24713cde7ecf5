"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete search run (all Steps), then computes the metrics
needed to judge a heuristic: how much work it did and how good the
path it found is.

Usage:
    rec = Recorder()
    rec.start(start, is_goal, successors, heuristic, heuristic_name="manhattan")
    rec.run_to_completion()          # exhausts the step generator
    metrics = rec.get_metrics()
    rec.export()                     # JSON-serialisable snapshot

Comparison:
    Run two Recorders on the SAME problem with different heuristics,
    then compare(rec1, rec2) → ComparisonResult.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from engine.stepper import Stepper
from search import (
    BestFirstSearch,
    SearchBudgetExceeded,
    SearchConfig,
    SearchStatus,
    Step,
)
from search.driver import GoalTest, Successors
from search.node import Heuristic

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    heuristic:       str   = ""
    expanded:        int   = 0
    generated:       int   = 0
    distinct:        int   = 0
    reopened:        int   = 0
    replaced:        int   = 0
    path_length:     int   = 0          # number of moves on the final path
    total_steps:     int   = 0          # number of Steps recorded
    wall_time_ms:    float = 0.0
    path_found:      bool  = False
    exhausted:       bool  = False
    budget_exceeded: bool  = False


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_expanded:  str = ""   # which heuristic expanded fewer nodes
    winner_generated: str = ""
    winner_path:      str = ""   # which heuristic found the shorter path

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        run     : The underlying BestFirstSearch.
        stepper : Buffered step access.
    """

    def __init__(self):
        self.steps:   List[Step]                = []
        self.metrics: Optional[RunMetrics]      = None
        self.run:     Optional[BestFirstSearch] = None
        self.stepper: Optional[Stepper]         = None

        self._heuristic_name: str   = ""
        self._budget_hit:     bool  = False

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        start: Any,
        is_goal: GoalTest,
        successors: Successors,
        heuristic: Heuristic,
        heuristic_name: str = "",
        config: Optional[SearchConfig] = None,
    ) -> None:
        """Build the search and wrap its step generator in a Stepper."""
        self._heuristic_name = heuristic_name or getattr(heuristic, "__name__", "")
        self._budget_hit     = False
        self.steps           = []
        self.metrics         = None

        self.run = BestFirstSearch(start, is_goal, successors, heuristic, config=config)
        self.stepper = Stepper()
        self.stepper.start(self.run)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        try:
            self.stepper.jump_to_end()
        except SearchBudgetExceeded as exc:
            logger.warning("run with %s stopped early: %s", self._heuristic_name, exc)
            self._budget_hit = True
        wall_ms = (time.monotonic() - started) * 1000

        self.steps   = list(self.stepper.steps)
        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def path(self) -> List[Any]:
        return list(self.run.path) if self.run is not None and self.run.path else []

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "heuristic": self._heuristic_name,
            "metrics":   asdict(self.metrics) if self.metrics else {},
            "path":      self.path,
            "steps":     [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        stats = self.run.stats
        path  = self.path
        return RunMetrics(
            heuristic=self._heuristic_name,
            expanded=stats.expanded,
            generated=stats.generated,
            distinct=stats.distinct,
            reopened=stats.reopened,
            replaced=stats.replaced,
            path_length=len(path) - 1 if path else 0,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            path_found=self.run.status is SearchStatus.FOUND,
            exhausted=self.run.status is SearchStatus.EXHAUSTED,
            budget_exceeded=self._budget_hit,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    if l.path_found and r.path_found:
        winner_path = winner(l.path_length, r.path_length, l.heuristic, r.heuristic)
    elif l.path_found or r.path_found:
        winner_path = l.heuristic if l.path_found else r.heuristic
    else:
        winner_path = "none"

    return ComparisonResult(
        left=l,
        right=r,
        winner_expanded=winner(l.expanded, r.expanded, l.heuristic, r.heuristic),
        winner_generated=winner(l.generated, r.generated, l.heuristic, r.heuristic),
        winner_path=winner_path,
    )
