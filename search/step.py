"""
step.py — Search Step Snapshot
===============================
The driver can be consumed as a generator that yields one Step per
transition of its state machine.  A Step is a frozen-in-time picture of
the run:

    • which state was selected, and its g / h / f
    • what happened to each child it generated (new / reopened / …)
    • how big the frontier and explored set are
    • the counters so far
    • the final path (only on the goal step)
    • a plain-English explanation of the transition

Design decisions:
  - Step is a plain frozen dataclass.  The driver is the only writer;
    recorders and steppers are pure readers.
  - Full frontier / explored listings are optional (SearchConfig.record_sets)
    because copying them on every step is quadratic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from search.node import SearchNode


EVENT_INIT      = "init"
EVENT_EXPAND    = "expand"
EVENT_GOAL      = "goal"
EVENT_EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number   : 0-based index of this step in the run.
        event         : init / expand / goal / exhausted.
        current_state : State selected from the frontier (None for exhausted).
        g, h, f       : Scores of the selected node.
        children      : [(state, resolution_value)] for every child generated.
        frontier_size : Frontier size AFTER the transition.
        explored_size : Explored size AFTER the transition.
        frontier      : Frontier states in stack order (only if recorded).
        explored      : Explored states (only if recorded).
        path          : Start → goal route; empty until the goal step.
        stats         : Counter snapshot after the transition.
        explanation   : Human-readable "why" text.
        is_final      : True on the goal / exhausted step.
    """

    step_number:   int                        = 0
    event:         str                        = EVENT_INIT
    current_state: Optional[Any]              = None
    g:             Optional[int]              = None
    h:             Optional[float]            = None
    f:             Optional[float]            = None
    children:      List[Tuple[Any, str]]      = field(default_factory=list)
    frontier_size: int                        = 0
    explored_size: int                        = 0
    frontier:      List[Any]                  = field(default_factory=list)
    explored:      List[Any]                  = field(default_factory=list)
    path:          List[Any]                  = field(default_factory=list)
    stats:         Dict[str, int]             = field(default_factory=dict)
    explanation:   str                        = ""
    is_final:      bool                       = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":   self.step_number,
            "event":         self.event,
            "current_state": self.current_state,
            "g":             self.g,
            "h":             self.h,
            "f":             self.f,
            "children":      [list(c) for c in self.children],
            "frontier_size": self.frontier_size,
            "explored_size": self.explored_size,
            "frontier":      list(self.frontier),
            "explored":      list(self.explored),
            "path":          list(self.path),
            "stats":         dict(self.stats),
            "explanation":   self.explanation,
            "is_final":      self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so the driver doesn't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad the driver fills in during one transition.

        sb = StepBuilder(EVENT_EXPAND)
        sb.select(node)
        sb.add_child(child.state, Resolution.NEW)
        yield sb.build(step_number=3)
    """

    def __init__(self, event: str = EVENT_INIT):
        self.event:         str                   = event
        self.current_state: Optional[Any]         = None
        self.g:             Optional[int]         = None
        self.h:             Optional[float]       = None
        self.f:             Optional[float]       = None
        self.children:      List[Tuple[Any, str]] = []
        self.frontier_size: int                   = 0
        self.explored_size: int                   = 0
        self.frontier:      List[Any]             = []
        self.explored:      List[Any]             = []
        self.path:          List[Any]             = []
        self.stats:         Dict[str, int]        = {}
        self.explanation:   str                   = ""

    # -- helpers --
    def select(self, node: SearchNode) -> None:
        self.current_state = node.state
        self.g = node.g
        self.h = node.h
        self.f = node.f

    def add_child(self, state: Any, resolution) -> None:
        self.children.append((state, resolution.value))

    def set_sets(self, frontier, explored, listings: bool = False) -> None:
        self.frontier_size = len(frontier)
        self.explored_size = len(explored)
        if listings:
            self.frontier = frontier.states()
            self.explored = explored.states()

    def build(self, step_number: int = 0, is_final: bool = False) -> Step:
        return Step(
            step_number=step_number,
            event=self.event,
            current_state=self.current_state,
            g=self.g,
            h=self.h,
            f=self.f,
            children=list(self.children),
            frontier_size=self.frontier_size,
            explored_size=self.explored_size,
            frontier=list(self.frontier),
            explored=list(self.explored),
            path=list(self.path),
            stats=dict(self.stats),
            explanation=self.explanation,
            is_final=is_final,
        )
