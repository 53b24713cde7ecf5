"""
stepper.py — Step-by-Step Playback
===================================
Owns a search's step generator, buffers every Step it has produced
(enabling rewind), and exposes next / prev / goto navigation.

The generator is pulled lazily: the search only advances when the
caller asks for a step it has not seen yet.

State machine:
    IDLE    →  start()            →  PAUSED
    PAUSED  →  (generator ends)   →  FINISHED
    any     →  reset()            →  IDLE

Not thread-safe; drive it from one thread.
"""

from enum import Enum
from typing import Callable, Iterator, List, Optional

from search.step import Step


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    FINISHED = "finished"


class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : Every Step pulled so far (buffer for rewind).
        current_idx : Index into `steps` that is currently selected.
        on_step     : Optional callback(Step) fired whenever the selection changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self._generator:  Optional[Iterator[Step]] = None
        self.steps:       List[Step]    = []
        self.current_idx: int           = -1
        self.state:       StepperState  = StepperState.IDLE
        self.on_step:     Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, generator: Iterator[Step]) -> None:
        """Attach a fresh step generator and load the first step."""
        self._generator  = iter(generator)
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.PAUSED
        if self._fetch_next():
            self._goto(0)

    def reset(self) -> None:
        """Back to IDLE — caller must call start() again."""
        self._generator  = None
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        target = self.current_idx + 1
        if target >= len(self.steps) and not self._fetch_next():
            return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index, pulling forward if needed."""
        while idx >= len(self.steps):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        if self.steps:
            self._goto(0)

    def jump_to_end(self) -> None:
        """Exhaust the generator and select the final step."""
        while self._fetch_next():
            pass
        if self.steps:
            self._goto(len(self.steps) - 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        """Pull one Step from the generator into the buffer."""
        if self._generator is None or self.state == StepperState.FINISHED:
            return False
        try:
            step = next(self._generator)
        except StopIteration:
            self.state = StepperState.FINISHED
            return False
        except Exception:
            # a failing search cannot be resumed
            self.state = StepperState.FINISHED
            raise
        self.steps.append(step)
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
