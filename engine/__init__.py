"""
engine/
-------
Recording & playback layer on top of the search core.

    from engine import Stepper, Recorder, compare
"""

from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]
