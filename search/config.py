"""
config.py — Search Configuration
=================================
Run-time knobs for a single search.  Everything defaults to "off", which
reproduces the plain algorithm: no budget, no set listings in steps.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:

    max_expansions: Optional[int] = None
    """Stop with SearchBudgetExceeded after this many expansions (None = unbounded)."""

    max_seconds: Optional[float] = None
    """Wall-clock budget in seconds, checked once per expansion (None = unbounded)."""

    record_sets: bool = False
    """Copy frontier / explored listings into every Step.  Only for small traces."""

    def __post_init__(self):
        if self.max_expansions is not None:
            if isinstance(self.max_expansions, bool) or not isinstance(self.max_expansions, int):
                raise ValueError(f"max_expansions must be an int, got {self.max_expansions!r}")
            if self.max_expansions < 0:
                raise ValueError(f"max_expansions must be >= 0, got {self.max_expansions}")
        if self.max_seconds is not None:
            if isinstance(self.max_seconds, bool) or not isinstance(self.max_seconds, (int, float)):
                raise ValueError(f"max_seconds must be a number, got {self.max_seconds!r}")
            if not self.max_seconds > 0:
                raise ValueError(f"max_seconds must be > 0, got {self.max_seconds!r}")
