"""
stats.py — Per-Run Counters
============================
The side channel of a search: how many children were generated, how
many distinct states were discovered, how many nodes were expanded.

A SearchStats object belongs to exactly one run.  Pass your own into
search() to read the counters afterwards; never share one between
concurrent runs.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass
class SearchStats:
    """
    Attributes:
        generated : Child nodes produced, discarded duplicates included.
        distinct  : Distinct states ever discovered (the start counts as 1).
        expanded  : Nodes moved from the frontier into the explored set.
        reopened  : Explored states pushed back to the frontier via a cheaper path.
        replaced  : Frontier entries superseded by a cheaper duplicate.
    """

    generated: int = 0
    distinct:  int = 1
    expanded:  int = 0
    reopened:  int = 0
    replaced:  int = 0

    def reset(self) -> None:
        self.generated = 0
        self.distinct  = 1
        self.expanded  = 0
        self.reopened  = 0
        self.replaced  = 0

    def snapshot(self) -> Dict[str, int]:
        return asdict(self)
