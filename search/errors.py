"""
errors.py — Search Error Taxonomy
==================================
Every failure the core can report derives from SearchError.

    SearchError
    ├── FrontierExhausted       – open set emptied before a goal was found
    ├── SearchBudgetExceeded    – max_expansions / max_seconds hit
    └── MalformedCollaborator   – goal test / successors / heuristic misbehaved

Each error carries the SearchStats of the run at the moment it failed, so
callers can still report how much work was done.  Nothing is retried:
a search is deterministic given deterministic collaborators.
"""

from typing import Optional


class SearchError(Exception):
    """Base class.  `stats` is the run's SearchStats (or None)."""

    def __init__(self, message: str, stats=None):
        super().__init__(message)
        self.stats = stats


class FrontierExhausted(SearchError):
    """No path exists from the start state to any goal state."""


class SearchBudgetExceeded(SearchError):
    """The configured expansion or time budget ran out first."""

    def __init__(self, message: str, stats=None, limit: Optional[str] = None):
        super().__init__(message, stats)
        self.limit = limit          # "max_expansions" | "max_seconds"


class MalformedCollaborator(SearchError):
    """A caller-supplied function raised or broke its contract."""

    def __init__(self, message: str, stats=None, collaborator: str = ""):
        super().__init__(message, stats)
        self.collaborator = collaborator    # "heuristic" | "successors" | "is_goal"
