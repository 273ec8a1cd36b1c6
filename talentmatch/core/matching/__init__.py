"""Candidate-job matching engine module."""

from .matching_engine import (
    MatchingEngine,
    get_matching_engine,
    rank,
)
from .selection import select_top
from .statistics import compute_matching_stats

__all__ = [
    "MatchingEngine",
    "get_matching_engine",
    "rank",
    "select_top",
    "compute_matching_stats",
]
