"""
Post-ranking result selection.

The engine never drops candidates; callers narrow a ranking here.
"""

from typing import Optional, Sequence, TypeVar

from talentmatch.data.models import JobMatch, ScoredCandidate
from talentmatch.utils.constants import MAX_MATCH_LIMIT

RankedT = TypeVar("RankedT", ScoredCandidate, JobMatch)


def select_top(
    ranked: Sequence[RankedT],
    min_score: float = 0.0,
    limit: Optional[int] = None,
) -> list[RankedT]:
    """
    Keep entries scoring at least ``min_score``, then truncate to ``limit``.

    Args:
        ranked: Entries already sorted best-first
        min_score: Inclusive score threshold
        limit: Maximum entries to return; capped at MAX_MATCH_LIMIT.
            None keeps everything that passes the threshold.

    Returns:
        A new list preserving the input order
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")

    selected = [entry for entry in ranked if entry.score >= min_score]
    if limit is not None:
        selected = selected[: min(limit, MAX_MATCH_LIMIT)]
    return selected
