"""
Application-wide constants for TalentMatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "talentmatch"
APP_DISPLAY_NAME: Final[str] = "TalentMatch Candidate Ranking Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# File Types
# =============================================================================

SUPPORTED_INPUT_FORMATS: Final[tuple[str, ...]] = (".json",)


# =============================================================================
# Scoring Constants
# =============================================================================

# Default weights for the skills/experience split
DEFAULT_SCORING_WEIGHTS: Final[dict[str, float]] = {
    "skills_match": 0.70,
    "experience_match": 0.30,
}

# Years of experience at which the experience sub-score saturates
DEFAULT_EXPERIENCE_CAP: Final[int] = 10

# Additive adjustment when job and candidate locations agree
DEFAULT_LOCATION_BONUS: Final[float] = 0.0

MIN_SCORE: Final[float] = 0.0
MAX_SCORE: Final[float] = 100.0

# Score thresholds (0-100 scale)
SCORE_THRESHOLDS: Final[dict[str, float]] = {
    "excellent": 85.0,
    "good": 70.0,
    "fair": 50.0,
}


# =============================================================================
# Result Selection
# =============================================================================

DEFAULT_MATCH_LIMIT: Final[int] = 50
MAX_MATCH_LIMIT: Final[int] = 100


# =============================================================================
# Enums
# =============================================================================


class MatchScoreLevel(Enum):
    """Categorical levels for match scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a numeric score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    CANDIDATES_RANKED = "candidates_ranked"
    JOBS_RANKED = "jobs_ranked"
    STATS_COMPUTED = "stats_computed"
