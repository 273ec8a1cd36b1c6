"""
Pydantic data models for TalentMatch.

This module provides the value objects exchanged with the matching engine.
"""

# Base models
from .base import EmbeddedModel, normalize_token, normalize_tokens

# Candidate models
from .candidate import CandidateProfile

# Job models
from .job import JobRequirement

# Match models
from .match import (
    JobMatch,
    MatchingStats,
    ScoreBreakdown,
    ScoredCandidate,
)

__all__ = [
    # Base
    "EmbeddedModel",
    "normalize_token",
    "normalize_tokens",
    # Candidate
    "CandidateProfile",
    # Job
    "JobRequirement",
    # Match
    "JobMatch",
    "MatchingStats",
    "ScoreBreakdown",
    "ScoredCandidate",
]
