"""
Match and scoring data models for TalentMatch.

Defines the schema for scored candidates, reverse (job) matches,
score breakdowns and pool statistics.
"""

from typing import Optional

from pydantic import Field, field_serializer

from talentmatch.utils.constants import MatchScoreLevel

from .base import EmbeddedModel


class ScoreBreakdown(EmbeddedModel):
    """Breakdown of the overall match score by component (0-100 scale)."""

    skills_score: float = 0.0
    skills_weight: float = 0.70
    skills_weighted: float = 0.0

    experience_score: float = 0.0
    experience_weight: float = 0.30
    experience_weighted: float = 0.0

    location_adjustment: float = 0.0

    @property
    def base_score(self) -> float:
        """Weighted skills and experience before the location adjustment."""
        return self.skills_weighted + self.experience_weighted

    @property
    def total_score(self) -> float:
        """Base score plus location adjustment, clamped to 0-100."""
        return max(0.0, min(100.0, self.base_score + self.location_adjustment))


class ScoredCandidate(EmbeddedModel):
    """Ranking entry produced for one candidate."""

    candidate_id: str
    score: float = Field(ge=0.0, le=100.0)
    skill_overlap_count: int = 0
    skill_overlap_ratio: float = 0.0
    matched_skills: frozenset[str] = Field(default_factory=frozenset)
    missing_skills: frozenset[str] = Field(default_factory=frozenset)
    experience_years: int = 0
    location_match: Optional[bool] = None
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)

    @field_serializer("matched_skills", "missing_skills")
    def serialize_skills(self, v: frozenset[str]) -> list[str]:
        return sorted(v)

    @property
    def score_level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_score(self.score)


class JobMatch(EmbeddedModel):
    """Ranking entry produced for one job when matching jobs to a candidate."""

    job_id: Optional[str] = None
    title: Optional[str] = None
    score: float = Field(ge=0.0, le=100.0)
    skill_overlap_count: int = 0
    matched_skills: frozenset[str] = Field(default_factory=frozenset)
    missing_skills: frozenset[str] = Field(default_factory=frozenset)
    location_match: Optional[bool] = None

    @field_serializer("matched_skills", "missing_skills")
    def serialize_skills(self, v: frozenset[str]) -> list[str]:
        return sorted(v)

    @property
    def score_level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_score(self.score)


class MatchingStats(EmbeddedModel):
    """Aggregate figures over a job set and a candidate pool."""

    total_active_jobs: int = 0
    total_candidates: int = 0
    average_requirements_per_job: float = 0.0
    average_skills_per_candidate: float = 0.0
    potential_matches: int = 0
