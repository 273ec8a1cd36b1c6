"""
Candidate-Job matching engine.

Scores and ranks candidates against a job requirement using a weighted sum
of a skills sub-score and a saturating experience sub-score, plus an
optional additive location adjustment. All sub-scores are on a 0-100 scale.

The engine holds only its scoring policy (weights, experience cap, location
bonus). It performs no I/O and never mutates its inputs, so one instance can
serve any number of concurrent callers.
"""

from typing import Optional, Sequence

from talentmatch.core.exceptions import InvalidCandidateError
from talentmatch.data.models import (
    CandidateProfile,
    JobMatch,
    JobRequirement,
    ScoreBreakdown,
    ScoredCandidate,
    normalize_token,
    normalize_tokens,
)
from talentmatch.utils.config import MatchingSettings
from talentmatch.utils.constants import (
    DEFAULT_EXPERIENCE_CAP,
    DEFAULT_LOCATION_BONUS,
    DEFAULT_SCORING_WEIGHTS,
    MAX_SCORE,
    MIN_SCORE,
)
from talentmatch.utils.logger import get_logger

logger = get_logger(__name__)


def _clamp(value: float, low: float = MIN_SCORE, high: float = MAX_SCORE) -> float:
    return max(low, min(high, value))


class MatchingEngine:
    """
    Engine for scoring candidates against job requirements.

    Uses a three-factor approach:
    - Skills matching (coverage of the required skill set)
    - Experience years, saturating at ``experience_cap``
    - Location agreement, as an additive bonus
    """

    def __init__(
        self,
        weights: Optional[dict[str, float]] = None,
        experience_cap: int = DEFAULT_EXPERIENCE_CAP,
        location_bonus: float = DEFAULT_LOCATION_BONUS,
    ):
        """
        Initialize the matching engine.

        Args:
            weights: Optional custom scoring weights with ``skills_match``
                and ``experience_match`` keys
            experience_cap: Years of experience that earn full experience credit
            location_bonus: Points added when job and candidate locations agree

        Raises:
            ValueError: If the cap is not positive or a weight is missing/negative
        """
        weights = dict(weights or DEFAULT_SCORING_WEIGHTS)
        for key in DEFAULT_SCORING_WEIGHTS:
            if key not in weights:
                raise ValueError(f"Scoring weights are missing '{key}'")
            if weights[key] < 0:
                raise ValueError(f"Scoring weight '{key}' must be non-negative")
        if experience_cap <= 0:
            raise ValueError("experience_cap must be a positive number of years")

        self.weights = weights
        self.experience_cap = experience_cap
        self.location_bonus = location_bonus

    @classmethod
    def from_settings(cls, settings: MatchingSettings) -> "MatchingEngine":
        """Build an engine from the matching section of the app settings."""
        return cls(
            weights=settings.weights,
            experience_cap=settings.experience_cap,
            location_bonus=settings.location_bonus,
        )

    def score(
        self,
        job: JobRequirement,
        candidate: CandidateProfile,
    ) -> ScoredCandidate:
        """
        Score a single candidate against a job requirement.

        Raises:
            InvalidCandidateError: If the candidate has no id or negative experience
        """
        return self._score(normalize_tokens(job.required_skills), job.preferred_location, candidate)

    def rank(
        self,
        job: JobRequirement,
        candidates: Sequence[CandidateProfile],
    ) -> list[ScoredCandidate]:
        """
        Score every candidate and return them best-first.

        Every candidate yields exactly one entry. Ties on score are broken by
        skill overlap count (desc), experience years (desc), then candidate id
        (asc), so the order depends only on content, never on input position.

        Args:
            job: The job requirement to rank against
            candidates: Candidate pool; may be empty

        Returns:
            Scored candidates sorted best-first

        Raises:
            InvalidCandidateError: On the first candidate that violates the
                input contract
        """
        required = normalize_tokens(job.required_skills)
        scored = [
            self._score(required, job.preferred_location, candidate)
            for candidate in candidates
        ]
        ranked = sorted(scored, key=self._ranking_key)

        logger.debug(
            f"Ranked {len(ranked)} candidates for job {job.job_id or '<unnamed>'} "
            f"({len(required)} required skills)"
        )
        return ranked

    def rank_jobs(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobRequirement],
    ) -> list[JobMatch]:
        """
        Rank active jobs for one candidate using the same scoring function.

        Inactive jobs are skipped. Ties on score are broken by skill overlap
        count (desc), job id, title, then the matched skills (asc).
        """
        matches = []
        for job in jobs:
            if not job.is_active:
                continue
            scored = self.score(job, candidate)
            matches.append(
                JobMatch(
                    job_id=job.job_id,
                    title=job.title,
                    score=scored.score,
                    skill_overlap_count=scored.skill_overlap_count,
                    matched_skills=scored.matched_skills,
                    missing_skills=scored.missing_skills,
                    location_match=scored.location_match,
                )
            )

        matches.sort(key=self._job_ranking_key)

        logger.debug(f"Ranked {len(matches)} jobs for candidate {candidate.id}")
        return matches

    def _score(
        self,
        required: frozenset[str],
        preferred_location: Optional[str],
        candidate: CandidateProfile,
    ) -> ScoredCandidate:
        self._validate_candidate(candidate)

        matched, missing, skills_score = self._match_skills(required, candidate)
        experience_score = self._match_experience(candidate.experience_years)
        location_match, location_adjustment = self._match_location(
            preferred_location, candidate.location
        )

        breakdown = self._calculate_breakdown(skills_score, experience_score, location_adjustment)

        return ScoredCandidate(
            candidate_id=candidate.id,
            score=breakdown.total_score,
            skill_overlap_count=len(matched),
            skill_overlap_ratio=len(matched) / len(required) if required else 1.0,
            matched_skills=matched,
            missing_skills=missing,
            experience_years=candidate.experience_years,
            location_match=location_match,
            breakdown=breakdown,
        )

    def _validate_candidate(self, candidate: CandidateProfile) -> None:
        """Fail fast on records the boundary should have rejected."""
        candidate_id = getattr(candidate, "id", None)
        if candidate_id is None or not str(candidate_id).strip():
            raise InvalidCandidateError(candidate_id, "id", candidate_id, "must be a non-empty identifier")

        experience = getattr(candidate, "experience_years", None)
        if experience is None:
            raise InvalidCandidateError(candidate_id, "experience_years", experience, "is required")
        if experience < 0:
            raise InvalidCandidateError(candidate_id, "experience_years", experience, "must be non-negative")

    def _match_skills(
        self,
        required: frozenset[str],
        candidate: CandidateProfile,
    ) -> tuple[frozenset[str], frozenset[str], float]:
        """Match candidate skills against the required set."""
        candidate_skills = normalize_tokens(candidate.skills)
        matched = required & candidate_skills
        missing = required - candidate_skills

        if not required:
            # Nothing to fail, so full credit
            return matched, missing, MAX_SCORE

        score = _clamp(MAX_SCORE * len(matched) / len(required))
        return matched, missing, score

    def _match_experience(self, experience_years: int) -> float:
        """Saturating experience score: full credit at ``experience_cap`` years."""
        capped = min(experience_years, self.experience_cap)
        return MAX_SCORE * capped / self.experience_cap

    def _match_location(
        self,
        preferred_location: Optional[str],
        candidate_location: Optional[str],
    ) -> tuple[Optional[bool], float]:
        """
        Compare locations.

        Returns (None, 0) when either side is unknown, so missing data is
        never treated as a mismatch.
        """
        job_location = normalize_token(preferred_location)
        candidate_location = normalize_token(candidate_location)
        if job_location is None or candidate_location is None:
            return None, 0.0
        if job_location == candidate_location:
            return True, self.location_bonus
        return False, 0.0

    def _calculate_breakdown(
        self,
        skills_score: float,
        experience_score: float,
        location_adjustment: float,
    ) -> ScoreBreakdown:
        """Calculate weighted score breakdown."""
        return ScoreBreakdown(
            skills_score=skills_score,
            skills_weight=self.weights["skills_match"],
            skills_weighted=skills_score * self.weights["skills_match"],

            experience_score=experience_score,
            experience_weight=self.weights["experience_match"],
            experience_weighted=experience_score * self.weights["experience_match"],

            location_adjustment=location_adjustment,
        )

    @staticmethod
    def _ranking_key(scored: ScoredCandidate) -> tuple:
        return (
            -scored.score,
            -scored.skill_overlap_count,
            -scored.experience_years,
            scored.candidate_id,
            sorted(scored.matched_skills),
        )

    @staticmethod
    def _job_ranking_key(job_match: JobMatch) -> tuple:
        return (
            -job_match.score,
            -job_match.skill_overlap_count,
            job_match.job_id or "",
            job_match.title or "",
            sorted(job_match.matched_skills),
        )


def rank(
    job: JobRequirement,
    candidates: Sequence[CandidateProfile],
    *,
    experience_cap: int = DEFAULT_EXPERIENCE_CAP,
    location_bonus: float = DEFAULT_LOCATION_BONUS,
    weights: Optional[dict[str, float]] = None,
) -> list[ScoredCandidate]:
    """
    Rank candidates for a job with an explicit scoring policy.

    Convenience wrapper around :meth:`MatchingEngine.rank`.
    """
    engine = MatchingEngine(
        weights=weights,
        experience_cap=experience_cap,
        location_bonus=location_bonus,
    )
    return engine.rank(job, candidates)


# Singleton instance
_matching_engine: Optional[MatchingEngine] = None


def get_matching_engine() -> MatchingEngine:
    """Get the matching engine singleton instance (default policy)."""
    global _matching_engine
    if _matching_engine is None:
        _matching_engine = MatchingEngine()
    return _matching_engine
