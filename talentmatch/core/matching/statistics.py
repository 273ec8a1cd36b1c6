"""
Aggregate figures over a job set and a candidate pool.
"""

from typing import Sequence

from talentmatch.data.models import CandidateProfile, JobRequirement, MatchingStats


def _average(counts: list[int]) -> float:
    return sum(counts) / len(counts) if counts else 0.0


def compute_matching_stats(
    jobs: Sequence[JobRequirement],
    candidates: Sequence[CandidateProfile],
) -> MatchingStats:
    """
    Summarize the matching workload.

    Averages skip empty entries: requirements are averaged over active jobs
    that list at least one skill, and skills over candidates that list at
    least one.
    """
    active_jobs = [job for job in jobs if job.is_active]
    requirement_counts = [len(job.required_skills) for job in active_jobs if job.required_skills]
    skill_counts = [len(c.skills) for c in candidates if c.skills]

    return MatchingStats(
        total_active_jobs=len(active_jobs),
        total_candidates=len(candidates),
        average_requirements_per_job=_average(requirement_counts),
        average_skills_per_candidate=_average(skill_counts),
        potential_matches=len(active_jobs) * len(candidates),
    )
