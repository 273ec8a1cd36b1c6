"""
Shared test fixtures for the TalentMatch test suite.

Sets environment variables before any talentmatch imports so logging stays
off disk, then provides factory fixtures for jobs and candidates.
"""

import os

# === Set environment BEFORE any talentmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

import json
from pathlib import Path
from typing import Any, Iterable, Optional

import pytest

from talentmatch.core.matching import MatchingEngine
from talentmatch.data.models import CandidateProfile, JobRequirement


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_job():
    """Factory that returns a callable to build JobRequirement models."""

    def _factory(
        required_skills: Optional[Iterable[str]] = None,
        preferred_location: Optional[str] = None,
        job_id: Optional[str] = "job-1",
        title: Optional[str] = "Frontend Engineer",
        is_active: bool = True,
    ) -> JobRequirement:
        if required_skills is None:
            required_skills = ["javascript", "react", "typescript"]
        return JobRequirement(
            job_id=job_id,
            title=title,
            required_skills=required_skills,
            preferred_location=preferred_location,
            is_active=is_active,
        )

    return _factory


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build CandidateProfile models."""

    def _factory(
        id: str = "cand-1",
        skills: Optional[Iterable[str]] = None,
        experience_years: int = 5,
        location: Optional[str] = None,
        name: Optional[str] = None,
    ) -> CandidateProfile:
        return CandidateProfile(
            id=id,
            name=name,
            skills=skills if skills is not None else [],
            experience_years=experience_years,
            location=location,
        )

    return _factory


# ---------------------------------------------------------------------------
# Engines
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_engine() -> MatchingEngine:
    """Engine with the default policy (70/30 split, cap 10, no location bonus)."""
    return MatchingEngine()


@pytest.fixture
def location_engine() -> MatchingEngine:
    """Engine that awards 5 points for a location match."""
    return MatchingEngine(location_bonus=5.0)


# ---------------------------------------------------------------------------
# Sample documents
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_job_document() -> dict[str, Any]:
    return {
        "job_id": "job-42",
        "title": "Frontend Engineer",
        "requirements": ["JavaScript", "React", "TypeScript"],
        "location": "Berlin",
    }


@pytest.fixture
def sample_candidate_documents() -> list[dict[str, Any]]:
    return [
        {
            "id": "alice",
            "name": "Alice Moreau",
            "skills": ["JavaScript", "React", "Node.js"],
            "experience_years": 5,
            "location": "berlin",
        },
        {
            "id": "bob",
            "name": "Bob Okafor",
            "skills": ["Python", "Django"],
            "experience_years": 7,
        },
        {
            "id": "carol",
            "name": "Carol Lindqvist",
            "skills": ["typescript", " REACT ", "javascript", "css"],
            "experience_years": 12,
            "location": "Paris",
        },
    ]


@pytest.fixture
def sample_job_documents(sample_job_document) -> list[dict[str, Any]]:
    return [
        sample_job_document,
        {
            "job_id": "job-7",
            "title": "Backend Engineer",
            "required_skills": ["python", "django", "postgresql"],
        },
        {
            "job_id": "job-9",
            "title": "Archived Role",
            "required_skills": ["cobol"],
            "is_active": False,
        },
    ]


def _write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def job_file(tmp_path, sample_job_document) -> Path:
    return _write_json(tmp_path / "job.json", sample_job_document)


@pytest.fixture
def jobs_file(tmp_path, sample_job_documents) -> Path:
    return _write_json(tmp_path / "jobs.json", {"jobs": sample_job_documents})


@pytest.fixture
def candidates_file(tmp_path, sample_candidate_documents) -> Path:
    return _write_json(tmp_path / "candidates.json", sample_candidate_documents)
