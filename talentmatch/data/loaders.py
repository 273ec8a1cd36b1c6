"""
Input decoding for TalentMatch.

Turns JSON documents into validated matching models. This is the boundary
where transport-level problems (bad JSON, wrong shapes, type errors) are
reported; the matching engine only ever sees decoded models.
"""

import json
from pathlib import Path
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from talentmatch.core.exceptions import InputDecodeError
from talentmatch.data.models import CandidateProfile, JobRequirement
from talentmatch.utils.constants import SUPPORTED_INPUT_FORMATS
from talentmatch.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def _read_json(path: Path) -> Any:
    """Read a JSON document from disk."""
    if not path.exists():
        raise InputDecodeError(str(path), "file does not exist")
    if path.suffix.lower() not in SUPPORTED_INPUT_FORMATS:
        raise InputDecodeError(
            str(path),
            f"unsupported format '{path.suffix}' (supported: {', '.join(SUPPORTED_INPUT_FORMATS)})",
        )
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputDecodeError(str(path), f"invalid JSON at line {e.lineno}: {e.msg}") from e


def _unwrap(data: Any, key: str, source: str) -> list[Any]:
    """Accept either a bare list or an object holding the list under ``key``."""
    if isinstance(data, dict) and key in data:
        data = data[key]
    if not isinstance(data, list):
        raise InputDecodeError(source, f"expected a list of {key} or an object with a '{key}' list")
    return data


def _to_model(model_class: type[T], document: Any, source: str) -> T:
    """Convert a decoded document to a Pydantic model."""
    try:
        return model_class.model_validate(document)
    except ValidationError as e:
        raise InputDecodeError(source, str(e)) from e


def _to_models(model_class: type[T], documents: list[Any], source: str) -> list[T]:
    return [
        _to_model(model_class, doc, f"{source}[{index}]")
        for index, doc in enumerate(documents)
    ]


def parse_job(document: Any, source: str = "<job>") -> JobRequirement:
    """Decode one job document."""
    if isinstance(document, dict) and "job" in document:
        document = document["job"]
    return _to_model(JobRequirement, document, source)


def parse_jobs(document: Any, source: str = "<jobs>") -> list[JobRequirement]:
    """Decode a list of job documents."""
    return _to_models(JobRequirement, _unwrap(document, "jobs", source), source)


def parse_candidates(document: Any, source: str = "<candidates>") -> list[CandidateProfile]:
    """Decode a list of candidate documents."""
    return _to_models(CandidateProfile, _unwrap(document, "candidates", source), source)


def load_job(path: Path) -> JobRequirement:
    """Load one job requirement from a JSON file."""
    return parse_job(_read_json(path), str(path))


def load_jobs(path: Path) -> list[JobRequirement]:
    """Load job requirements from a JSON file."""
    jobs = parse_jobs(_read_json(path), str(path))
    logger.debug(f"Loaded {len(jobs)} jobs from {path}")
    return jobs


def load_candidates(path: Path) -> list[CandidateProfile]:
    """Load candidate profiles from a JSON file."""
    candidates = parse_candidates(_read_json(path), str(path))
    logger.debug(f"Loaded {len(candidates)} candidates from {path}")
    return candidates


def find_candidate(candidates: list[CandidateProfile], candidate_id: str) -> Optional[CandidateProfile]:
    """Look up a candidate by id."""
    for candidate in candidates:
        if candidate.id == candidate_id:
            return candidate
    return None
