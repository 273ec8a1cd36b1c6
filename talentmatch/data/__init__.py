"""
Data layer for TalentMatch.

Submodules:
- models: Pydantic data models for the matching engine
- loaders: JSON input decoding into validated models
"""

from .loaders import (
    find_candidate,
    load_candidates,
    load_job,
    load_jobs,
    parse_candidates,
    parse_job,
    parse_jobs,
)

__all__ = [
    "find_candidate",
    "load_candidates",
    "load_job",
    "load_jobs",
    "parse_candidates",
    "parse_job",
    "parse_jobs",
]
