"""
Job requirement data models for TalentMatch.

Defines the matching criteria a job posting supplies to the engine.
"""

from typing import Any, Optional

from pydantic import AliasChoices, Field, field_serializer, field_validator

from .base import EmbeddedModel, normalize_token, normalize_tokens


class JobRequirement(EmbeddedModel):
    """Skill and location criteria for one job posting."""

    job_id: Optional[str] = None
    title: Optional[str] = None
    required_skills: frozenset[str] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("required_skills", "requirements"),
    )
    preferred_location: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("preferred_location", "location"),
    )
    is_active: bool = True

    @field_validator("job_id", mode="before")
    @classmethod
    def coerce_job_id(cls, v: Any) -> Optional[str]:
        """Identifiers are opaque; keep them as strings."""
        return None if v is None else str(v)

    @field_validator("required_skills", mode="before")
    @classmethod
    def normalize_required_skills(cls, v: Any) -> frozenset[str]:
        """Normalize skill names to case-folded, trimmed, unique tokens."""
        return normalize_tokens(v)

    @field_validator("preferred_location", mode="before")
    @classmethod
    def normalize_location(cls, v: Any) -> Optional[str]:
        return normalize_token(v)

    @field_serializer("required_skills")
    def serialize_skills(self, v: frozenset[str]) -> list[str]:
        return sorted(v)

    @property
    def display_title(self) -> str:
        """Get a printable title for the job."""
        return self.title or self.job_id or "Untitled job"
