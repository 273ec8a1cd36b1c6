"""
Candidate profile data models for TalentMatch.
"""

from typing import Any, Optional

from pydantic import Field, field_serializer, field_validator

from .base import EmbeddedModel, normalize_token, normalize_tokens


class CandidateProfile(EmbeddedModel):
    """
    A worker's skills, experience and optional location.

    Missing or negative experience is accepted here and rejected by the
    matching engine, which reports the offending candidate by id.
    """

    id: str
    name: Optional[str] = None
    skills: frozenset[str] = Field(default_factory=frozenset)
    experience_years: Optional[int] = None
    location: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Identifiers are opaque; numeric ids are kept as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("skills", mode="before")
    @classmethod
    def normalize_skills(cls, v: Any) -> frozenset[str]:
        """Normalize skill names to case-folded, trimmed, unique tokens."""
        return normalize_tokens(v)

    @field_validator("location", mode="before")
    @classmethod
    def normalize_location(cls, v: Any) -> Optional[str]:
        return normalize_token(v)

    @field_serializer("skills")
    def serialize_skills(self, v: frozenset[str]) -> list[str]:
        return sorted(v)

    @property
    def display_name(self) -> str:
        return self.name or self.id
