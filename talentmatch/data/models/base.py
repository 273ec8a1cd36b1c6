"""
Base model classes for TalentMatch data models.

Provides common configuration and the token normalization shared by every
model that carries skills or locations.
"""

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict


def normalize_token(value: Optional[str]) -> Optional[str]:
    """
    Normalize a skill or location token for comparison.

    Case-folds and trims surrounding whitespace. Blank tokens become None.
    """
    if value is None:
        return None
    token = str(value).strip().casefold()
    return token or None


def normalize_tokens(values: Optional[Iterable[Any]]) -> frozenset[str]:
    """Normalize a collection of tokens into a deduplicated set."""
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    tokens = (normalize_token(v) for v in values)
    return frozenset(t for t in tokens if t)


class EmbeddedModel(BaseModel):
    """
    Base model for value objects passed through the matching engine.

    Instances are frozen so the engine can never mutate caller input.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )
