"""
Exceptions raised by TalentMatch business logic.
"""

from typing import Any, Optional


class TalentMatchError(Exception):
    """Base class for TalentMatch errors."""


class InvalidCandidateError(TalentMatchError, ValueError):
    """A candidate profile violates the engine's input contract."""

    def __init__(self, candidate_id: Optional[str], field: str, value: Any, reason: str):
        self.candidate_id = candidate_id
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid candidate {candidate_id!r}: field '{field}' {reason} (got {value!r})"
        )


class InputDecodeError(TalentMatchError, ValueError):
    """An input document could not be decoded into matching models."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")
