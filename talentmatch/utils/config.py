"""
Configuration management for TalentMatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
The matching engine never reads these settings itself; callers pull the values
out and pass them in explicitly.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from talentmatch.utils.constants import (
    DEFAULT_EXPERIENCE_CAP,
    DEFAULT_LOCATION_BONUS,
    DEFAULT_MATCH_LIMIT,
    DEFAULT_SCORING_WEIGHTS,
    MAX_MATCH_LIMIT,
)


class MatchingSettings(BaseSettings):
    """Scoring policy configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    experience_cap: int = DEFAULT_EXPERIENCE_CAP
    location_bonus: float = DEFAULT_LOCATION_BONUS
    skills_weight: float = DEFAULT_SCORING_WEIGHTS["skills_match"]
    experience_weight: float = DEFAULT_SCORING_WEIGHTS["experience_match"]
    default_limit: int = DEFAULT_MATCH_LIMIT

    @field_validator("experience_cap")
    @classmethod
    def validate_experience_cap(cls, v: int) -> int:
        """Experience cap is a divisor and must be positive."""
        if v <= 0:
            raise ValueError("experience_cap must be a positive number of years")
        return v

    @field_validator("skills_weight", "experience_weight")
    @classmethod
    def validate_weight(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Scoring weights must be non-negative")
        return v

    @field_validator("default_limit")
    @classmethod
    def validate_default_limit(cls, v: int) -> int:
        """Clamp the default result limit into 1..MAX_MATCH_LIMIT."""
        return max(1, min(v, MAX_MATCH_LIMIT))

    @property
    def weights(self) -> dict[str, float]:
        """Weights in the shape the matching engine expects."""
        return {
            "skills_match": self.skills_weight,
            "experience_match": self.experience_weight,
        }


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    # Relative to the working directory, never the installed package
    file_path: Path = Path("logs") / "talentmatch.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "TalentMatch"
    version: str = "0.1.0"
    description: str = "Skill and experience based candidate ranking"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
