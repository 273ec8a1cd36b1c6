"""
Utility modules for TalentMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from talentmatch.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
)
from talentmatch.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    DEFAULT_EXPERIENCE_CAP,
    DEFAULT_LOCATION_BONUS,
    DEFAULT_SCORING_WEIGHTS,
    MatchScoreLevel,
    AuditAction,
)
from talentmatch.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "DEFAULT_EXPERIENCE_CAP",
    "DEFAULT_LOCATION_BONUS",
    "DEFAULT_SCORING_WEIGHTS",
    "MatchScoreLevel",
    "AuditAction",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
]
