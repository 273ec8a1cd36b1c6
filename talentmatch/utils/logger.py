"""
Logging infrastructure for TalentMatch.

Uses Loguru with a console sink, a rotating file sink, and a separate
audit sink for ranking decisions. Nothing is configured on import; the
CLI calls :func:`setup_logging` once per invocation.
"""

import sys
from typing import Any

from loguru import logger
from pydantic import BaseModel

from talentmatch.utils.config import LoggingSettings, get_settings

# Personal candidate fields kept out of audit records. Ids, skills and
# experience stay visible so a ranking decision can be reconstructed.
REDACTED_FIELDS = frozenset({"name", "location", "email", "phone"})

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[audit_type]} | {message}"


def setup_logging() -> None:
    """
    Configure application-wide logging from the ``LOG_`` settings.

    The console sink and the file sinks can be switched off independently
    with ``LOG_CONSOLE_OUTPUT`` and ``LOG_FILE_OUTPUT``.
    """
    settings = get_settings()
    log_settings = settings.logging

    logger.remove()

    # Tracebacks with variable values only while developing
    diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=diagnose,
        )

    if log_settings.file_output:
        _add_file_sinks(log_settings, diagnose)

    logger.debug(f"Logging initialized - Level: {log_settings.level}")


def _add_file_sinks(log_settings: LoggingSettings, diagnose: bool) -> None:
    """Add the application log and, next to it, the audit log."""
    log_file = log_settings.file_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )
    logger.add(
        log_file.parent / "audit.log",
        format=AUDIT_FORMAT,
        level="INFO",
        filter=lambda record: "audit_type" in record["extra"],
        rotation="1 week",
        retention="1 year",
        enqueue=True,
    )


def get_logger(name: str) -> Any:
    """Return the shared logger bound to ``name`` (typically ``__name__``)."""
    return logger.bind(name=name)


def _sanitize_for_logging(data: Any) -> Any:
    """Redact personal candidate fields, descending into models and containers."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    if isinstance(data, dict):
        return {
            k: "***REDACTED***" if k.lower() in REDACTED_FIELDS else _sanitize_for_logging(v)
            for k, v in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [_sanitize_for_logging(item) for item in data]
    return data


def audit_log(
    action: str,
    details: dict[str, Any],
    audit_type: str = "DECISION",
) -> None:
    """
    Log an audit entry for a ranking decision.

    Args:
        action: The action being audited (e.g., "candidates_ranked")
        details: Dictionary of relevant details; candidate models are allowed
        audit_type: Type of audit entry (DECISION, ACCESS)
    """
    logger.bind(audit_type=audit_type).info(f"{action} | {_sanitize_for_logging(details)}")
