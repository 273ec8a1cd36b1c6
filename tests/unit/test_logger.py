"""
Tests for talentmatch.utils.logger — audit redaction and sink setup.
"""

import pytest
from loguru import logger

from talentmatch.data.models import CandidateProfile
from talentmatch.utils.config import reload_settings
from talentmatch.utils.logger import _sanitize_for_logging, audit_log, setup_logging


@pytest.fixture
def audit_messages():
    messages = []
    handler_id = logger.add(
        messages.append,
        format="{message}",
        filter=lambda record: "audit_type" in record["extra"],
    )
    yield messages
    logger.remove(handler_id)


class TestSanitizeForLogging:
    def test_redacts_personal_fields(self):
        sanitized = _sanitize_for_logging({"id": "c1", "name": "Ada", "location": "berlin"})
        assert sanitized == {"id": "c1", "name": "***REDACTED***", "location": "***REDACTED***"}

    def test_keeps_scoring_fields(self):
        details = {"candidate_id": "c1", "skills": ["python"], "experience_years": 4}
        assert _sanitize_for_logging(details) == details

    def test_candidate_model_is_dumped_and_redacted(self):
        candidate = CandidateProfile(id="c1", name="Ada", skills=["Python"], experience_years=3, location="Paris")
        sanitized = _sanitize_for_logging({"candidate": candidate})["candidate"]
        assert sanitized["id"] == "c1"
        assert sanitized["skills"] == ["python"]
        assert sanitized["name"] == "***REDACTED***"
        assert sanitized["location"] == "***REDACTED***"

    def test_nested_lists(self):
        sanitized = _sanitize_for_logging({"pool": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}]})
        assert [c["name"] for c in sanitized["pool"]] == ["***REDACTED***", "***REDACTED***"]


class TestAuditLog:
    def test_audit_entry_is_redacted(self, audit_messages):
        candidate = CandidateProfile(id="c7", name="Grace Hopper", experience_years=9)
        audit_log("jobs_ranked", {"candidate": candidate, "jobs": 2})
        assert len(audit_messages) == 1
        assert "jobs_ranked" in audit_messages[0]
        assert "c7" in audit_messages[0]
        assert "Grace Hopper" not in audit_messages[0]

    def test_plain_log_is_not_audited(self, audit_messages):
        logger.info("not an audit entry")
        assert audit_messages == []


class TestSetupLogging:
    def test_file_sinks_written_under_working_directory(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("LOG_FILE_PATH", raising=False)
        monkeypatch.setenv("LOG_FILE_OUTPUT", "true")
        try:
            reload_settings()
            setup_logging()
            audit_log("stats_computed", {"total_candidates": 1}, audit_type="ACCESS")
            logger.complete()
        finally:
            logger.remove()
            monkeypatch.setenv("LOG_FILE_OUTPUT", "false")
            reload_settings()

        assert (tmp_path / "logs" / "talentmatch.log").exists()
        assert "stats_computed" in (tmp_path / "logs" / "audit.log").read_text(encoding="utf-8")
