"""
Tests for talentmatch.data.loaders — JSON input decoding.
"""

import pytest

from talentmatch.core.exceptions import InputDecodeError
from talentmatch.data import (
    find_candidate,
    load_candidates,
    load_job,
    load_jobs,
    parse_candidates,
    parse_job,
    parse_jobs,
)


class TestParse:
    def test_parse_job_with_aliases(self, sample_job_document):
        job = parse_job(sample_job_document)
        assert job.job_id == "job-42"
        assert job.required_skills == {"javascript", "react", "typescript"}
        assert job.preferred_location == "berlin"

    def test_parse_job_wrapped(self, sample_job_document):
        assert parse_job({"job": sample_job_document}).job_id == "job-42"

    def test_parse_candidates_list(self, sample_candidate_documents):
        candidates = parse_candidates(sample_candidate_documents)
        assert [c.id for c in candidates] == ["alice", "bob", "carol"]
        assert candidates[2].skills == {"typescript", "react", "javascript", "css"}

    def test_parse_candidates_wrapped(self, sample_candidate_documents):
        candidates = parse_candidates({"candidates": sample_candidate_documents})
        assert len(candidates) == 3

    def test_parse_jobs(self, sample_job_documents):
        jobs = parse_jobs(sample_job_documents)
        assert [j.is_active for j in jobs] == [True, True, False]

    def test_wrong_shape(self):
        with pytest.raises(InputDecodeError, match="expected a list of candidates"):
            parse_candidates({"people": []})

    def test_validation_error_names_entry(self):
        with pytest.raises(InputDecodeError) as exc_info:
            parse_candidates([{"id": "ok", "experience_years": 2}, {"skills": ["go"]}], source="pool.json")
        assert exc_info.value.source == "pool.json[1]"


class TestLoad:
    def test_load_files(self, job_file, jobs_file, candidates_file):
        assert load_job(job_file).job_id == "job-42"
        assert len(load_jobs(jobs_file)) == 3
        assert len(load_candidates(candidates_file)) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputDecodeError, match="does not exist"):
            load_job(tmp_path / "nope.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "job.yaml"
        path.write_text("job_id: 1", encoding="utf-8")
        with pytest.raises(InputDecodeError, match="unsupported format"):
            load_job(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InputDecodeError, match="invalid JSON"):
            load_candidates(path)


class TestFindCandidate:
    def test_found_and_missing(self, sample_candidate_documents):
        candidates = parse_candidates(sample_candidate_documents)
        assert find_candidate(candidates, "bob").name == "Bob Okafor"
        assert find_candidate(candidates, "dave") is None
