"""API tests for the job analysis endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings


@pytest.fixture
def unconfigured_client(monkeypatch, store):
    """App wired as in production, but the LLM cannot be built."""
    from app.main import app
    from app.services.analysis_store import get_analysis_store

    def no_llm():
        raise ValueError("Unsupported LLM_PROVIDER 'bogus'")

    monkeypatch.setattr("app.routers.jobs.get_llm", no_llm)
    app.dependency_overrides[get_analysis_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestAnalyzeJob:

    def test_success(self, client, store):
        resp = client.post("/api/jobs", json={
            "jobDescription": "Frontend role",
            "userSkills": ["React", "Python"],
        })

        assert resp.status_code == 200
        assert resp.json() == {
            "requiredSkills": ["React", "SQL", "Communication"],
            "missingSkills": ["SQL", "Communication"],
        }
        assert len(store.list()) == 1

    def test_exact_match_is_case_sensitive(self, client):
        resp = client.post("/api/jobs", json={
            "jobDescription": "Frontend role",
            "userSkills": ["react"],
        })
        assert resp.json()["missingSkills"] == ["React", "SQL", "Communication"]

    def test_llm_failure_is_generic_500(self, client, fake_llm, store):
        fake_llm.error = ConnectionError("vendor down")

        resp = client.post("/api/jobs", json={
            "jobDescription": "Frontend role",
            "userSkills": ["React"],
        })

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to analyze job"}
        assert store.list() == []

    def test_description_too_long(self, client, fake_llm):
        resp = client.post("/api/jobs", json={
            "jobDescription": "x" * (settings.MAX_DESCRIPTION_LENGTH + 1),
            "userSkills": [],
        })
        assert resp.status_code == 400
        assert resp.json() == {"error": "Job description too long"}
        assert fake_llm.prompts == []


class TestJobReport:

    def test_report(self, client):
        resp = client.post("/api/jobs/report", json={
            "jobDescription": "Must have strong SQL experience and good communication.",
            "userSkills": "react, Python",
        })

        assert resp.status_code == 200
        body = resp.json()
        assert body["analysis"] == {
            "requiredSkills": ["React", "SQL", "Communication"],
            "missingSkills": ["SQL", "Communication"],
            "technicalSkills": ["React", "SQL"],
            "softSkills": ["Communication"],
        }
        assert body["matchedSkills"] == ["React"]
        assert body["matchPercentage"] == 33
        assert body["technicalMatchPercentage"] == 50
        assert body["softMatchPercentage"] == 0
        assert body["readinessScore"] == 35
        assert body["topMissingSkills"] == ["SQL", "Communication"]
        assert len(body["roadmap"]) == 2
        assert body["summary"].startswith("SkillLens analysis for job (summary)")

    def test_fuzzy_policy_overrides_exact_match(self, client):
        resp = client.post("/api/jobs/report", json={
            "jobDescription": "Frontend role",
            "userSkills": "react, sql, communication skills",
        })
        body = resp.json()
        assert body["analysis"]["missingSkills"] == []
        assert body["readinessScore"] == 100

    def test_missing_input(self, client, fake_llm):
        resp = client.post("/api/jobs/report", json={
            "jobDescription": "Frontend role",
            "userSkills": "   ",
        })
        assert resp.status_code == 400
        assert resp.json() == {"error": "Please fill in both fields before analyzing."}
        assert fake_llm.prompts == []

    def test_llm_failure(self, client, fake_llm):
        fake_llm.error = TimeoutError()
        resp = client.post("/api/jobs/report", json={
            "jobDescription": "Frontend role",
            "userSkills": "react",
        })
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to analyze job"}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


class TestUnconfiguredLLM:

    def test_blank_fields_rejected_before_llm_is_built(self, unconfigured_client):
        resp = unconfigured_client.post("/api/jobs/report", json={
            "jobDescription": "",
            "userSkills": "",
        })
        assert resp.status_code == 400
        assert resp.json() == {"error": "Please fill in both fields before analyzing."}

    def test_filled_report_fails_generically(self, unconfigured_client, store):
        resp = unconfigured_client.post("/api/jobs/report", json={
            "jobDescription": "Frontend role",
            "userSkills": "react",
        })
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to analyze job"}
        assert store.list() == []

    def test_analyze_job_fails_generically(self, unconfigured_client):
        resp = unconfigured_client.post("/api/jobs", json={
            "jobDescription": "Frontend role",
            "userSkills": ["React"],
        })
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to analyze job"}


class TestMalformedBody:

    def test_wrong_type_is_400_error(self, client, fake_llm):
        resp = client.post("/api/jobs", json={
            "jobDescription": "x",
            "userSkills": "react",
        })
        assert resp.status_code == 400
        body = resp.json()
        assert list(body) == ["error"]
        assert body["error"].startswith("Invalid request: userSkills:")
        assert fake_llm.prompts == []

    def test_non_json_body(self, client):
        resp = client.post(
            "/api/jobs/report",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"].startswith("Invalid request:")

    def test_malformed_body_with_unconfigured_llm(self, unconfigured_client):
        resp = unconfigured_client.post("/api/jobs", json={
            "jobDescription": 42,
            "userSkills": ["React"],
        })
        assert resp.status_code == 400
        assert resp.json()["error"].startswith("Invalid request: jobDescription:")
