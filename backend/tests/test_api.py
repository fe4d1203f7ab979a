import pytest
from fastapi.testclient import TestClient

from api.router import limiter
from config import settings
from main import app

client = TestClient(app)

pytestmark = pytest.mark.api


@pytest.fixture(autouse=True)
def _reset_rate_limit():
    limiter.reset()
    yield
    limiter.reset()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == app.version


def test_analyze():
    response = client.post(
        "/analyze",
        json={
            "resume_text": "I have 5 years of experience with javascript and react.",
            "job_description": "Looking for javascript and python developer with 3 years of experience.",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["overall_score"] == 57
    assert data["job_title"].startswith("Looking for javascript")
    assert data["skills_analysis"]["missing_skills"] == ["python"]
    assert [c["weight"] for c in data["detailed_breakdown"]["categories"]] == [35, 25, 20, 15, 5]
    assert data["predictive_metrics"]["ats_pass_rate"] == 54
    assert isinstance(data["improvements"], list)
    assert data["improvements"][0]["priority"] == "high"


@pytest.mark.parametrize(
    "resume_text,job_description",
    [("", "Python developer"), ("Python developer", "   \n"), ("  ", "  ")],
)
def test_analyze_rejects_blank_input(resume_text, job_description):
    response = client.post(
        "/analyze",
        json={"resume_text": resume_text, "job_description": job_description},
    )
    assert response.status_code == 400


def test_analyze_rejects_missing_field():
    response = client.post("/analyze", json={"resume_text": "Python developer"})
    assert response.status_code == 422


def test_analyze_rejects_oversize_resume(monkeypatch):
    monkeypatch.setattr(settings, "max_resume_chars", 10)
    response = client.post(
        "/analyze",
        json={"resume_text": "Python developer with AWS", "job_description": "Python"},
    )
    assert response.status_code == 400
    assert "too long" in response.json()["detail"]


def test_analyze_rejects_oversize_job_description(monkeypatch):
    monkeypatch.setattr(settings, "max_job_description_chars", 5)
    response = client.post(
        "/analyze",
        json={"resume_text": "Python", "job_description": "Python developer"},
    )
    assert response.status_code == 400
