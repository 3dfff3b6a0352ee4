"""Web API contract tests for the ATS scoring endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from resume_ats.domain import ScoringConfig
from resume_ats.web.app import create_app

RESUME = {
    "personalInfo": {
        "fullName": "Jane Smith",
        "email": "jane@example.com",
        "phone": "555-123-4567",
        "location": "Denver, CO",
        "linkedin": "linkedin.com/in/janesmith",
        "summary": "Backend engineer focused on reliable payment systems and developer tooling for growing teams.",
    },
    "experience": [
        {
            "id": "1",
            "startDate": "2019-03",
            "endDate": "Present",
            "current": True,
            "description": "Led the payments rewrite\nReduced checkout errors by 30%\nAutomated 15 release checks",
        }
    ],
    "education": [{"id": "2", "degree": "BS", "school": "State", "graduationDate": "2018"}],
    "skills": {"technical": ["Go", "Python", "SQL", "Kafka"], "languages": [], "certifications": []},
    "codingProfiles": {},
}


def test_healthz() -> None:
    with TestClient(create_app()) as client:
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


def test_score_resume() -> None:
    with TestClient(create_app()) as client:
        response = client.post("/api/v1/ats/score", json=RESUME)
        assert response.status_code == 200
        body = response.json()
        assert body["totalScore"] == 75
        assert body["grade"] == "Good"
        assert body["warnings"] == []
        assert body["sectionScores"]["bestPractices"] == {"score": 10.0, "maxScore": 15, "label": "Best Practices"}


def test_score_empty_resume() -> None:
    with TestClient(create_app()) as client:
        response = client.post("/api/v1/ats/score", json={})
        assert response.status_code == 200
        body = response.json()
        assert body["totalScore"] == 0
        assert any("No experience" in w for w in body["warnings"])


def test_score_accepts_nulls() -> None:
    with TestClient(create_app()) as client:
        response = client.post(
            "/api/v1/ats/score",
            json={"personalInfo": None, "experience": [None], "skills": {"technical": None}},
        )
        assert response.status_code == 200


def test_score_rejects_wrong_shape() -> None:
    with TestClient(create_app()) as client:
        response = client.post("/api/v1/ats/score", json={"experience": "lots"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert error["details"]["errors"]


def test_weights() -> None:
    with TestClient(create_app()) as client:
        response = client.get("/api/v1/ats/weights")
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 100
        assert [s["key"] for s in body["sections"]] == [
            "keywords",
            "experience",
            "education",
            "formatting",
            "best_practices",
        ]
        assert [s["maxScore"] for s in body["sections"]] == [30, 25, 15, 15, 15]


def test_explicit_config_is_used() -> None:
    config = ScoringConfig(
        weights={"keywords": 10, "experience": 45, "education": 15, "formatting": 15, "best_practices": 15}
    )
    with TestClient(create_app(config)) as client:
        body = client.get("/api/v1/ats/weights").json()
        assert body["sections"][0]["maxScore"] == 10


def test_invalid_config_returns_error_envelope(tmp_path, monkeypatch) -> None:
    path = tmp_path / "scoring.yaml"
    path.write_text("max_bullet_words: 0\n", encoding="utf-8")
    monkeypatch.setenv("RESUME_ATS_CONFIG", str(path))
    with TestClient(create_app()) as client:
        assert client.get("/healthz").status_code == 200
        response = client.post("/api/v1/ats/score", json=RESUME)
        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "CONFIG_ERROR"
        assert error["details"]["issues"][0]["field"] == "max_bullet_words"


def test_scoring_runs_are_observed() -> None:
    app = create_app()
    with TestClient(app) as client:
        client.post("/api/v1/ats/score", json=RESUME)
        client.post("/api/v1/ats/score", json={})
    assert app.state.observer.get_stats()["runs"] == 2
