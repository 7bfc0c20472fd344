import pytest
from fastapi.testclient import TestClient

from ats_engine.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["api"] == "/api"


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["cacheEnabled"] is False


def test_ats_check(client, strong_resume_data):
    response = client.post("/api/ats/check", json=strong_resume_data)
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    assert 0 <= body["overallScore"] <= 100
    assert body["passStatus"] in ("excellent", "good", "fair", "poor")
    assert len(body["categories"]) == 7
    assert body["categories"][0]["name"] == "Contact Information"
    assert body["categories"][0]["maxScore"] == 20
    assert body["industryMatch"]["industry"] == "tech"
    assert "matchedKeywords" in body["industryMatch"]
    assert len(body["recommendations"]) <= 10


def test_ats_check_empty_body_scores_poor(client):
    response = client.post("/api/ats/check", json={})
    assert response.status_code == 200
    body = response.json()
    assert body["passStatus"] == "poor"
    assert body["industryMatch"] is None


def test_ats_check_rejects_malformed_skills(client):
    response = client.post("/api/ats/check", json={"skills": "python, go"})
    assert response.status_code == 422


def test_analyze_action_verbs(client):
    response = client.post("/api/action-verbs/analyze", json={"text": "I was responsible for the team"})
    assert response.status_code == 200

    body = response.json()
    assert body["enhancedText"] == "I managed the team"
    assert body["score"] == 17
    assert body["label"] == "Needs Work"
    assert body["replacements"][0]["original"] == "was responsible for"


def test_analyze_action_verbs_bullets(client):
    response = client.post(
        "/api/action-verbs/analyze",
        json={"text": "• Helped the team\n• Made dashboards", "bullets": True},
    )
    assert response.status_code == 200
    assert response.json()["enhancedText"] == "Facilitated the team\n• Developed dashboards"


def test_suggest_power_verbs(client):
    response = client.post("/api/action-verbs/suggest", json={"context": "grow the user base"})
    assert response.status_code == 200
    assert response.json()["verbs"] == ["Expanded", "Scaled", "Accelerated"]


def test_group_skills(client):
    response = client.post("/api/skills/group", json={"skills": ["Python", "Go", "Docker", "Quantum Flux"]})
    assert response.status_code == 200

    body = response.json()
    assert body["groups"][0] == {
        "category": "Programming Languages",
        "icon": "code",
        "skills": ["Python", "Go"],
    }
    assert body["ungrouped"] == ["Quantum Flux"]


def test_categorize_skill(client):
    assert client.post("/api/skills/categorize", json={"skill": "Redis"}).json()["category"] == "Databases"
    assert client.post("/api/skills/categorize", json={"skill": "Quantum Flux"}).json()["category"] is None


def test_list_templates(client):
    response = client.get("/api/templates")
    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [
        "classic", "modern", "professional", "tech", "finance", "healthcare",
    ]


def test_recommend_templates(client, strong_resume_data):
    response = client.post("/api/templates/recommend", json=strong_resume_data)
    assert response.status_code == 200

    body = response.json()
    assert body[0]["template"]["id"] == "tech"
    assert body[0]["matchScore"] > 30
    assert "matchedKeywords" in body[0]
