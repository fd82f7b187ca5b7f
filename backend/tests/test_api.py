import hashlib

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_document_store
from api.router import limiter
from config import settings
from main import app
from services.document_store import InMemoryDocumentStore


@pytest.fixture
def client():
    store = InMemoryDocumentStore()
    app.dependency_overrides[get_document_store] = lambda: store
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        limiter.enabled = True
        app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["gemini_configured"] is False
    assert data["scoring_profile"] == settings.scoring_profile


def test_evaluate_upload(client, sample_document):
    content = sample_document.encode("utf-8")
    response = client.post(
        "/evaluate",
        files={"document": ("jane.txt", content, "text/plain")},
        data={"user_id": "u1", "user_name": "Jane"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["hash"] == hashlib.sha256(content).hexdigest()
    assert set(data) == {"hash", "evaluation", "fairness_result", "public_status"}
    assert 0 <= data["evaluation"]["score"] <= 100
    assert set(data["fairness_result"]["checks"]) == {
        "evaluation_score",
        "skills_identified",
        "experience_level",
        "shortlist_decision",
        "content_quality",
    }
    assert data["public_status"]["status"] in ("Fair", "Pending", "Unfair")


def test_evaluate_empty_upload_rejected(client):
    response = client.post("/evaluate", files={"document": ("empty.txt", b"", "text/plain")})
    assert response.status_code == 400
    assert response.json()["detail"] == "No document content provided"


def test_evaluate_too_large(client, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_size_mb", 0)
    response = client.post("/evaluate", files={"document": ("cv.txt", b"Python", "text/plain")})
    assert response.status_code == 400
    assert "too large" in response.json()["detail"]


def test_evaluate_internal_failure(client, monkeypatch):
    monkeypatch.setattr(settings, "scoring_profile", "generous")
    response = client.post("/evaluate", files={"document": ("cv.txt", b"Python", "text/plain")})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to process document"


def test_evaluate_text(client):
    response = client.post(
        "/evaluate/text",
        json={"text": "Python, React, 5 years experience, team lead, won 1st place hackathon", "file_name": "cv.txt"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["evaluation"]["experience_level"] == "Senior"
    assert data["evaluation"]["experience_years"] == 5


def test_evaluate_text_empty_rejected(client):
    response = client.post("/evaluate/text", json={"text": ""})
    assert response.status_code == 400


def test_verify_round_trip(client, sample_document):
    upload = client.post("/evaluate", files={"document": ("jane.txt", sample_document.encode(), "text/plain")})
    content_hash = upload.json()["hash"]

    response = client.post("/verify", json={"hash": content_hash})
    assert response.status_code == 200
    data = response.json()
    assert data["found"] is True
    assert data["status"] == upload.json()["public_status"]
    assert data["evaluated_at"] is not None


def test_verify_unknown_hash(client):
    response = client.post("/verify", json={"hash": "f" * 64})
    assert response.status_code == 200
    assert response.json()["found"] is False


def test_verify_requires_hash(client):
    response = client.post("/verify", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "Hash is required"


@pytest.mark.parametrize("value", ["", "   ", None])
def test_verify_blank_hash(client, value):
    response = client.post("/verify", json={"hash": value})
    assert response.status_code == 400


def test_history(client, sample_document):
    client.post(
        "/evaluate",
        files={"document": ("jane.txt", sample_document.encode(), "text/plain")},
        data={"user_id": "u1"},
    )
    response = client.get("/history/u1")
    assert response.status_code == 200
    documents = response.json()["documents"]
    assert len(documents) == 1
    assert documents[0]["file_name"] == "jane.txt"

    cleared = client.delete("/history/u1")
    assert cleared.json() == {"success": True, "deleted_count": 1}
    assert client.get("/history/u1").json()["documents"] == []
