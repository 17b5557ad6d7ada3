"""Health & root endpoint tests."""

from fastapi.testclient import TestClient


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert "version" in data


def test_health_reports_serving_provider(client, monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    health = client.get("/health").json()
    served = client.post("/v1/process", json={"text": "hi"}).json()
    assert health["provider"] == served["provider"] == "stub"


def test_health_ignores_env_changes_after_startup(monkeypatch):
    from services.api.app import deps
    from services.api.app.main import app

    monkeypatch.setattr(deps, "_processor", None)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.delenv("PASTEBOARD_PROVIDER", raising=False)
    monkeypatch.setenv("PASTEBOARD_MOCK_DELAY", "0")
    client = TestClient(app)
    assert client.get("/health").json()["provider"] == "mock"

    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    assert client.get("/health").json()["provider"] == "mock"
    assert client.post("/v1/process", json={"text": "hi"}).json()["provider"] == "mock"


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Pasteboard Pro" in resp.json()["message"]
