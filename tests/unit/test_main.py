from fastapi.testclient import TestClient

from src.main import app

client = TestClient(app)


def test_health_check():
    """Smoke test for health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_router_integration():
    """Test that the webhook endpoint is mounted under /api."""
    response = client.post(
        "/api/github/webhooks",
        json={"zen": "Keep it logically awesome."},
        headers={"X-GitHub-Event": "ping"},
    )
    assert response.status_code != 404
