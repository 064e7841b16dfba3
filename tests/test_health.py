"""Tests for health check endpoints."""

from fastapi.testclient import TestClient


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "catalog-api"
    assert "version" in data


def test_readiness_check(client: TestClient) -> None:
    """Test readiness endpoint returns ready status."""
    response = client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_stats(auth_client: TestClient) -> None:
    """Test stats reflect the current product count."""
    assert auth_client.get("/stats").json()["product_count"] == 3

    auth_client.delete("/api/products/1")

    assert auth_client.get("/stats").json()["product_count"] == 2
