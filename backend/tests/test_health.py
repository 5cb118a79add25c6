"""
Tests for health and API info endpoints
"""
from datetime import datetime


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "IPL Auction"
    datetime.fromisoformat(data["timestamp"])


def test_api_root(client):
    response = client.get("/api")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "IPL Auction"
    assert data["status"] == "running"
    assert data["version"] == "0.1.0"
    assert "environment" in data
