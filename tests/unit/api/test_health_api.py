"""Tests for health and metrics endpoints."""

from fastapi.testclient import TestClient


class TestHealthEndpoint:
    def test_healthy(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["chat_provider"] == "mock"
        assert data["narration_enabled"] is False
        assert data["active_sessions"] == 0
        assert data["pending_exchanges"] == 0

    def test_degraded_while_exchanges_pending(self, client: TestClient, transcript) -> None:
        transcript.offline = True
        client.post("/v1/turns", json={"scenario_id": "club-visit", "message": "Hello"})

        data = client.get("/health").json()

        assert data["status"] == "degraded"
        assert data["pending_exchanges"] == 2
        assert data["active_sessions"] == 1


class TestMetricsEndpoint:
    def test_prometheus_format(self, client: TestClient) -> None:
        client.post("/v1/turns", json={"scenario_id": "club-visit", "message": "Hello"})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "rehearsal_turns_total" in response.text
