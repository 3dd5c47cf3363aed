"""Tests for POST /v1/connectivity/online."""

from fastapi.testclient import TestClient


class TestReportOnline:
    def test_replays_buffered_exchanges(self, client: TestClient, transcript) -> None:
        transcript.offline = True
        conversation_id = client.post(
            "/v1/turns", json={"scenario_id": "club-visit", "message": "Hello"}
        ).json()["conversation_id"]
        transcript.offline = False

        response = client.post("/v1/connectivity/online")

        assert response.status_code == 200
        assert response.json() == {"replayed": 2, "pending": 0}
        exchanges = client.get(f"/v1/conversations/{conversation_id}/transcript").json()
        assert [e["status"] for e in exchanges["exchanges"]] == ["confirmed", "confirmed"]

    def test_store_still_unreachable(self, client: TestClient, transcript) -> None:
        transcript.offline = True
        client.post("/v1/turns", json={"scenario_id": "club-visit", "message": "Hello"})

        response = client.post("/v1/connectivity/online")

        assert response.json() == {"replayed": 0, "pending": 2}
        assert client.get("/health").json()["status"] == "degraded"

    def test_nothing_buffered(self, client: TestClient) -> None:
        response = client.post("/v1/connectivity/online")

        assert response.json() == {"replayed": 0, "pending": 0}
