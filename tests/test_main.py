"""Smoke tests for the wired application and its lifespan."""

from fastapi.testclient import TestClient

from uwodb_clock.main import app, ticker


class TestApp:
    def test_health_reports_running_ticker(self) -> None:
        with TestClient(app) as client:
            body = client.get("/health").json()
            assert body["status"] == "ok"
            assert body["timezone"] == "America/Los_Angeles"
            assert body["ticker_running"] is True
        assert ticker.running is False

    def test_navbar_endpoint(self) -> None:
        with TestClient(app) as client:
            body = client.get("/api/navbar").json()
            assert body["season"]["label"] in {"Summer", "Winter"}
            assert body["port"]["label"] in {"Day", "Night"}
            assert 0.0 <= body["port"]["progress"] <= 1.0
