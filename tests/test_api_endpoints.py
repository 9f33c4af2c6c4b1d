"""Integration tests for API endpoints.

These tests verify API endpoints work correctly end-to-end.
"""

from unittest.mock import patch


class TestExpandEndpoint:
    """Test POST /recurrence/expand."""

    def test_expand_weekly(self, test_client, rule_payload):
        response = test_client.post("/recurrence/expand", json=rule_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["dates"] == ["2024-01-01", "2024-01-03", "2024-01-08", "2024-01-10"]
        assert data["count"] == 4
        assert data["truncated"] is False

    def test_expand_reports_truncation(self, test_client):
        response = test_client.post(
            "/recurrence/expand",
            json={"start_date": "2000-01-01", "end_date": "2010-01-01", "frequency": "daily"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1000
        assert data["truncated"] is True

    def test_end_before_start_rejected(self, test_client, rule_payload):
        response = test_client.post(
            "/recurrence/expand", json={**rule_payload, "end_date": "2023-12-31"}
        )

        assert response.status_code == 422

    def test_interval_zero_rejected(self, test_client, rule_payload):
        response = test_client.post("/recurrence/expand", json={**rule_payload, "interval": 0})

        assert response.status_code == 422

    def test_malformed_date_rejected(self, test_client, rule_payload):
        response = test_client.post(
            "/recurrence/expand", json={**rule_payload, "start_date": "2024-02-30"}
        )

        assert response.status_code == 422

    def test_unexpected_failure_returns_500(self, test_client, rule_payload):
        with patch("recurdate.api.app.expand_rule", side_effect=RuntimeError("boom")):
            response = test_client.post("/recurrence/expand", json=rule_payload)

        assert response.status_code == 500
        assert "boom" in response.json()["detail"]


class TestPreviewEndpoint:
    """Test POST /recurrence/preview."""

    def test_preview_limited_to_default(self, test_client):
        response = test_client.post(
            "/recurrence/preview",
            json={"start_date": "2024-01-01", "end_date": "", "frequency": "daily"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["limit"] == 50
        assert len(data["dates"]) == 50
        assert data["total_count"] == 367
        assert data["dates"][0] == "2024-01-01"
        assert data["truncated"] is False

    def test_preview_custom_limit(self, test_client, rule_payload):
        response = test_client.post("/recurrence/preview?limit=2", json=rule_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["dates"] == ["2024-01-01", "2024-01-03"]
        assert data["total_count"] == 4
        assert data["limit"] == 2

    def test_preview_rejects_zero_limit(self, test_client, rule_payload):
        response = test_client.post("/recurrence/preview?limit=0", json=rule_payload)

        assert response.status_code == 422


class TestSaveEndpoint:
    """Test POST /recurrence/save."""

    def test_save_returns_rule_dates_and_rrule(self, test_client, rule_payload):
        response = test_client.post("/recurrence/save", json=rule_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["start_date"] == "2024-01-01"
        assert data["end_date"] == "2024-01-14"
        assert data["frequency"] == "weekly"
        assert data["count"] == 4
        assert data["dates"][-1] == "2024-01-10"
        assert data["rrule"] == "FREQ=WEEKLY;BYDAY=MO,WE;WKST=SU;UNTIL=20240114"
        assert data["rule"]["selected_weekdays"] == [1, 3]

    def test_save_without_end_date(self, test_client):
        response = test_client.post(
            "/recurrence/save",
            json={
                "start_date": "2024-01-01",
                "frequency": "monthly",
                "monthly_pattern": "nth_weekday",
                "ordinal": -1,
                "weekday": 5,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["end_date"] is None
        assert data["count"] == 12
        assert data["dates"][0] == "2024-01-26"
        assert data["rrule"] == "FREQ=MONTHLY;BYDAY=-1FR;UNTIL=20250101"


class TestMiscEndpoints:
    """Test root page and health check."""

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_serves_form(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        assert "/recurrence/preview" in response.text
