"""Pytest fixtures and configuration for recurdate tests."""

import pytest
from datetime import date
from fastapi.testclient import TestClient

from recurdate.models.recurrence import RecurrenceFrequency


@pytest.fixture
def rule_base():
    """Base fields for a daily rule (override per test)."""
    return {
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 1, 5),
        "frequency": RecurrenceFrequency.DAILY,
        "interval": 1,
    }


@pytest.fixture
def rule_payload():
    """JSON body for the API, as the form would submit it."""
    return {
        "start_date": "2024-01-01",
        "end_date": "2024-01-14",
        "frequency": "weekly",
        "interval": 1,
        "selected_weekdays": [1, 3],
    }


@pytest.fixture
def test_client():
    """Create a FastAPI test client."""
    from recurdate.api.app import app

    with TestClient(app) as client:
        yield client
