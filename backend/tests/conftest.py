"""Pytest fixtures."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from moodlens.main import app
from moodlens.services.mood_service import DailyMoodRecord


@pytest.fixture
def client():
    """Test client for the analytics API."""
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_record():
    """Build a mood record at noon UTC on the given day."""

    def _make(label, year, month, day, hour=12):
        return DailyMoodRecord(mood_label=label, timestamp=datetime(year, month, day, hour, tzinfo=timezone.utc))

    return _make


@pytest.fixture
def risk_payload():
    """Backend weekly-risk response with one week starting Monday 2024-01-01."""
    return {
        "weeks": [
            {
                "week_number": 1,
                "week_start_date": "2024-01-01",
                "week_end_date": "2024-01-07",
                "daily_risks": [
                    {"day": day, "value": value}
                    for day, value in zip(
                        ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
                        [52, 60, 38, 98, 48, 42, 43],
                    )
                ],
                "average_risk": 54.4,
            }
        ]
    }
