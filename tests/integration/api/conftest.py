"""Pytest fixtures for API integration tests.

Every test gets a fresh app on an in-memory SQLite database with "today"
pinned to Wednesday 2025-07-16.
"""

from typing import Callable

import pytest

from tests.shared.fixtures.api import login, make_client, make_settings, seed_team
from worksync_config.settings import Settings


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return make_settings()


@pytest.fixture
def test_client(api_settings):
    """Client for a fresh app; the lifespan creates the tables."""
    with make_client(api_settings) as client:
        yield client


@pytest.fixture
def team(test_client) -> dict[str, str]:
    return seed_team(test_client)


@pytest.fixture
def manager_headers(test_client, team) -> dict[str, str]:
    return login(test_client, "manager", "p")


@pytest.fixture
def alice_headers(test_client, team) -> dict[str, str]:
    return login(test_client, "alice", "alice123")


@pytest.fixture
def create_shift(test_client, manager_headers) -> Callable[..., str]:
    """Schedule a shift as the manager; returns its ID."""

    def _create(  # NOQA: PLR0913
        employee_id: str,
        day: str = "2025-07-16",
        start_time: str = "09:00",
        end_time: str = "17:00",
        task: str = "Front desk",
    ) -> str:
        body = {
            "employeeId": employee_id,
            "day": day,
            "startTime": start_time,
            "endTime": end_time,
            "task": task,
        }
        response = test_client.post("/shifts", json=body, headers=manager_headers)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create
