"""Shared pytest fixtures for all tests."""

import pytest
from fastapi.testclient import TestClient

from garten.events import CalendarEvent


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan running."""
    from garten.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def overlapping_events():
    """Two synthetic ranges that both cover 07-10."""
    return (
        CalendarEvent("First", "07-01", "07-15", "#111111"),
        CalendarEvent("Second", "07-05", "07-20", "#222222"),
    )
