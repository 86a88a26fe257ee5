"""
Pytest configuration and shared fixtures.

- Application built around a throwaway SQLite file per test
- FastAPI test client
- Location factory
"""

import pytest
from fastapi.testclient import TestClient

from campusguessr.config import Settings
from campusguessr.main import create_app


# Points inside the campus bounding box
CAMPUS_POINTS = [
    (41.5045, -81.6087),
    (41.5075, -81.6050),
    (41.5020, -81.6100),
    (41.5100, -81.6000),
    (41.4990, -81.6140),
    (41.5060, -81.6110),
]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        LOG_LEVEL="WARNING",
        ROUNDS_PER_GAME=5,
    )


@pytest.fixture
def client(settings):
    """Test client with the lifespan (table creation) running."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def add_location(client):
    """Factory registering a location through the API."""

    def _add(latitude=41.5045, longitude=-81.6087, created_by=None, image_url=None):
        payload = {
            "imageUrl": image_url or f"https://storage.example.com/images/{latitude}_{longitude}.jpg",
            "latitude": latitude,
            "longitude": longitude,
        }
        if created_by is not None:
            payload["createdBy"] = created_by
        response = client.post("/api/locations", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _add


@pytest.fixture
def seeded_locations(add_location):
    return [add_location(lat, lng) for lat, lng in CAMPUS_POINTS]
