from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ranking_engine.api.main import create_app


@pytest.fixture()
def api_client():
    app = create_app()
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def rank_payload():
    return {
        "user_location": {
            "latitude": 40.0,
            "longitude": -74.0,
            "preferred_categories": ["music"],
            "current_time": "2026-03-01T12:00:00Z",
        },
        "max_distance_km": 50,
        "limit": 10,
        "events": [
            {
                "id": "far",
                "title": "Farmers Market",
                "description": "Local produce",
                "latitude": 40.3,
                "longitude": -74.0,
                "category": "food",
                "start_time": "2026-03-01T18:00:00Z",
                "created_at": "2026-03-01T08:00:00Z",
                "view_count": 50,
                "save_count": 2,
            },
            {
                "id": "near",
                "title": "Live Jazz Concert Downtown",
                "description": "Quartet night",
                "latitude": 40.0,
                "longitude": -74.0,
                "category": "music",
                "start_time": "2026-03-01T18:00:00Z",
                "created_at": "2026-03-01T08:00:00Z",
                "view_count": 50,
                "save_count": 2,
            },
            {
                "id": "out",
                "title": "Boston Marathon",
                "latitude": 42.36,
                "longitude": -71.06,
                "category": "sports",
            },
        ],
    }
