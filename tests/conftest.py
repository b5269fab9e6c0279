"""
Shared fixtures for the API tests.

Every test gets its own data directory with a seeded ``rooms``
collection, and a cheap password hash cost so registration and login
stay fast.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

from room_booking_api.app.core.config import settings
from room_booking_api.app.main import app


ROOMS = [
    {"id": 1, "name": "Garden Single", "maxGuests": 1, "pricePerNight": 60,
     "availableDates": ["2024-06-01", "2024-06-02"]},
    {"id": 2, "name": "Harbour Double", "maxGuests": 2, "pricePerNight": 95,
     "availableDates": ["2024-06-05"]},
    {"id": 3, "name": "Family Suite", "maxGuests": 4, "pricePerNight": 180,
     "availableDates": ["2024-06-01", "2024-06-03"]},
    {"id": 4, "name": "Loft", "maxGuests": 5, "pricePerNight": 150,
     "availableDates": ["2024-06-10"]},
    {"id": 5, "name": "Penthouse", "maxGuests": 6, "pricePerNight": 150,
     "availableDates": ["2024-06-01"]},
]


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the store at an empty temporary directory seeded with rooms."""
    monkeypatch.setattr(settings, "data_dir", str(tmp_path))
    monkeypatch.setattr(settings, "password_hash_iterations", 1000)
    monkeypatch.setattr(settings, "access_token_expire_minutes", 0)
    (tmp_path / "rooms.json").write_text(json.dumps(ROOMS), encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(data_dir: Path) -> Iterator[TestClient]:
    """Started test client; startup creates the remaining collections."""
    with TestClient(app) as test_client:
        yield test_client


def read_collection(data_dir: Path, name: str) -> list[Dict[str, Any]]:
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def auth_headers(client: TestClient) -> Callable[..., Dict[str, str]]:
    """Factory that registers and logs in a user, returning auth headers."""

    def _make(email: str = "jane@example.com", password: str = "secret", name: str = "Jane") -> Dict[str, str]:
        client.post("/api/register", json={"name": name, "email": email, "password": password})
        response = client.post("/api/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _make
