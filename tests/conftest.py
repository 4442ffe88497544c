import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.directory.core.config import settings

DEFAULT_USERS = [
    {"id": 1, "name": "Anna", "email": "anna@example.com", "mobile": "100", "status": "Active"},
    {"id": 2, "name": "Bob", "email": "bob@example.com", "mobile": "200", "status": "inactive"},
    {"id": 3, "name": "Annabelle", "email": "annabelle@example.com", "mobile": "300", "status": "ACTIVE"},
    {
        "id": "4",
        "name": "Carl",
        "email": "carl@example.com",
        "mobile": "400",
        "status": "Inactive",
        "avatar": "https://cdn.example.com/carl.png",
    },
]


def write_users(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture()
def users_file(tmp_path: Path, monkeypatch) -> Path:
    path = write_users(tmp_path / "users.json", DEFAULT_USERS)
    monkeypatch.setattr(settings, "USERS_FIXTURE_PATH", str(path))
    return path


@pytest.fixture()
def client(users_file):
    from app.main import create_app

    with TestClient(create_app()) as client:
        yield client
