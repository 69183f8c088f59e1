"""Shared fixtures: an app wired to temporary hosts and credential files."""

from __future__ import annotations

import json
import shlex
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app

USERNAME = "admin"
PASSWORD = "hunter2"
SECRET_KEY = "test-secret"

RELOAD_OK = f'{shlex.quote(sys.executable)} -c "pass"'
RELOAD_FAIL = f'{shlex.quote(sys.executable)} -c "import sys; sys.exit(3)"'


@pytest.fixture
def hosts_file(tmp_path: Path) -> Path:
    """Path of an empty (not yet created) hosts file."""
    return tmp_path / "hosts"


@pytest.fixture
def users_file(tmp_path: Path) -> Path:
    """Credential file with a single user."""
    path = tmp_path / "users.json"
    path.write_text(json.dumps({"users": {USERNAME: PASSWORD}}), encoding="utf-8")
    return path


@pytest.fixture
def settings(hosts_file: Path, users_file: Path) -> Settings:
    """Settings pointing at the temporary files, reload succeeding."""
    return Settings(
        hosts_file=str(hosts_file),
        users_file=str(users_file),
        secret_key=SECRET_KEY,
        reload_command=RELOAD_OK,
    )


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client with settings overridden for the duration of a test."""
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def token(client: TestClient) -> str:
    """A valid bearer token obtained through /login."""
    response = client.post("/login", json={"username": USERNAME, "password": PASSWORD})
    return response.json()["token"]


@pytest.fixture
def auth_headers(token: str) -> dict[str, str]:
    """Authorization header carrying a valid token."""
    return {"Authorization": f"Bearer {token}"}
