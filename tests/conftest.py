from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

from blog_api.app.core.config import settings
from blog_api.app.core.db import get_connection, init_db
from blog_api.app.main import app

PASSWORD = "password123"


def run(coro: Any) -> Any:
    return asyncio.run(coro)


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch) -> str:
    db_path = str(tmp_path / "test.db")
    monkeypatch.setattr(settings, "database_url", db_path)
    init_db()
    return db_path


@pytest.fixture
def client(database: str) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client: TestClient) -> Callable[[str, str], Dict[str, str]]:
    """Register a user through the API and return its auth headers."""

    def _register(name: str, email: str) -> Dict[str, str]:
        response = client.post(
            "/api/v1/users",
            json={"name": name, "email": email, "password": PASSWORD},
        )
        assert response.status_code == 201, response.text
        login = client.post("/api/v1/users/login", json={"email": email, "password": PASSWORD})
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['access_token']}"}

    return _register


@pytest.fixture
def alice(register) -> Dict[str, str]:
    return register("Alice", "alice@example.com")


@pytest.fixture
def bob(register) -> Dict[str, str]:
    return register("Bob", "bob@example.com")


def insert_user(name: str, email: str) -> int:
    conn = get_connection()
    try:
        cursor = conn.execute(
            "INSERT INTO users (name, email, password) VALUES (?, ?, 'x$y')",
            (name, email),
        )
        conn.commit()
        return cursor.lastrowid
    finally:
        conn.close()


def insert_post(user_id: int, title: str, body: str = "body", created_at: str | None = None) -> int:
    conn = get_connection()
    try:
        if created_at is None:
            cursor = conn.execute(
                "INSERT INTO posts (title, body, user_id) VALUES (?, ?, ?)",
                (title, body, user_id),
            )
        else:
            cursor = conn.execute(
                "INSERT INTO posts (title, body, user_id, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
                (title, body, user_id, created_at, created_at),
            )
        conn.commit()
        return cursor.lastrowid
    finally:
        conn.close()
