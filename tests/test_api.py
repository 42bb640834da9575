"""
Tests for the todo API.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from todo_api.api.app import app
from todo_api.api.dependencies import init_state
from todo_api.errors import CacheError
from todo_api.services import JwtTokenService

ADMIN = {"username": "admin", "password": "admin-pass", "full_name": "Admin User", "role": "admin"}
MEMBER = {"username": "budi", "password": "budi-pass", "full_name": "Budi Santoso", "role": "user"}


@pytest.fixture
def client(session_factory, memory_cache):
    """Create a test client wired to SQLite and an in-memory cache."""
    init_state(app, session_factory, memory_cache, JwtTokenService(secret_key="test-secret"))
    return TestClient(app)


def register(client, user):
    response = client.post("/register", json=user)
    assert response.status_code == 201
    return response.json()["data"]


def auth_header(client, user):
    register(client, user)
    response = client.post("/login", json={"username": user["username"], "password": user["password"]})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}


@pytest.fixture
def admin_headers(client):
    return auth_header(client, ADMIN)


@pytest.fixture
def member_headers(client):
    return auth_header(client, MEMBER)


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Todo API"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True, "database_healthy": True}


def test_register(client):
    data = register(client, MEMBER)
    assert data["username"] == "budi"
    assert data["role"] == "user"
    assert "password" not in data


def test_register_duplicate(client):
    register(client, MEMBER)

    response = client.post("/register", json=MEMBER)

    assert response.status_code == 409
    assert response.json() == {"code": 409, "message": "username already taken"}


def test_register_invalid_payload(client):
    response = client.post("/register", json={"username": "x", "password": "pw", "role": "root"})

    assert response.status_code == 400
    assert response.json()["code"] == 400


def test_login_invalid_credentials(client):
    register(client, MEMBER)

    wrong_password = client.post("/login", json={"username": "budi", "password": "nope"})
    unknown_user = client.post("/login", json={"username": "ghost", "password": "nope"})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_login_token_round_trip(client):
    headers = auth_header(client, MEMBER)
    token = headers["Authorization"].removeprefix("Bearer ")

    claims = app.state.token_service.decode_access_token(token)

    assert claims.username == "budi"
    assert claims.role == "user"
    assert claims.full_name == "Budi Santoso"


def test_private_route_requires_token(client):
    response = client.get("/todos")

    assert response.status_code == 401
    assert response.json()["code"] == 401


def test_private_route_rejects_garbage_token(client):
    response = client.get("/todos", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_users_admin_only(client, member_headers, admin_headers):
    assert client.get("/users", headers=member_headers).status_code == 403

    response = client.get("/users", headers=admin_headers)

    assert response.status_code == 200
    users = response.json()["data"]
    assert {user["username"] for user in users} == {"admin", "budi"}
    assert all("password" not in user for user in users)


def test_update_and_delete_user(client, admin_headers):
    member = register(client, MEMBER)

    response = client.put(f"/users/{member['id']}", json={"full_name": "Budi S."}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["full_name"] == "Budi S."
    assert response.json()["data"]["username"] == "budi"

    response = client.post("/login", json={"username": "budi", "password": "budi-pass"})
    assert response.status_code == 200

    assert client.delete(f"/users/{member['id']}", headers=admin_headers).status_code == 200
    assert client.delete(f"/users/{member['id']}", headers=admin_headers).status_code == 404


def test_user_malformed_id(client, admin_headers):
    response = client.put("/users/abc", json={}, headers=admin_headers)

    assert response.status_code == 400


def test_todo_lifecycle(client, member_headers, admin_headers, memory_cache):
    response = client.post(
        "/todos",
        json={"title": "A", "content": "B", "due_date": "2030-01-01T09:00:00", "user_id": 2},
        headers=member_headers,
    )
    assert response.status_code == 200
    todo = response.json()["data"]
    assert todo["title"] == "A"
    assert todo["completed"] is False

    listed = client.get("/todos", headers=member_headers).json()["data"]
    assert [item["id"] for item in listed] == [todo["id"]]
    assert any(key.endswith(":todos:find-all") for key in memory_cache.values)

    response = client.put(
        f"/todos/{todo['id']}",
        json={"title": "", "content": "C", "completed": True},
        headers=member_headers,
    )
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["title"] == "A"
    assert updated["content"] == "C"
    assert updated["completed"] is True
    assert updated["due_date"].startswith("2030-01-01T09:00:00")
    assert not any(key.endswith(":todos:find-all") for key in memory_cache.values)

    listed = client.get("/todos", headers=member_headers).json()["data"]
    assert listed[0]["content"] == "C"

    assert client.delete(f"/todos/{todo['id']}", headers=member_headers).status_code == 403
    assert client.delete(f"/todos/{todo['id']}", headers=admin_headers).status_code == 200
    assert client.get("/todos", headers=member_headers).json()["data"] == []


def test_todo_not_found(client, member_headers, admin_headers):
    response = client.put("/todos/999", json={"title": "X"}, headers=member_headers)
    assert response.status_code == 404
    assert response.json() == {"code": 404, "message": "todo not found"}

    assert client.get("/todos/999", headers=member_headers).status_code == 404
    assert client.delete("/todos/999", headers=admin_headers).status_code == 404


def test_todo_non_positive_id(client, member_headers):
    response = client.get("/todos/0", headers=member_headers)

    assert response.status_code == 400


def test_cache_outage_fails_listing(client, member_headers, session_factory):
    """A broken cache surfaces as a 500 on the listing endpoint."""
    broken = MagicMock()
    broken.get.side_effect = CacheError("connection refused")
    init_state(app, session_factory, broken, JwtTokenService(secret_key="test-secret"))

    response = client.get("/todos", headers=member_headers)

    assert response.status_code == 500
    assert response.json() == {"code": 500, "message": "Failed to fetch todos"}


def test_todo_due_date_offset_normalized_to_utc(client, member_headers):
    response = client.post(
        "/todos",
        json={"title": "Standup", "due_date": "2030-01-01T09:00:00+07:00"},
        headers=member_headers,
    )

    assert response.status_code == 200
    due_date = response.json()["data"]["due_date"]
    assert due_date.startswith("2030-01-01T02:00:00")
    assert due_date.endswith(("Z", "+00:00"))
