"""
Tests for the users API endpoints.

Tests FastAPI routes end to end against an in-memory SQLite database.
Validates request validation, response schemas, and error mapping.
"""

from datetime import datetime

from fastapi.testclient import TestClient

BASE = "/api/users"


def _payload(**overrides) -> dict:
    body = {
        "username": "alice",
        "emailAddress": "alice@example.com",
        "firstName": "Alice",
        "lastName": "A",
    }
    body.update(overrides)
    return body


def _create(client: TestClient, **overrides) -> dict:
    response = client.post(BASE, json=_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateUser:
    """Tests for POST /api/users."""

    def test_create_returns_201_with_location(self, client: TestClient) -> None:
        response = client.post(BASE, json=_payload())

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["username"] == "alice"
        assert body["emailAddress"] == "alice@example.com"
        assert body["createdAt"] == body["updatedAt"]
        assert response.headers["location"].endswith(f"{BASE}/1")

    def test_client_supplied_id_is_ignored(self, client: TestClient) -> None:
        body = _create(client, id=500)
        assert body["id"] == 1

    def test_duplicate_username_returns_409(self, client: TestClient) -> None:
        _create(client)

        response = client.post(BASE, json=_payload(emailAddress="x@example.com"))

        assert response.status_code == 409
        assert response.json()["error"] == "User already exists"
        assert len(client.get(BASE).json()) == 1

    def test_duplicate_email_returns_409(self, client: TestClient) -> None:
        _create(client)
        response = client.post(BASE, json=_payload(username="other"))
        assert response.status_code == 409

    def test_invalid_email_rejected(self, client: TestClient) -> None:
        response = client.post(BASE, json=_payload(emailAddress="not-an-email"))
        assert response.status_code == 422

    def test_invalid_username_rejected(self, client: TestClient) -> None:
        response = client.post(BASE, json=_payload(username="has space"))
        assert response.status_code == 422

    def test_empty_name_rejected(self, client: TestClient) -> None:
        response = client.post(BASE, json=_payload(firstName=""))
        assert response.status_code == 422

    def test_overlong_name_rejected(self, client: TestClient) -> None:
        response = client.post(BASE, json=_payload(lastName="x" * 256))
        assert response.status_code == 422


class TestReadUsers:
    """Tests for the GET endpoints."""

    def test_list_empty(self, client: TestClient) -> None:
        response = client.get(BASE)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_all(self, client: TestClient) -> None:
        _create(client)
        _create(client, username="bob", emailAddress="bob@example.com")

        usernames = [u["username"] for u in client.get(BASE).json()]

        assert usernames == ["alice", "bob"]

    def test_get_by_id(self, client: TestClient) -> None:
        created = _create(client)
        response = client.get(f"{BASE}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_by_id_missing_returns_404(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/42")
        assert response.status_code == 404
        assert response.json()["error"] == "User not found"

    def test_filter_by_username(self, client: TestClient) -> None:
        created = _create(client)
        response = client.get(f"{BASE}/filter", params={"username": "alice"})
        assert response.status_code == 200
        assert response.json() == created

    def test_filter_by_unknown_username_returns_404(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/filter", params={"username": "ghost"})
        assert response.status_code == 404

    def test_filter_requires_username(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/filter")
        assert response.status_code == 422


class TestUpdateUser:
    """Tests for PUT /api/users/{id}."""

    def test_update(self, client: TestClient) -> None:
        created = _create(client)

        response = client.put(
            f"{BASE}/{created['id']}", json=_payload(id=created["id"], lastName="B")
        )

        assert response.status_code == 200
        body = response.json()
        assert body["lastName"] == "B"
        assert body["createdAt"] == created["createdAt"]
        assert datetime.fromisoformat(body["updatedAt"]) > datetime.fromisoformat(
            created["updatedAt"]
        )

    def test_id_mismatch_returns_400(self, client: TestClient) -> None:
        created = _create(client)
        response = client.put(f"{BASE}/{created['id']}", json=_payload(id=999))
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid argument"

    def test_missing_body_id_returns_400(self, client: TestClient) -> None:
        created = _create(client)
        response = client.put(f"{BASE}/{created['id']}", json=_payload())
        assert response.status_code == 400

    def test_update_missing_user_returns_404(self, client: TestClient) -> None:
        response = client.put(f"{BASE}/7", json=_payload(id=7))
        assert response.status_code == 404

    def test_update_into_taken_username_returns_409(self, client: TestClient) -> None:
        _create(client)
        bob = _create(client, username="bob", emailAddress="bob@example.com")

        response = client.put(
            f"{BASE}/{bob['id']}",
            json=_payload(id=bob["id"], emailAddress="bob@example.com"),
        )

        assert response.status_code == 409


class TestDeleteUser:
    """Tests for DELETE /api/users/{id}."""

    def test_delete(self, client: TestClient) -> None:
        created = _create(client)

        response = client.delete(f"{BASE}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BASE}/{created['id']}").status_code == 404

    def test_delete_missing_returns_404(self, client: TestClient) -> None:
        assert client.delete(f"{BASE}/3").status_code == 404


def test_example_scenario(client: TestClient) -> None:
    """Create, reject duplicate, update, delete."""
    alice = _create(client)
    assert alice["id"] == 1
    t0 = alice["createdAt"]
    assert alice["updatedAt"] == t0

    duplicate = client.post(
        BASE, json=_payload(emailAddress="alice2@example.com", firstName="Alicia")
    )
    assert duplicate.status_code == 409

    updated = client.put(f"{BASE}/1", json=_payload(id=1, lastName="B")).json()
    assert updated["createdAt"] == t0
    assert datetime.fromisoformat(updated["updatedAt"]) > datetime.fromisoformat(t0)

    assert client.delete(f"{BASE}/1").status_code == 204
    assert client.get(f"{BASE}/1").status_code == 404
