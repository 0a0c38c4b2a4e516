"""Tests for the health and auth endpoints."""

from unittest.mock import MagicMock

import pytest

from sessionauth.core.modules.session.models import SESSION_COOKIE_NAME


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Server is healthy."}


class TestSignup:
    def test_new_email(self, client, user_collection):
        user_collection.count_documents.return_value = 0

        response = client.post("/auth/signup", json={"email": "new@x.com", "name": "New"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Verification email sent. Please check your inbox.",
            "email": "new@x.com",
        }

    def test_existing_email(self, client, user_collection):
        user_collection.count_documents.return_value = 1

        response = client.post("/auth/signup", json={"email": "a@x.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "User with this email already exists", "type": "validation_error"}

    @pytest.mark.parametrize("body", [{"email": "not-an-email"}, {}, {"email": "a@x.com", "name": 5}])
    def test_invalid_input(self, client, user_collection, body):
        response = client.post("/auth/signup", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid input"
        assert response.json()["details"]
        user_collection.count_documents.assert_not_called()


class TestLogin:
    def test_existing_user(self, client, user_collection):
        user_collection.count_documents.return_value = 1

        response = client.post("/auth/login", json={"email": "a@x.com"})

        assert response.status_code == 200
        assert response.json() == {"message": "Login email sent. Please check your inbox.", "email": "a@x.com"}
        user_collection.count_documents.assert_awaited_once_with({"email": "a@x.com"}, limit=1)

    def test_unknown_user(self, client, user_collection):
        user_collection.count_documents.return_value = 0

        response = client.post("/auth/login", json={"email": "a@x.com"})

        assert response.status_code == 404
        assert response.json() == {"error": "User not found. Please sign up first.", "type": "not_found"}


class TestMe:
    def test_returns_principal_without_empty_name(self, client, use_store, make_store, live_record, user_id):
        use_store(make_store(live_record))
        client.cookies.set(SESSION_COOKIE_NAME, "abc123")

        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"user": {"id": str(user_id), "email": "a@x.com"}}

    def test_requires_session(self, client, use_store, make_store):
        use_store(make_store())

        response = client.get("/auth/me")

        assert response.status_code == 401


class TestSession:
    def test_anonymous(self, client, use_store, make_store):
        use_store(make_store())

        response = client.get("/auth/session")

        assert response.status_code == 200
        assert response.json() == {"user": None}

    def test_authenticated(self, client, use_store, make_store, live_record, user_id):
        use_store(make_store(live_record))

        response = client.get("/auth/session", headers={"Authorization": "Bearer abc123"})

        assert response.json()["user"]["id"] == str(user_id)


class TestLogout:
    def test_deletes_session_and_clears_cookie(self, client, use_store, make_store, live_record, session_collection):
        use_store(make_store(live_record))
        session_collection.delete_one.return_value = MagicMock(deleted_count=1)
        client.cookies.set(SESSION_COOKIE_NAME, "abc123")

        response = client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}
        session_collection.delete_one.assert_awaited_once_with({"session_token": "abc123"})
        assert SESSION_COOKIE_NAME in response.headers["set-cookie"]

    def test_rejected_without_session(self, client, use_store, make_store, session_collection):
        use_store(make_store())

        response = client.post("/auth/logout")

        assert response.status_code == 401
        session_collection.delete_one.assert_not_called()
