"""Integration tests for the authentication endpoints."""

import pytest

pytestmark = pytest.mark.integration

PASSWORD = "secret123"


class TestRegister:
    def test_register_defaults_to_client(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "New.User@Example.com", "password": PASSWORD},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "new.user@example.com"
        assert data["user"]["role"] == "client"
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["expires_in"] == 7 * 24 * 3600
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

    def test_register_seller(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={
                "email": "shop@example.com",
                "password": PASSWORD,
                "name": "Shop",
                "role": "seller",
            },
        )

        assert response.status_code == 201
        assert response.json()["user"]["role"] == "seller"
        assert response.json()["user"]["name"] == "Shop"

    def test_whitespace_only_name_is_stored_as_null(
        self,
        test_client,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "blank@example.com", "password": PASSWORD, "name": "   "},
        )

        assert response.status_code == 201
        assert response.json()["user"]["name"] is None

    def test_admin_cannot_self_register(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "boss@example.com", "password": PASSWORD, "role": "admin"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "ROLE_NOT_ALLOWED"

    def test_duplicate_email_conflicts(self, test_client, api_v1_prefix):
        url = f"{api_v1_prefix}/auth/register"
        test_client.post(url, json={"email": "dup@example.com", "password": PASSWORD})

        response = test_client.post(
            url,
            json={"email": "DUP@example.com", "password": PASSWORD},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email", "password": PASSWORD},
            {"email": "short@example.com", "password": "123"},
            {"email": "x@example.com", "password": PASSWORD, "role": "owner"},
            {"email": "emoji@example.com", "password": "\N{KEY}" * 20},
        ],
    )
    def test_malformed_payload(self, test_client, api_v1_prefix, payload):
        response = test_client.post(f"{api_v1_prefix}/auth/register", json=payload)

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestLogin:
    def test_login_returns_token(self, test_client, api_v1_prefix, seller_a):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "ALICE@example.com", "password": PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == seller_a[0]["id"]
        assert data["access_token"]

    def test_unknown_email_is_not_found(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "ghost@example.com", "password": PASSWORD},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_wrong_password_is_unauthorized(
        self,
        test_client,
        api_v1_prefix,
        seller_a,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"


class TestMe:
    def test_me_returns_current_user(self, test_client, api_v1_prefix, client_user):
        user, headers = client_user

        response = test_client.get(f"{api_v1_prefix}/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["id"] == user["id"]
        assert response.json()["role"] == "client"

    def test_me_without_token(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_me_with_garbage_token(self, test_client, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"


def test_health(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
