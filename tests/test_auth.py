"""Tests for registration, login and the current-user endpoint."""
import pytest

pytestmark = pytest.mark.django_db


class TestRegister:
    def test_registers_user(self, api_client, django_user_model):
        response = api_client.post(
            "/api/auth/register/",
            {
                "username": "linus",
                "email": "Linus@Example.com",
                "name": "Linus",
                "password": "a-long-passphrase-42",
                "password_confirm": "a-long-passphrase-42",
            },
            format="json",
        )

        assert response.status_code == 201
        result = response.json()["result"]
        assert result["username"] == "linus"
        assert result["email"] == "linus@example.com"
        assert result["name"] == "Linus"
        assert django_user_model.objects.get(username="linus").check_password("a-long-passphrase-42")

    def test_password_mismatch(self, api_client):
        response = api_client.post(
            "/api/auth/register/",
            {
                "username": "linus",
                "email": "linus@example.com",
                "password": "a-long-passphrase-42",
                "password_confirm": "something-else-42",
            },
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"path": "password_confirm", "message": "Passwords do not match"}
        ]

    def test_duplicate_email(self, api_client, user):
        response = api_client.post(
            "/api/auth/register/",
            {
                "username": "someone",
                "email": "ADA@example.com",
                "password": "a-long-passphrase-42",
                "password_confirm": "a-long-passphrase-42",
            },
            format="json",
        )

        assert response.status_code == 400
        assert [error["path"] for error in response.json()["errors"]] == ["email"]


class TestSession:
    def test_login_then_me(self, api_client, user):
        response = api_client.post(
            "/api/auth/login/",
            {"username": "ada", "password": "s3cret-pass-123"},
            format="json",
        )
        assert response.status_code == 200
        access = response.json()["access"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        me = api_client.get("/api/auth/me/")

        assert me.status_code == 200
        assert me.json() == {
            "success": True,
            "result": {"id": user.pk, "username": "ada", "email": "ada@example.com", "name": "Ada"},
        }

    def test_bad_credentials(self, api_client, user):
        response = api_client.post(
            "/api/auth/login/",
            {"username": "ada", "password": "wrong"},
            format="json",
        )
        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_me_requires_authentication(self, api_client):
        assert api_client.get("/api/auth/me/").status_code == 401

    def test_index_is_public(self, api_client):
        assert "endpoints" in api_client.get("/api/auth/").json()
