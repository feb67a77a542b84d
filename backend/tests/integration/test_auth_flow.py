"""End-to-end authentication flow through the HTTP API."""

from datetime import timedelta

import pytest

from notekeeper.config import get_settings
from notekeeper.security import create_access_token


class TestRegistration:
    async def test_register_returns_token_user_and_cookie(self, async_client):
        response = await async_client.post(
            "/api/auth/register",
            json={"username": "Alice_1", "email": "Alice@Example.com", "password": "secret123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["token"]
        assert body["user"]["username"] == "alice_1"
        assert body["user"]["email"] == "alice@example.com"
        assert "password" not in str(body["user"]).lower()

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{get_settings().cookie_name}=")
        assert "httponly" in set_cookie.lower()

    async def test_email_differing_only_in_case_is_rejected(self, async_client, register):
        await register("alice", email="alice@example.com")

        response = await async_client.post(
            "/api/auth/register",
            json={"username": "alice2", "email": "ALICE@example.com", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": {"email": "Email already registered"},
        }

    async def test_username_taken_ignores_case(self, async_client, register):
        await register("bob")

        response = await async_client.post(
            "/api/auth/register",
            json={"username": "BOB", "email": "other@example.com", "password": "secret123"},
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {"username": "Username already taken"}

    async def test_both_duplicates_reported_together(self, async_client, register):
        await register("carol", email="carol@example.com")

        response = await async_client.post(
            "/api/auth/register",
            json={"username": "Carol", "email": "Carol@example.com", "password": "secret123"},
        )

        errors = response.json()["errors"]
        assert errors["email"] == "Email already registered"
        assert errors["username"] == "Username already taken"

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"username": "ab", "email": "a@example.com", "password": "secret123"}, "username"),
            ({"username": "bad name", "email": "a@example.com", "password": "secret123"}, "username"),
            ({"username": "dave", "email": "not-an-email", "password": "secret123"}, "email"),
            ({"username": "dave", "email": "a@example.com", "password": "123"}, "password"),
            ({"email": "a@example.com", "password": "secret123"}, "username"),
        ],
    )
    async def test_invalid_fields_are_reported_by_name(self, async_client, payload, field):
        response = await async_client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert field in body["errors"]

    async def test_short_password_message(self, async_client):
        response = await async_client.post(
            "/api/auth/register",
            json={"username": "erin", "email": "erin@example.com", "password": "12345"},
        )

        assert response.json()["errors"]["password"] == "Password must be at least 6 characters long"


class TestLogin:
    async def test_login_with_email_or_username_any_case(self, async_client, register):
        await register("frank", email="frank@example.com", password="secret123")

        for identifier in ("frank@example.com", "FRANK@EXAMPLE.COM", "Frank"):
            response = await async_client.post(
                "/api/auth/login", json={"email": identifier, "password": "secret123"}
            )
            assert response.status_code == 200, identifier
            body = response.json()
            assert body["success"] is True
            assert body["token"]
            assert body["user"]["username"] == "frank"
            assert get_settings().cookie_name in response.cookies

    async def test_wrong_password_and_unknown_user_share_one_message(self, async_client, register):
        await register("grace", password="secret123")

        wrong_password = await async_client.post(
            "/api/auth/login", json={"email": "grace@example.com", "password": "nope-nope"}
        )
        unknown_user = await async_client.post(
            "/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"}
        )

        assert wrong_password.status_code == unknown_user.status_code == 400
        assert wrong_password.json() == unknown_user.json()
        assert wrong_password.json()["errors"] == {
            "email": "Invalid email/username or password"
        }

    async def test_blank_fields_are_rejected(self, async_client):
        response = await async_client.post("/api/auth/login", json={"email": "  ", "password": ""})

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert errors["email"] == "Email or username is required"
        assert errors["password"] == "Password is required"


class TestSession:
    async def test_cookie_authenticates_follow_up_requests(self, async_client):
        await async_client.post(
            "/api/auth/register",
            json={"username": "heidi", "email": "heidi@example.com", "password": "secret123"},
        )

        # the client keeps the session cookie from the register response
        response = await async_client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "heidi"

    async def test_protected_route_requires_session(self, async_client):
        response = await async_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "errors": {"auth": "Authentication required"},
        }

    async def test_garbage_token_is_invalid_session(self, async_client):
        response = await async_client.get(
            "/api/auth/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.json()["errors"] == {"auth": "Invalid session"}

    async def test_expired_cookie_does_not_block_bearer_token(self, async_client, register):
        headers, user = await register("grace")
        stale = create_access_token(user["id"], expires_delta=timedelta(seconds=-10))
        cookie = {"Cookie": f"{get_settings().cookie_name}={stale}"}

        response = await async_client.get("/api/auth/me", headers={**headers, **cookie})

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "grace"

    async def test_logout_clears_cookie_and_revokes_token(self, async_client, register, fake_redis):
        headers, _ = await register("ivan")

        response = await async_client.post("/api/auth/logout", headers=headers)

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert "max-age=0" in response.headers["set-cookie"].lower()
        assert any(key.startswith("blacklist:") for key in fake_redis.storage)

        again = await async_client.get("/api/auth/me", headers=headers)
        assert again.status_code == 401
        assert again.json()["errors"] == {"auth": "Invalid session"}

    async def test_logout_without_redis_still_succeeds(self, async_client, register):
        headers, _ = await register("judy")

        response = await async_client.post("/api/auth/logout", headers=headers)

        assert response.status_code == 200


class TestPasswordReset:
    async def test_reset_then_login_with_new_password(self, async_client, register):
        headers, _ = await register("kate", password="secret123")

        response = await async_client.post(
            "/api/auth/reset-password",
            headers=headers,
            json={
                "oldPassword": "secret123",
                "newPassword": "better456",
                "confirmPassword": "better456",
            },
        )
        assert response.status_code == 200

        old = await async_client.post(
            "/api/auth/login", json={"email": "kate", "password": "secret123"}
        )
        new = await async_client.post(
            "/api/auth/login", json={"email": "kate", "password": "better456"}
        )
        assert old.status_code == 400
        assert new.status_code == 200

    async def test_wrong_old_password(self, async_client, register):
        headers, _ = await register("liam", password="secret123")

        response = await async_client.post(
            "/api/auth/reset-password",
            headers=headers,
            json={
                "oldPassword": "wrong-one",
                "newPassword": "better456",
                "confirmPassword": "better456",
            },
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {"oldPassword": "Current password is incorrect"}

    async def test_confirmation_mismatch(self, async_client, register):
        headers, _ = await register("mia", password="secret123")

        response = await async_client.post(
            "/api/auth/reset-password",
            headers=headers,
            json={
                "oldPassword": "secret123",
                "newPassword": "better456",
                "confirmPassword": "better789",
            },
        )

        assert response.status_code == 400
        assert response.json()["errors"] == {"confirmPassword": "Passwords do not match"}
