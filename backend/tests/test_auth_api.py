"""
Inkpost Backend — Signup, Login and Access Guard Endpoint Tests
=================================================================

What we test:
    ✅ POST /signup → 201 with user_id; duplicate email → 400
    ✅ POST /login → token + user summary; bad credentials → 400
    ✅ Malformed bodies → 422 invalid_input
    ✅ Guard: no header / empty bearer / other scheme → 401
    ✅ Guard: garbage, tampered or expired token → 403
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from app.middleware.auth_guard import extract_bearer_token
from app.schemas.auth import TokenClaim
from app.services.token_service import token_service


class TestSignup:

    @pytest.mark.asyncio
    async def test_signup_returns_user_id(self, test_client):
        response = await test_client.post(
            "/signup",
            json={"name": "Alice", "email": "alice@example.com", "password": "pw-secret"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        uuid.UUID(body["user_id"])

    @pytest.mark.asyncio
    async def test_duplicate_email_is_400(self, test_client, alice):
        response = await test_client.post(
            "/signup",
            json={"name": "Impostor", "email": alice["email"], "password": "whatever"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "conflict"
        assert response.json()["message"] == "Email already registered"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"email": "alice@example.com", "password": "pw"},
            {"name": "Alice", "email": "not-an-email", "password": "pw"},
            {"name": "Alice", "email": "alice@example.com", "password": ""},
            {"name": "Alice", "email": "alice@example.com", "password": "x" * 73},
        ],
    )
    async def test_malformed_signup_is_422(self, test_client, body):
        response = await test_client.post("/signup", json=body)
        assert response.status_code == 422
        assert response.json()["error"] == "invalid_input"


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_returns_token_and_user(self, test_client, alice):
        response = await test_client.post(
            "/login", json={"email": "alice@example.com", "password": "pw-secret"}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["user"]["id"] == alice["user_id"]
        assert body["user"]["email"] == "alice@example.com"
        assert token_service.validate(body["token"]).user_id == uuid.UUID(alice["user_id"])

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_are_identical(self, test_client, alice):
        wrong = await test_client.post(
            "/login", json={"email": "alice@example.com", "password": "wrong"}
        )
        unknown = await test_client.post(
            "/login", json={"email": "ghost@example.com", "password": "pw-secret"}
        )
        assert wrong.status_code == unknown.status_code == 400
        assert wrong.json()["message"] == unknown.json()["message"] == "Invalid credentials"
        assert wrong.json()["error"] == unknown.json()["error"] == "invalid_credentials"


class TestExtractBearerToken:

    @pytest.mark.parametrize(
        "header, expected",
        [
            (None, None),
            ("", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("Basic dXNlcjpwdw==", None),
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc.def.ghi", "abc.def.ghi"),
        ],
    )
    def test_extract(self, header, expected):
        assert extract_bearer_token(header) == expected


class TestAccessGuard:

    @pytest.mark.asyncio
    async def test_missing_header_is_401(self, test_client):
        response = await test_client.get("/tasks")
        assert response.status_code == 401
        assert response.json()["message"] == "Token missing"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_empty_bearer_is_401(self, test_client):
        response = await test_client.get("/tasks", headers={"Authorization": "Bearer "})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_other_scheme_is_401(self, test_client):
        response = await test_client.get("/tasks", headers={"Authorization": "Basic dXNlcjpwdw=="})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_garbage_token_is_403(self, test_client):
        response = await test_client.get("/tasks", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 403
        assert response.json()["message"] == "Invalid or expired token"

    @pytest.mark.asyncio
    async def test_tampered_token_is_403(self, test_client, alice):
        header, _, signature = alice["token"].split(".")
        forged = token_service.issue(TokenClaim(user_id=uuid.uuid4(), email="mallory@example.com"))
        tampered = f"{header}.{forged.split('.')[1]}.{signature}"
        response = await test_client.get("/tasks", headers={"Authorization": f"Bearer {tampered}"})
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_expired_token_is_403(self, test_client, alice):
        token = token_service.issue(
            TokenClaim(user_id=uuid.UUID(alice["user_id"]), email=alice["email"]),
            issued_at=datetime.now(timezone.utc) - timedelta(days=8),
        )
        response = await test_client.get("/tasks", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_valid_token_passes(self, test_client, alice):
        response = await test_client.get("/tasks", headers=alice["headers"])
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_public_routes_need_no_token(self, test_client):
        response = await test_client.get("/blogs")
        assert response.status_code == 200
        assert response.json() == {"blogs": []}
