"""
Inkpost Backend — Token Service Unit Tests
============================================

What we test:
    ✅ A freshly issued token validates back to the same claim
    ✅ Expiry is absolute: 6 days old is fine, 8 days old is rejected
    ✅ Tokens signed with another secret, tampered, or garbage are rejected
    ✅ Missing claims and non-UUID subjects are rejected
"""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.exceptions import InvalidTokenError
from app.schemas.auth import TokenClaim
from app.services.token_service import TokenService

SECRET = "unit-test-secret-that-is-at-least-32-bytes-long"


@pytest.fixture
def service():
    return TokenService(secret=SECRET, ttl=timedelta(days=7))


@pytest.fixture
def claim():
    return TokenClaim(user_id=uuid.uuid4(), email="alice@example.com")


class TestTokenRoundTrip:

    def test_issued_token_validates_to_same_claim(self, service, claim):
        assert service.validate(service.issue(claim)) == claim

    def test_payload_carries_subject_and_expiry(self, service, claim):
        issued_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
        token = service.issue(claim, issued_at=issued_at)
        payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
        assert payload["sub"] == str(claim.user_id)
        assert payload["email"] == claim.email
        assert payload["exp"] - payload["iat"] == 7 * 24 * 3600


class TestTokenExpiry:

    def test_six_day_old_token_is_valid(self, service, claim):
        token = service.issue(claim, issued_at=datetime.now(timezone.utc) - timedelta(days=6))
        assert service.validate(token).user_id == claim.user_id

    def test_eight_day_old_token_is_rejected(self, service, claim):
        token = service.issue(claim, issued_at=datetime.now(timezone.utc) - timedelta(days=8))
        with pytest.raises(InvalidTokenError) as exc_info:
            service.validate(token)
        assert exc_info.value.context["reason"] == "expired"


class TestTokenRejection:

    def test_foreign_secret_rejected(self, service, claim):
        other = TokenService(secret="a-completely-different-secret-of-32-bytes")
        with pytest.raises(InvalidTokenError):
            service.validate(other.issue(claim))

    def test_tampered_payload_rejected(self, service, claim):
        header, _, signature = service.issue(claim).split(".")
        forged_claim = TokenClaim(user_id=uuid.uuid4(), email="mallory@example.com")
        forged_payload = service.issue(forged_claim).split(".")[1]
        with pytest.raises(InvalidTokenError):
            service.validate(f"{header}.{forged_payload}.{signature}")

    @pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c", "Bearer abc"])
    def test_garbage_rejected(self, service, garbage):
        with pytest.raises(InvalidTokenError):
            service.validate(garbage)

    def test_missing_email_claim_rejected(self, service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": str(uuid.uuid4()), "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            service.validate(token)

    def test_non_uuid_subject_rejected(self, service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"sub": "42", "email": "x@example.com", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError) as exc_info:
            service.validate(token)
        assert exc_info.value.context["reason"] == "bad_subject"
