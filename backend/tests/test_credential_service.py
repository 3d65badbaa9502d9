"""
Inkpost Backend — Credential Store Tests
==========================================

Runs the CredentialStore against the real (SQLite) schema; bcrypt uses the
minimum cost factor set in conftest.

What we test:
    ✅ Registration stores a bcrypt hash, never the plaintext
    ✅ A second signup with the same email fails and leaves one record
    ✅ Email matching is case-sensitive
    ✅ Wrong password and unknown email fail identically
"""

import pytest
from sqlalchemy import func, select

from app.exceptions import DuplicateEmailError, InvalidCredentialsError
from app.models.user import User
from app.services.credential_service import CredentialStore


@pytest.fixture
def store():
    return CredentialStore(rounds=4)


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, store, db_session):
        user_id = await store.register(db_session, "Alice", "alice@example.com", "s3cret")

        user = await db_session.get(User, user_id)
        assert user.password_hash != "s3cret"
        assert user.password_hash.startswith("$2")
        assert await store.check_password("s3cret", user.password_hash)

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, store, db_session):
        await store.register(db_session, "Alice", "alice@example.com", "s3cret")

        with pytest.raises(DuplicateEmailError) as exc_info:
            await store.register(db_session, "Other Alice", "alice@example.com", "different")
        assert exc_info.value.message == "Email already registered"

        count = await db_session.scalar(
            select(func.count()).select_from(User).where(User.email == "alice@example.com")
        )
        assert count == 1

    @pytest.mark.asyncio
    async def test_email_is_case_sensitive(self, store, db_session):
        await store.register(db_session, "Alice", "alice@example.com", "s3cret")
        await store.register(db_session, "Alice Again", "Alice@example.com", "s3cret")

        with pytest.raises(InvalidCredentialsError):
            await store.verify(db_session, "ALICE@example.com", "s3cret")


class TestVerify:

    @pytest.mark.asyncio
    async def test_correct_password_returns_user(self, store, db_session):
        user_id = await store.register(db_session, "Alice", "alice@example.com", "s3cret")
        user = await store.verify(db_session, "alice@example.com", "s3cret")
        assert user.id == user_id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, store, db_session):
        await store.register(db_session, "Alice", "alice@example.com", "s3cret")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await store.verify(db_session, "alice@example.com", "nope")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await store.verify(db_session, "nobody@example.com", "s3cret")

        assert wrong_password.value.message == unknown_email.value.message == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_corrupt_stored_hash_fails_closed(self, store):
        assert await store.check_password("s3cret", "not-a-bcrypt-hash") is False
