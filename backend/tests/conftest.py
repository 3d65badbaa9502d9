"""
Inkpost Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set BEFORE any `app` import, so the
       settings singleton, the engine and the service singletons are all
       built against a throwaway SQLite file with cheap bcrypt rounds.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── database:    creates every table, drops them afterwards
    ├── db_session:  a bare AsyncSession for service-level tests
    ├── test_client: HTTPX AsyncClient wired to the ASGI app
    ├── alice / bob: registered + logged-in users (token, headers, user_id)
    └── sample_png:  a tiny PNG for multipart upload tests
"""

import os
import tempfile
from typing import Any, Dict

# Must run before the first `app` import
_TEST_DIR = tempfile.mkdtemp(prefix="inkpost_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["JWT_SECRET"] = "test-signing-secret-that-is-at-least-32-bytes"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import async_session_factory, create_tables, drop_tables


async def register_and_login(client: AsyncClient, name: str, email: str, password: str = "pw-secret") -> Dict[str, Any]:
    """Sign a user up, log them in, and return what a test needs to act as them."""
    signup = await client.post("/signup", json={"name": name, "email": email, "password": password})
    assert signup.status_code == 201, signup.text
    login = await client.post("/login", json={"email": email, "password": password})
    assert login.status_code == 200, login.text
    token = login.json()["token"]
    return {
        "user_id": signup.json()["user_id"],
        "email": email,
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
    }


@pytest_asyncio.fixture
async def database():
    """Fresh schema per test; tests never see each other's rows."""
    await create_tables()
    yield
    await drop_tables()


@pytest_asyncio.fixture
async def db_session(database):
    """
    A session for calling services directly, without HTTP.

    Unlike get_db_session it does not commit on exit; everything a test
    writes is rolled back when the session closes.
    """
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_client(database):
    """
    Async HTTP client that routes requests straight into the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def alice(test_client):
    return await register_and_login(test_client, "Alice", "alice@example.com")


@pytest_asyncio.fixture
async def bob(test_client):
    return await register_and_login(test_client, "Bob", "bob@example.com")


@pytest.fixture
def sample_png():
    """Smallest plausible PNG: signature plus an IHDR chunk header."""
    return b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
