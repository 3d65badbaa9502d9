"""
Inkpost Backend — Middleware Tests
====================================

What we test:
    ✅ Rate limiter answers 429 with Retry-After once the window is full
    ✅ Only the configured paths are limited
    ✅ Request ids are generated, or echoed when the client sends one
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.middleware.rate_limit import RateLimitMiddleware
from app.middleware.request_id import RequestIDMiddleware


def build_app(limit: int = 2) -> FastAPI:
    app = FastAPI()

    @app.post("/login")
    async def login():
        return {"ok": True}

    @app.get("/blogs")
    async def blogs():
        return {"blogs": []}

    app.add_middleware(RateLimitMiddleware, limit=limit, window=60)
    app.add_middleware(RequestIDMiddleware)
    return app


@pytest.fixture
def client():
    return AsyncClient(transport=ASGITransport(app=build_app()), base_url="http://test")


class TestRateLimit:

    @pytest.mark.asyncio
    async def test_limit_then_429(self, client):
        async with client:
            assert (await client.post("/login")).status_code == 200
            assert (await client.post("/login")).status_code == 200

            blocked = await client.post("/login")
            assert blocked.status_code == 429
            assert int(blocked.headers["Retry-After"]) >= 1
            body = blocked.json()
            assert body["error"] == "rate_limit_exceeded"
            assert body["request_id"] == blocked.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_unlisted_paths_are_not_limited(self, client):
        async with client:
            for _ in range(5):
                assert (await client.get("/blogs")).status_code == 200


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, client):
        async with client:
            response = await client.get("/blogs")
            assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_id_is_echoed(self, client):
        async with client:
            response = await client.get("/blogs", headers={"X-Request-ID": "trace-abc"})
            assert response.headers["X-Request-ID"] == "trace-abc"
