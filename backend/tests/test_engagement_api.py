"""
Inkpost Backend — Like & Share Endpoint Tests
===============================================

What we test:
    ✅ Like increments likes_count by exactly one; a second like → 400
    ✅ Unlike decrements; unliking without a like → 400
    ✅ Shares are not deduplicated
    ✅ Counters always equal the number of Like / Share rows
    ✅ Liking or sharing a missing post → 404
"""

import uuid

import pytest
from sqlalchemy import func, select

from app.database import async_session_factory
from app.models.engagement import Like, Share


async def _post_blog(client, headers):
    response = await client.post("/blogs", data={"title": "Post", "content": "Body"}, headers=headers)
    return response.json()["blog"]["id"]


async def _count_rows(model, blog_id: str) -> int:
    async with async_session_factory() as session:
        return await session.scalar(
            select(func.count()).select_from(model).where(model.blog_id == uuid.UUID(blog_id))
        )


class TestLikes:

    @pytest.mark.asyncio
    async def test_like_once(self, test_client, alice, bob):
        blog_id = await _post_blog(test_client, alice["headers"])

        response = await test_client.post(f"/blogposts/{blog_id}/like", headers=bob["headers"])
        assert response.status_code == 201
        assert response.json() == {"message": "Liked", "likes_count": 1, "shares_count": 0}

    @pytest.mark.asyncio
    async def test_double_like_is_400_and_count_stays(self, test_client, alice, bob):
        blog_id = await _post_blog(test_client, alice["headers"])
        await test_client.post(f"/blogposts/{blog_id}/like", headers=bob["headers"])

        again = await test_client.post(f"/blogposts/{blog_id}/like", headers=bob["headers"])
        assert again.status_code == 400
        assert again.json()["message"] == "Already liked"

        post = (await test_client.get(f"/blogposts/{blog_id}")).json()["blog_post"]
        assert post["likes_count"] == 1
        assert await _count_rows(Like, blog_id) == 1

    @pytest.mark.asyncio
    async def test_likes_from_different_users_add_up(self, test_client, alice, bob):
        blog_id = await _post_blog(test_client, alice["headers"])
        await test_client.post(f"/blogposts/{blog_id}/like", headers=alice["headers"])
        response = await test_client.post(f"/blogposts/{blog_id}/like", headers=bob["headers"])
        assert response.json()["likes_count"] == 2
        assert await _count_rows(Like, blog_id) == 2

    @pytest.mark.asyncio
    async def test_unlike(self, test_client, alice, bob):
        blog_id = await _post_blog(test_client, alice["headers"])
        await test_client.post(f"/blogposts/{blog_id}/like", headers=bob["headers"])

        response = await test_client.delete(f"/blogposts/{blog_id}/like", headers=bob["headers"])
        assert response.status_code == 200
        assert response.json()["message"] == "Unliked"
        assert response.json()["likes_count"] == 0
        assert await _count_rows(Like, blog_id) == 0

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_400(self, test_client, alice):
        blog_id = await _post_blog(test_client, alice["headers"])
        response = await test_client.delete(f"/blogposts/{blog_id}/like", headers=alice["headers"])
        assert response.status_code == 400
        assert response.json()["message"] == "Not liked yet"

        post = (await test_client.get(f"/blogposts/{blog_id}")).json()["blog_post"]
        assert post["likes_count"] == 0

    @pytest.mark.asyncio
    async def test_like_missing_post_is_404(self, test_client, alice):
        response = await test_client.post(f"/blogposts/{uuid.uuid4()}/like", headers=alice["headers"])
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_like_requires_token(self, test_client, alice):
        blog_id = await _post_blog(test_client, alice["headers"])
        response = await test_client.post(f"/blogposts/{blog_id}/like")
        assert response.status_code == 401


class TestShares:

    @pytest.mark.asyncio
    async def test_repeated_shares_all_count(self, test_client, alice, bob):
        blog_id = await _post_blog(test_client, alice["headers"])

        first = await test_client.post(f"/blogposts/{blog_id}/share", headers=bob["headers"])
        second = await test_client.post(f"/blogposts/{blog_id}/share", headers=bob["headers"])
        assert first.status_code == second.status_code == 201
        assert second.json() == {"message": "Shared", "likes_count": 0, "shares_count": 2}
        assert await _count_rows(Share, blog_id) == 2

    @pytest.mark.asyncio
    async def test_share_missing_post_is_404(self, test_client, alice):
        response = await test_client.post(f"/blogposts/{uuid.uuid4()}/share", headers=alice["headers"])
        assert response.status_code == 404
