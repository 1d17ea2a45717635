# tests/routes/test_stats_routes.py
"""Tests for GET /api/stats."""

from httpx import AsyncClient

from bloglist.models import BlogDB


async def test_empty_statistics(client: AsyncClient) -> None:
    response = await client.get("/api/stats")

    assert response.status_code == 200
    assert response.json() == {
        "total_likes": 0,
        "favorite_blog": None,
        "most_blogs": None,
        "most_likes": None,
    }


async def test_darius_and_ioan(client: AsyncClient, blog_store) -> None:
    blog_store.add(BlogDB(title="First", author="Darius", url="https://d.example", likes=5))
    second = blog_store.add(BlogDB(title="Second", author="Ioan", url="https://i.example", likes=8))

    response = await client.get("/api/stats")

    body = response.json()
    assert body["total_likes"] == 13
    assert body["favorite_blog"]["id"] == str(second.id)
    assert body["most_blogs"] == {"author": "Darius", "count": 1}
    assert body["most_likes"] == {"author": "Ioan", "likes": 8}
