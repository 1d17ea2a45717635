# tests/routes/test_blog_routes.py
"""Tests for the /api/blogs endpoints."""

from uuid import uuid4

from httpx import AsyncClient

from bloglist.models import BlogDB, UserDB


class TestListBlogs:
    async def test_lists_blogs_with_owner(
        self,
        client: AsyncClient,
        owned_blog: BlogDB,
        user_a: UserDB,
    ) -> None:
        response = await client.get("/api/blogs")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        assert body[0]["id"] == str(owned_blog.id)
        assert "_id" not in body[0]
        assert body[0]["user"] == {
            "id": str(user_a.uuid),
            "username": user_a.username,
            "name": user_a.name,
        }

    async def test_unowned_blog_has_null_user(self, client: AsyncClient, blog_store) -> None:
        blog_store.add(BlogDB(title="Legacy", url="https://old.example"))

        response = await client.get("/api/blogs")

        assert response.json()[0]["user"] is None


class TestGetBlog:
    async def test_existing(self, client: AsyncClient, owned_blog: BlogDB) -> None:
        response = await client.get(f"/api/blogs/{owned_blog.id}")

        assert response.status_code == 200
        assert response.json()["title"] == "React patterns"
        assert response.json()["user"] == str(owned_blog.user_id)

    async def test_missing(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/blogs/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["outcome"] == "not_found"

    async def test_malformed_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/blogs/5a422aa71b54a676234d17f8")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid ID format"


class TestCreateBlog:
    async def test_created_blog_is_owned_by_caller(
        self,
        client: AsyncClient,
        auth_headers_a: dict[str, str],
        user_a: UserDB,
        blog_store,
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={"title": "Type wars", "author": "Robert C. Martin", "url": "https://tw.example"},
            headers=auth_headers_a,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["likes"] == 0
        assert body["user"] == str(user_a.uuid)
        assert len(blog_store.blogs) == 1

    async def test_missing_title_is_bad_request(
        self,
        client: AsyncClient,
        auth_headers_a: dict[str, str],
        blog_store,
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={"author": "Nobody", "url": "https://n.example"},
            headers=auth_headers_a,
        )

        assert response.status_code == 400
        assert response.json()["outcome"] == "precondition_failed"
        assert blog_store.blogs == {}

    async def test_missing_url_is_bad_request(
        self,
        client: AsyncClient,
        auth_headers_a: dict[str, str],
    ) -> None:
        response = await client.post(
            "/api/blogs",
            json={"title": "No url"},
            headers=auth_headers_a,
        )

        assert response.status_code == 400

    async def test_requires_token(self, client: AsyncClient, blog_store) -> None:
        response = await client.post(
            "/api/blogs",
            json={"title": "t", "url": "https://u.example"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "token missing or invalid"
        assert blog_store.blogs == {}

    async def test_rejects_invalid_token(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/blogs",
            json={"title": "t", "url": "https://u.example"},
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401


class TestDeleteBlog:
    async def test_owner_deletes(
        self,
        client: AsyncClient,
        owned_blog: BlogDB,
        auth_headers_a: dict[str, str],
        blog_store,
    ) -> None:
        response = await client.delete(f"/api/blogs/{owned_blog.id}", headers=auth_headers_a)

        assert response.status_code == 204
        assert owned_blog.id not in blog_store.blogs

    async def test_other_user_is_forbidden(
        self,
        client: AsyncClient,
        owned_blog: BlogDB,
        auth_headers_b: dict[str, str],
        blog_store,
    ) -> None:
        response = await client.delete(f"/api/blogs/{owned_blog.id}", headers=auth_headers_b)

        assert response.status_code == 403
        assert response.json()["outcome"] == "forbidden"
        assert owned_blog.id in blog_store.blogs

    async def test_missing_blog(
        self,
        client: AsyncClient,
        auth_headers_a: dict[str, str],
    ) -> None:
        response = await client.delete(f"/api/blogs/{uuid4()}", headers=auth_headers_a)

        assert response.status_code == 404

    async def test_malformed_id(
        self,
        client: AsyncClient,
        auth_headers_a: dict[str, str],
    ) -> None:
        response = await client.delete("/api/blogs/not-an-id", headers=auth_headers_a)

        assert response.status_code == 400
        assert response.json()["outcome"] == "precondition_failed"

    async def test_unowned_blog(
        self,
        client: AsyncClient,
        auth_headers_a: dict[str, str],
        blog_store,
    ) -> None:
        legacy = blog_store.add(BlogDB(title="Legacy", url="https://old.example"))

        response = await client.delete(f"/api/blogs/{legacy.id}", headers=auth_headers_a)

        assert response.status_code == 400
        assert response.json()["detail"] == "Blog has no associated user"

    async def test_requires_token(self, client: AsyncClient, owned_blog: BlogDB) -> None:
        response = await client.delete(f"/api/blogs/{owned_blog.id}")

        assert response.status_code == 401


class TestUpdateBlog:
    async def test_update_needs_no_token(self, client: AsyncClient, owned_blog: BlogDB) -> None:
        response = await client.put(f"/api/blogs/{owned_blog.id}", json={"likes": 8})

        assert response.status_code == 200
        assert response.json()["likes"] == 8
        assert response.json()["title"] == "React patterns"

    async def test_non_owner_may_update(
        self,
        client: AsyncClient,
        owned_blog: BlogDB,
        auth_headers_b: dict[str, str],
    ) -> None:
        response = await client.put(
            f"/api/blogs/{owned_blog.id}",
            json={"title": "Renamed"},
            headers=auth_headers_b,
        )

        assert response.status_code == 200
        assert response.json()["title"] == "Renamed"

    async def test_missing_blog(self, client: AsyncClient) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json={"likes": 1})

        assert response.status_code == 404

    async def test_negative_likes_rejected(self, client: AsyncClient, owned_blog: BlogDB) -> None:
        response = await client.put(f"/api/blogs/{owned_blog.id}", json={"likes": -1})

        assert response.status_code == 400
