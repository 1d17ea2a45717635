# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from collections.abc import Mapping
from uuid import UUID, uuid4

# Settings are read at import time, so this must happen before bloglist is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LIMITER_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-bloglist-tests"

import pytest  # noqa: E402

from bloglist.models import BlogDB, UserDB  # noqa: E402
from bloglist.repositories import BlogWithOwner  # noqa: E402
from bloglist.schemas import OwnerSummary  # noqa: E402


class InMemoryBlogStore:
    """Dict-backed blog store recording every call it receives."""

    def __init__(self) -> None:
        self.blogs: dict[UUID, BlogDB] = {}
        self.owners: dict[UUID, OwnerSummary] = {}
        self.calls: list[str] = []

    def add(self, blog: BlogDB, owner: UserDB | None = None) -> BlogDB:
        self.blogs[blog.id] = blog
        if owner is not None:
            self.owners[owner.uuid] = OwnerSummary(
                id=owner.uuid,
                username=owner.username,
                name=owner.name,
            )
        return blog

    async def find_by_id(self, blog_id: UUID) -> BlogDB | None:
        self.calls.append("find_by_id")
        return self.blogs.get(blog_id)

    async def delete_by_id(self, blog_id: UUID) -> bool:
        self.calls.append("delete_by_id")
        return self.blogs.pop(blog_id, None) is not None

    async def update_by_id(self, blog_id: UUID, fields: Mapping[str, str | int]) -> BlogDB | None:
        self.calls.append("update_by_id")
        blog = self.blogs.get(blog_id)
        if blog is None:
            return None
        for key, value in fields.items():
            setattr(blog, key, value)
        return blog

    async def create(self, blog: BlogDB) -> BlogDB:
        self.calls.append("create")
        self.blogs[blog.id] = blog
        return blog

    async def list_all(self) -> list[BlogWithOwner]:
        self.calls.append("list_all")
        return [
            BlogWithOwner(
                blog=blog,
                owner=self.owners.get(blog.user_id) if blog.user_id else None,
            )
            for blog in self.blogs.values()
        ]


def make_user(username: str = "mluukkai", name: str | None = "Matti Luukkainen") -> UserDB:
    return UserDB(
        uuid=uuid4(),
        username=username,
        name=name,
        password_hash="$argon2id$v=19$m=8192,t=1,p=1$c29tZXNhbHQ$somehash",
    )


@pytest.fixture
def blog_store() -> InMemoryBlogStore:
    return InMemoryBlogStore()


@pytest.fixture
def user_a() -> UserDB:
    return make_user("alice", "Alice Example")


@pytest.fixture
def user_b() -> UserDB:
    return make_user("bob", "Bob Example")


@pytest.fixture
def owned_blog(blog_store: InMemoryBlogStore, user_a: UserDB) -> BlogDB:
    """A blog created by user A and already in the store."""
    blog = BlogDB(
        title="React patterns",
        author="Michael Chan",
        url="https://reactpatterns.com/",
        likes=7,
        user_id=user_a.uuid,
    )
    return blog_store.add(blog, owner=user_a)
