# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.dependencies import get_blog_repository, get_blog_service, get_user_repository
from bloglist.main import app
from bloglist.managers.password_manager import get_password_hasher
from bloglist.managers.rate_limiter import limiter
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.services import BlogService

PASSWORD = "salainen"


@pytest.fixture
def users(user_a: UserDB, user_b: UserDB) -> dict[UUID, UserDB]:
    hashed = get_password_hasher().hash(PASSWORD)
    for user in (user_a, user_b):
        user.password_hash = hashed
    return {user.uuid: user for user in (user_a, user_b)}


@pytest.fixture
def mock_user_repo(users: dict[UUID, UserDB]) -> MagicMock:
    """User repository backed by the `users` fixture."""
    repo = MagicMock()
    repo.get_by_id = AsyncMock(side_effect=lambda user_id: users.get(user_id))
    repo.get_by_username = AsyncMock(
        side_effect=lambda username: next(
            (u for u in users.values() if u.username == username),
            None,
        ),
    )
    repo.get_all = AsyncMock(return_value=list(users.values()))
    return repo


@pytest.fixture
def mock_blog_repo() -> MagicMock:
    repo = MagicMock()
    repo.list_by_owners = AsyncMock(return_value={})
    return repo


def bearer(user: UserDB) -> dict[str, str]:
    token = create_access_token(
        user_id=user.uuid,
        username=user.username,
        expires_delta=timedelta(minutes=30),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers_a(user_a: UserDB) -> dict[str, str]:
    return bearer(user_a)


@pytest.fixture
def auth_headers_b(user_b: UserDB) -> dict[str, str]:
    return bearer(user_b)


@pytest.fixture
async def client(
    blog_store,
    mock_user_repo: MagicMock,
    mock_blog_repo: MagicMock,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client wired to in-memory stores."""
    app.dependency_overrides[get_blog_service] = lambda: BlogService(blog_store)
    app.dependency_overrides[get_user_repository] = lambda: mock_user_repo
    app.dependency_overrides[get_blog_repository] = lambda: mock_blog_repo
    previous = limiter.enabled
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = previous
    app.dependency_overrides.clear()
