# tests/repositories/conftest.py
"""Fixtures providing a fresh in-memory SQLite database per test."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.db.database import _enable_sqlite_foreign_keys
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _enable_sqlite_foreign_keys(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as db_session:
        yield db_session


@pytest.fixture
def blog_repo(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)


@pytest.fixture
def user_repo(session: AsyncSession) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
async def stored_user(session: AsyncSession) -> UserDB:
    user = UserDB(username="mluukkai", name="Matti Luukkainen", password_hash="hash")
    session.add(user)
    await session.flush()
    return user


@pytest.fixture
async def stored_blog(blog_repo: BlogRepository, stored_user: UserDB) -> BlogDB:
    return await blog_repo.create(
        BlogDB(
            title="React patterns",
            author="Michael Chan",
            url="https://reactpatterns.com/",
            likes=7,
            user_id=stored_user.uuid,
        ),
    )
