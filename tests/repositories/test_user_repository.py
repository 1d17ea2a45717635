# tests/repositories/test_user_repository.py
"""Tests for UserRepository against an in-memory SQLite database."""

from unittest.mock import AsyncMock, patch

import pytest
from pydantic import SecretStr

from bloglist.errors import DuplicateEntryError
from bloglist.repositories import UserRepository
from bloglist.schemas import UserCreate


def new_user(username: str = "hellas") -> UserCreate:
    return UserCreate(username=username, name="Arto Hellas", password=SecretStr("salainen"))


@pytest.fixture(autouse=True)
def fast_hash():
    with patch(
        "bloglist.repositories.user.hash_password",
        AsyncMock(return_value="$argon2id$hashed"),
    ) as mock_hash:
        yield mock_hash


class TestCreate:
    async def test_stores_hash_not_password(self, user_repo: UserRepository, fast_hash) -> None:
        user = await user_repo.create(new_user())

        assert user.username == "hellas"
        assert user.password_hash == "$argon2id$hashed"
        fast_hash.assert_awaited_once_with("salainen")

    async def test_duplicate_username(self, user_repo: UserRepository) -> None:
        await user_repo.create(new_user())

        with pytest.raises(DuplicateEntryError) as exc_info:
            await user_repo.create(new_user())

        assert exc_info.value.detail == "expected `username` to be unique"


class TestLookups:
    async def test_get_by_id_and_username(self, user_repo: UserRepository) -> None:
        created = await user_repo.create(new_user())

        assert await user_repo.get_by_id(created.uuid) is created
        assert await user_repo.get_by_username("hellas") is created
        assert await user_repo.get_by_username("nobody") is None

    async def test_get_all(self, user_repo: UserRepository) -> None:
        await user_repo.create(new_user("first"))
        await user_repo.create(new_user("second"))

        assert [u.username for u in await user_repo.get_all()] == ["first", "second"]
