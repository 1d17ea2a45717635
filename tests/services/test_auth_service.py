# tests/services/test_auth_service.py
"""Tests for the authentication service."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bloglist.errors import InvalidCredentialsError
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.services import AuthService


@pytest.fixture
def user_repo(user_a: UserDB) -> MagicMock:
    repo = MagicMock()
    repo.get_by_username = AsyncMock(return_value=user_a)
    return repo


class TestAuthenticateUser:
    async def test_valid_credentials(self, user_repo: MagicMock, user_a: UserDB) -> None:
        with patch("bloglist.services.auth.verify_password", AsyncMock(return_value=True)):
            user = await AuthService(user_repo).authenticate_user("alice", "secret")

        assert user is user_a

    async def test_wrong_password(self, user_repo: MagicMock) -> None:
        with (
            patch("bloglist.services.auth.verify_password", AsyncMock(return_value=False)),
            pytest.raises(InvalidCredentialsError),
        ):
            await AuthService(user_repo).authenticate_user("alice", "wrong")

    async def test_unknown_user_still_verifies(self, user_repo: MagicMock) -> None:
        user_repo.get_by_username = AsyncMock(return_value=None)
        verify = AsyncMock(return_value=False)

        with (
            patch("bloglist.services.auth.verify_password", verify),
            pytest.raises(InvalidCredentialsError),
        ):
            await AuthService(user_repo).authenticate_user("ghost", "secret")

        verify.assert_awaited_once_with("secret", None)

    async def test_empty_password(self, user_repo: MagicMock) -> None:
        with pytest.raises(InvalidCredentialsError):
            await AuthService(user_repo).authenticate_user("alice", "")


def test_create_token_for_user(user_repo: MagicMock, user_a: UserDB) -> None:
    token = AuthService(user_repo).create_token_for_user(user_a)

    assert token.username == user_a.username
    assert token.name == user_a.name
    data = decode_access_token(token.token)
    assert data is not None
    assert data.user_id == user_a.uuid
