"""Authentication service issuing bearer tokens for username/password logins."""

from datetime import timedelta
from logging import getLogger

from bloglist.configs import file_logger, settings
from bloglist.errors.auth import InvalidCredentialsError
from bloglist.managers.password_manager import verify_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import Token

logger = file_logger(getLogger(__name__))


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        The password is verified even for unknown usernames so both failures
        take the same time.

        Args:
            username: User username
            password: User password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username)
        password_hash = user.password_hash if user else None

        if not password or not await verify_password(password, password_hash) or not user:
            logger.info(f"Failed login attempt for username {username!r}")
            raise InvalidCredentialsError

        return user

    def create_token_for_user(self, user: UserDB) -> Token:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            Token: Bearer token with the user's username and name
        """
        access_token = create_access_token(
            user_id=user.uuid,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return Token(token=access_token, username=user.username, name=user.name)
