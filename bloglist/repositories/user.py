"""User repository for database operations."""

from typing import cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import ColumnElement

from bloglist.errors.database import DatabaseError, DuplicateEntryError
from bloglist.managers.password_manager import hash_password
from bloglist.models.user import UserDB
from bloglist.schemas.user import UserCreate


class UserRepository:
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    providing CRUD operations and business logic.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user with a hashed password.

        Args:
            user: User schema with user data

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username already exists
            DatabaseError: For other database errors
        """
        if await self.get_by_username(user.username):
            raise DuplicateEntryError(detail="expected `username` to be unique")

        password_hash = await hash_password(user.password.get_secret_value())

        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
        )

        try:
            self.session.add(db_user)
            await self.session.flush()
            await self.session.refresh(db_user)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "username" in error_msg.lower():
                raise DuplicateEntryError(detail="expected `username` to be unique") from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        return db_user

    async def get_by_id(self, user_id: UUID) -> UserDB | None:
        """
        Get user by ID.

        Args:
            user_id: User UUID

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.uuid == user_id)),
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(cast(ColumnElement[bool], UserDB.username == username)),
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[UserDB]:
        """
        Get all users ordered by creation time.

        Returns:
            list[UserDB]: List of users
        """
        result = await self.session.execute(
            # pyrefly: ignore [bad-argument-type]
            select(UserDB).order_by(UserDB.created_at, UserDB.username),
        )
        return list(result.scalars().all())
