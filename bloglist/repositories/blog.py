"""Blog repository for database operations."""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from logging import getLogger
from typing import cast
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import ColumnElement

from bloglist.configs import file_logger
from bloglist.errors.blog import MalformedIdError
from bloglist.errors.database import DatabaseError
from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.repositories.protocols import BlogWithOwner
from bloglist.schemas.blog import OwnerSummary

logger = file_logger(getLogger(__name__))

UPDATABLE_FIELDS = frozenset({"title", "author", "url", "likes"})


class BlogRepository:
    """
    Repository for Blog database operations.

    This class implements the ``BlogStore`` protocol on top of an async
    SQLAlchemy session. The session's transaction is owned by the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, blog: BlogDB) -> BlogDB:
        """
        Persist a new blog.

        Args:
            blog: Blog database model to insert

        Returns:
            BlogDB: Created blog with database defaults applied

        Raises:
            DatabaseError: If the insert violates a constraint
        """
        try:
            self.session.add(blog)
            await self.session.flush()
            await self.session.refresh(blog)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        return blog

    async def find_by_id(self, blog_id: UUID) -> BlogDB | None:
        """
        Get blog by ID.

        Args:
            blog_id: Blog UUID

        Returns:
            BlogDB | None: Blog if found, None otherwise

        Raises:
            MalformedIdError: If the database rejects the identifier
        """
        try:
            result = await self.session.execute(
                select(BlogDB).where(cast(ColumnElement[bool], BlogDB.id == blog_id)),
            )
        except DataError as e:
            raise MalformedIdError(blog_id) from e
        return result.scalar_one_or_none()

    async def delete_by_id(self, blog_id: UUID) -> bool:
        """
        Delete blog by ID in a single statement.

        Args:
            blog_id: Blog UUID

        Returns:
            bool: True if blog was deleted, False if not found

        Raises:
            MalformedIdError: If the database rejects the identifier
        """
        try:
            result = await self.session.execute(
                delete(BlogDB).where(cast(ColumnElement[bool], BlogDB.id == blog_id)),
            )
        except DataError as e:
            raise MalformedIdError(blog_id) from e
        await self.session.flush()
        return cast(CursorResult, result).rowcount > 0

    async def update_by_id(
        self,
        blog_id: UUID,
        fields: Mapping[str, str | int],
    ) -> BlogDB | None:
        """
        Replace title, author, url and likes of a blog.

        Args:
            blog_id: Blog UUID
            fields: New values keyed by field name; other keys are ignored

        Returns:
            BlogDB | None: Updated blog if found, None otherwise

        Raises:
            DatabaseError: If the new values violate a constraint
        """
        db_blog = await self.find_by_id(blog_id)
        if not db_blog:
            return None

        for key, value in fields.items():
            if key in UPDATABLE_FIELDS:
                setattr(db_blog, key, value)

        try:
            await self.session.flush()
            await self.session.refresh(db_blog)
        except (IntegrityError, DataError) as e:
            await self.session.rollback()
            raise DatabaseError(detail=f"Failed to update blog: {e}") from e

        return db_blog

    async def list_all(self) -> list[BlogWithOwner]:
        """
        Get every blog joined with its owner's username and name.

        Blogs are returned in creation order.

        Returns:
            list[BlogWithOwner]: Blogs with owner identity (None when untracked)
        """
        statement = (
            select(BlogDB, UserDB)
            .outerjoin(UserDB, cast(ColumnElement[bool], BlogDB.user_id == UserDB.uuid))
            # pyrefly: ignore [bad-argument-type]
            .order_by(BlogDB.created_at, BlogDB.id)
        )
        result = await self.session.execute(statement)

        entries = [
            BlogWithOwner(
                blog=blog,
                owner=(
                    OwnerSummary(id=user.uuid, username=user.username, name=user.name)
                    if user
                    else None
                ),
            )
            for blog, user in result.all()
        ]
        logger.debug(f"Listed {len(entries)} blogs")
        return entries

    async def list_by_owners(self, user_ids: Iterable[UUID]) -> dict[UUID, list[BlogDB]]:
        """
        Reverse lookup of blogs owned by each of the given users.

        Args:
            user_ids: Owner UUIDs

        Returns:
            dict[UUID, list[BlogDB]]: Blogs keyed by owner; owners without blogs are absent
        """
        ids = list(user_ids)
        if not ids:
            return {}

        statement = (
            select(BlogDB)
            # pyrefly: ignore [missing-attribute]
            .where(BlogDB.user_id.in_(ids))
            # pyrefly: ignore [bad-argument-type]
            .order_by(BlogDB.created_at, BlogDB.id)
        )
        result = await self.session.execute(statement)

        grouped: dict[UUID, list[BlogDB]] = defaultdict(list)
        for blog in result.scalars().all():
            if blog.user_id is not None:
                grouped[blog.user_id].append(blog)
        return dict(grouped)
