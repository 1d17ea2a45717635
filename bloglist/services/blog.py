"""
Blog mutation and query orchestration.

``BlogService`` sequences every blog operation against an injected
``BlogStore``. Deletion walks a fixed series of checks and stops at the first
that fails:

1. the id must be well formed (``PRECONDITION_FAILED``)
2. the blog must exist (``NOT_FOUND``)
3. the blog must have an owner (``PRECONDITION_FAILED``)
4. the actor must be that owner (``FORBIDDEN``)
5. the store must still find it when deleting (``NOT_FOUND``)

Each terminal state is raised as a ``BlogOperationError`` carrying its
``Outcome``; the FastAPI exception handlers map it to an HTTP status.

Updates deliberately skip the ownership check: any caller may replace the
fields of any blog. Deletion is the only ownership-checked mutation.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from logging import getLogger
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from bloglist.auth.permissions import can_delete
from bloglist.configs import file_logger
from bloglist.errors.auth import InvalidTokenError
from bloglist.errors.blog import (
    BlogNotFoundError,
    BlogOperationError,
    ForbiddenError,
    InvalidFieldError,
    MalformedIdError,
    MissingFieldError,
    UnexpectedBlogError,
    UnownedBlogError,
)
from bloglist.errors.database import DatabaseError
from bloglist.models.blog import BlogDB
from bloglist.repositories.protocols import BlogStore, BlogWithOwner
from bloglist.schemas.blog import BlogCreate, BlogUpdate
from bloglist.schemas.outcome import Outcome
from bloglist.services.aggregation import BlogStatistics, summarize

logger = file_logger(getLogger(__name__))

REQUIRED_FIELDS: tuple[str, ...] = ("title", "url")


def parse_record_id(raw_id: object) -> UUID:
    """
    Parse a blog id received from a client.

    Args:
        raw_id: Id as received (string or UUID)

    Returns:
        UUID: The parsed id

    Raises:
        MalformedIdError: If the value is not a UUID
    """
    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(str(raw_id))
    except ValueError as e:
        raise MalformedIdError(raw_id) from e


@contextmanager
def store_failures(action: str) -> Iterator[None]:
    """Report store failures that have no outcome of their own as unexpected."""
    try:
        yield
    except BlogOperationError:
        raise
    except (DatabaseError, SQLAlchemyError, OSError) as e:
        logger.exception(f"Failed to {action}")
        raise UnexpectedBlogError from e


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validated[M: BaseModel](schema: type[M], fields: Mapping[str, Any]) -> M:
    """Validate raw fields against ``schema``, reporting the first bad field."""
    try:
        return schema.model_validate(fields)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(loc) for loc in error["loc"]) or "body"
        raise InvalidFieldError(field, error["msg"]) from e


class BlogService:
    """Orchestrates blog operations over an injected store."""

    def __init__(self, store: BlogStore) -> None:
        """
        Initialize the blog service.

        Args:
            store: Record store used for every read and write
        """
        self.store = store

    async def create_blog(
        self,
        actor_id: UUID | None,
        payload: BaseModel | Mapping[str, Any],
    ) -> BlogDB:
        """
        Create a blog owned by the actor.

        The owner is always the actor, whatever the payload says, and likes
        default to 0.

        Args:
            actor_id: Id of the authenticated user, None when unauthenticated
            payload: Blog fields (``BlogCreate`` or a plain mapping)

        Returns:
            BlogDB: The stored blog

        Raises:
            InvalidTokenError: If there is no authenticated actor
            MissingFieldError: If title or url is missing or blank
            InvalidFieldError: If a field has an unusable value, such as negative likes
            UnexpectedBlogError: If the store fails
        """
        if actor_id is None:
            raise InvalidTokenError

        fields = payload.model_dump() if isinstance(payload, BaseModel) else dict(payload)
        for name in REQUIRED_FIELDS:
            if _is_blank(fields.get(name)):
                raise MissingFieldError(name)

        data = payload if isinstance(payload, BlogCreate) else _validated(BlogCreate, fields)
        blog = BlogDB(
            title=data.title,
            author=data.author,
            url=data.url,
            likes=data.likes,
            user_id=actor_id,
        )
        with store_failures("create blog"):
            created = await self.store.create(blog)

        logger.info(f"Blog {created.id} created by user {actor_id}")
        return created

    async def delete_blog(self, actor_id: UUID | str, raw_id: object) -> Outcome:
        """
        Delete a blog if the actor owns it.

        Args:
            actor_id: Id of the authenticated user
            raw_id: Blog id as received from the client

        Returns:
            Outcome: ``Outcome.SUCCESS``

        Raises:
            MalformedIdError: If the id is malformed (store untouched)
            BlogNotFoundError: If the blog does not exist or vanished meanwhile
            UnownedBlogError: If the blog has no owner
            ForbiddenError: If the actor is not the owner
            UnexpectedBlogError: If the store fails
        """
        blog_id = parse_record_id(raw_id)

        with store_failures("fetch blog for deletion"):
            blog = await self.store.find_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError

        if blog.user_id is None:
            logger.warning(f"Refusing to delete unowned blog {blog_id}")
            raise UnownedBlogError

        if not can_delete(actor_id, blog):
            logger.warning(f"User {actor_id} attempted to delete blog {blog_id} of another user")
            raise ForbiddenError

        with store_failures("delete blog"):
            deleted = await self.store.delete_by_id(blog_id)
        if not deleted:
            # Removed by a concurrent request between the fetch and the delete
            raise BlogNotFoundError

        logger.info(f"Blog {blog_id} deleted by user {actor_id}")
        return Outcome.SUCCESS

    async def update_blog(
        self,
        raw_id: object,
        fields: BlogUpdate | Mapping[str, Any],
    ) -> BlogDB:
        """
        Replace title, author, url and likes of a blog.

        No ownership check is made, unlike ``delete_blog``.

        Args:
            raw_id: Blog id as received from the client
            fields: New values; omitted or null fields keep their stored value

        Returns:
            BlogDB: The updated blog

        Raises:
            MalformedIdError: If the id is malformed
            InvalidFieldError: If a field has an unusable value, such as negative likes
            BlogNotFoundError: If the blog does not exist
            UnexpectedBlogError: If the store fails
        """
        blog_id = parse_record_id(raw_id)

        update = fields if isinstance(fields, BlogUpdate) else _validated(BlogUpdate, fields)
        changes: dict[str, Any] = update.changes()

        with store_failures("update blog"):
            updated = await self.store.update_by_id(blog_id, changes)
        if updated is None:
            raise BlogNotFoundError

        return updated

    async def get_blog(self, raw_id: object) -> BlogDB:
        """
        Get a single blog.

        Raises:
            MalformedIdError: If the id is malformed
            BlogNotFoundError: If the blog does not exist
        """
        blog_id = parse_record_id(raw_id)
        with store_failures("fetch blog"):
            blog = await self.store.find_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError
        return blog

    async def list_blogs(self) -> list[BlogWithOwner]:
        with store_failures("list blogs"):
            return await self.store.list_all()

    async def statistics(self) -> BlogStatistics[BlogWithOwner]:
        """Aggregate likes and authorship over every stored blog."""
        return summarize(await self.list_blogs())
