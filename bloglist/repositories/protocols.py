"""Protocol for the blog record store the blog service depends on."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable
from uuid import UUID

from bloglist.models.blog import BlogDB
from bloglist.schemas.blog import OwnerSummary


@dataclass(frozen=True, slots=True)
class BlogWithOwner:
    """A stored blog joined with its owner's minimal identity."""

    blog: BlogDB
    owner: OwnerSummary | None = None

    @property
    def author(self) -> str:
        return self.blog.author

    @property
    def likes(self) -> int:
        return self.blog.likes


@runtime_checkable
class BlogStore(Protocol):
    """
    Record access contract for blogs.

    Implementations receive ids that already passed syntax validation. They may
    still raise ``MalformedIdError`` when the backend rejects an id, and the
    caller reports that as a precondition failure rather than a missing record.
    """

    async def find_by_id(self, blog_id: UUID) -> BlogDB | None:
        """Return the blog or ``None`` when it does not exist."""
        ...

    async def delete_by_id(self, blog_id: UUID) -> bool:
        """Delete the blog; ``False`` when it did not exist."""
        ...

    async def update_by_id(
        self,
        blog_id: UUID,
        fields: Mapping[str, str | int],
    ) -> BlogDB | None:
        """Replace the given fields; ``None`` when the blog does not exist."""
        ...

    async def create(self, blog: BlogDB) -> BlogDB:
        """Persist a new blog and return it."""
        ...

    async def list_all(self) -> list[BlogWithOwner]:
        """Return every blog with its owner's minimal identity."""
        ...
