"""
Blog schemas for the bloglist application.

Request bodies only describe the shape of the payload; the blank-string and
ownership rules live in the blog service so they hold for every caller.
"""

from typing import Annotated
from uuid import UUID

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
)

from bloglist.configs.settings import MAX_TITLE_LENGTH, MAX_URL_LENGTH

Title = Annotated[str, StringConstraints(min_length=1, max_length=MAX_TITLE_LENGTH)]
Url = Annotated[str, StringConstraints(min_length=1, max_length=MAX_URL_LENGTH)]


class OwnerSummary(BaseModel):
    """Minimal owner identity attached to listed blogs."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogCreate(BaseModel):
    """Blog creation model (request body)."""

    title: Title = Field(
        ...,
        description="Blog title",
        examples=["React patterns"],
    )
    author: str = Field(
        default="",
        max_length=MAX_TITLE_LENGTH,
        description="Author name",
        examples=["Michael Chan"],
    )
    url: Url = Field(
        ...,
        description="Blog URL",
        examples=["https://reactpatterns.com/"],
    )
    likes: int = Field(
        default=0,
        ge=0,
        description="Number of likes (defaults to 0)",
        examples=[7],
    )

    @field_validator("likes", mode="before")
    @classmethod
    def default_missing_likes(cls, v: int | None) -> int:
        """Treat an explicit null like an omitted value."""
        return 0 if v is None else v

    @field_validator("author", mode="before")
    @classmethod
    def default_missing_author(cls, v: str | None) -> str:
        return "" if v is None else v


class BlogUpdate(BaseModel):
    """Blog replacement model; omitted fields keep their stored value."""

    title: Title | None = Field(default=None, description="Blog title")
    author: str | None = Field(
        default=None,
        max_length=MAX_TITLE_LENGTH,
        description="Author name",
    )
    url: Url | None = Field(default=None, description="Blog URL")
    likes: int | None = Field(default=None, ge=0, description="Number of likes")

    def changes(self) -> dict[str, str | int]:
        """Return only the fields present in the request with a usable value."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class BlogSummary(BaseModel):
    """Blog fields embedded in a user response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int


class BlogResponse(BlogSummary):
    """Blog response model with the owner's minimal identity."""

    user: OwnerSummary | None = None

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "mluukkai",
                    "name": "Matti Luukkainen",
                },
            },
        },
    )

    @classmethod
    def from_owned(cls, blog: object, owner: OwnerSummary | None) -> "BlogResponse":
        """Build a response from a stored blog and its owner's identity."""
        summary = BlogSummary.model_validate(blog)
        return cls(**summary.model_dump(), user=owner)


class BlogDetail(BlogSummary):
    """Single blog response; ``user`` is the owner's id as stored."""

    user: UUID | None = Field(default=None, validation_alias=AliasChoices("user_id", "user"))
