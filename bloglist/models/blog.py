"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    This model represents the blogs table in the database. The owning user is
    optional so that legacy rows created before ownership tracking stay
    readable; such rows can never be deleted through the API.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")
    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.uuid", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owning user ID (foreign key to users.uuid)",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    url: str = Field(
        sa_column=Column(String(2048), nullable=False),
        description="Blog URL",
    )

    author: str = Field(
        default="",
        sa_column=Column(String(200), nullable=False, index=True),
        description="Author name as written by the submitter",
    )
    likes: int = Field(
        default=0,
        ge=0,
        nullable=False,
        description="Number of likes",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Go To Statement Considered Harmful",
                "author": "Edsger W. Dijkstra",
                "url": "https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf",
                "likes": 5,
            },
        },
    )
