"""User schemas for registration and listing."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs.settings import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from bloglist.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """User creation model (request body)."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=50,
        description="Username (unique)",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=200,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password",
        examples=["salainen"],
    )


class UserResponse(BaseModel):
    """User response model; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = Field(default_factory=list)
