# bloglist/routes/user.py

"""
User Routes.

Summary
-------
Endpoints include:
  - Create user
  - List users with the blogs they created
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST

from bloglist.configs import file_logger
from bloglist.decorators import timed
from bloglist.dependencies import BlogRepoDep, UserRepoDep
from bloglist.errors.database import DuplicateEntryError
from bloglist.managers import limiter
from bloglist.models import BlogDB, UserDB
from bloglist.schemas import BlogSummary, UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = file_logger(getLogger(__name__))


def db_user_to_response(db_user: UserDB, blogs: list[BlogDB] | None = None) -> UserResponse:
    """
    Convert a `UserDB` instance and its blogs to `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.
    blogs : list[BlogDB] | None
        Blogs owned by the user.

    Returns
    -------
    UserResponse
        Response model without the password hash.
    """
    return UserResponse(
        id=db_user.uuid,
        username=db_user.username,
        name=db_user.name,
        blogs=[BlogSummary.model_validate(blog) for blog in blogs or []],
    )


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new user",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Username taken, or username/password too short",
            "content": {
                "application/json": {"example": {"detail": "expected `username` to be unique"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_create",
)
@timed("/api/users/create")
@limiter.limit(lambda key: "15/hour" if "apikey" in key else "5/hour")
async def create_user(
    request: Request,
    response: Response,
    user: Annotated[
        UserCreate,
        Body(
            examples=[
                {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
            ],
        ),
    ],
    repo: UserRepoDep,
) -> UserResponse:
    """
    Register a user.

    Parameters
    ----------
    user : UserCreate
        Username (at least 3 characters), display name and password
        (at least 3 characters).

    Returns
    -------
    UserResponse
        Created user (without password).

    Raises
    ------
    HTTPException
        If the username already exists.
    """
    try:
        db_user = await repo.create(user)
    except DuplicateEntryError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=e.detail) from e

    logger.info(f"User {db_user.username} created")
    return db_user_to_response(db_user)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="Get all users",
    description="List users with the blogs each of them created.",
    responses={
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_get_all",
)
@timed("/api/users")
@limiter.limit(lambda key: "30/minute" if "apikey" in key else "10/minute")
async def get_users(
    request: Request,
    response: Response,
    repo: UserRepoDep,
    blog_repo: BlogRepoDep,
) -> list[UserResponse]:
    """
    Get all users.

    Returns
    -------
    list[UserResponse]
        Users with their blogs.
    """
    users = await repo.get_all()
    blogs_by_owner = await blog_repo.list_by_owners(user.uuid for user in users)
    return [db_user_to_response(user, blogs_by_owner.get(user.uuid)) for user in users]
