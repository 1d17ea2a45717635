# bloglist/routes/blog.py

"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs with their owners
  - Get blog by id
  - Create blog (authenticated, owned by the caller)
  - Delete blog (authenticated, owner only)
  - Update blog

Every mutation goes through `BlogService`, whose typed errors are rendered by
the blog exception handler: 400 precondition failed, 403 forbidden,
404 not found, 500 unexpected.

Notes
-----
Updating a blog requires neither a token nor ownership. Only deletion is
restricted to the blog's creator.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.decorators import timed
from bloglist.dependencies import BlogServiceDep, UserDBDep
from bloglist.managers import limiter
from bloglist.schemas import BlogCreate, BlogDetail, BlogResponse, BlogUpdate

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "user": "123e4567-e89b-12d3-a456-426614174000",
}

RATE_LIMITED = {
    "description": "Rate limit exceeded",
    "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
}
INVALID_ID = {
    "description": "Malformed id",
    "content": {
        "application/json": {
            "example": {
                "detail": "Invalid ID format",
                "outcome": "precondition_failed",
                "raw_id": "not-an-id",
            },
        },
    },
}
NOT_FOUND = {
    "description": "Not found",
    "content": {
        "application/json": {"example": {"detail": "Blog not found", "outcome": "not_found"}},
    },
}
UNAUTHORIZED = {
    "description": "Missing or invalid token",
    "content": {"application/json": {"example": {"detail": "token missing or invalid"}}},
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="List every blog with its owner's username and name.",
    responses={429: RATE_LIMITED},
    operation_id="blogs_list",
)
@timed("/api/blogs")
@limiter.limit(lambda key: "120/minute" if "apikey" in key else "60/minute")
async def list_blogs(
    request: Request,
    response: Response,
    service: BlogServiceDep,
) -> list[BlogResponse]:
    """
    List blogs in creation order.

    Returns
    -------
    list[BlogResponse]
        Blogs with `user` set to the owner's identity or null.
    """
    entries = await service.list_blogs()
    return [BlogResponse.from_owned(entry.blog, entry.owner) for entry in entries]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogDetail,
    summary="Get blog by ID",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: INVALID_ID,
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="blogs_get_by_id",
)
@timed("/api/blogs/by-id")
@limiter.limit(lambda key: "120/minute" if "apikey" in key else "60/minute")
async def get_blog(
    request: Request,
    response: Response,
    blog_id: str,
    service: BlogServiceDep,
) -> BlogDetail:
    """
    Get a single blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier; anything that is not a UUID answers 400.

    Returns
    -------
    BlogDetail
        Blog data with the owner's id.
    """
    return BlogDetail.model_validate(await service.get_blog(blog_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogDetail,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user. Likes default to 0.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Missing title or url",
            "content": {
                "application/json": {
                    "example": {"detail": "`title` is required", "outcome": "precondition_failed"},
                },
            },
        },
        401: UNAUTHORIZED,
        429: RATE_LIMITED,
    },
    operation_id="blogs_create",
)
@timed("/api/blogs/create")
@limiter.limit(lambda key: "30/minute" if "apikey" in key else "10/minute")
async def create_blog(
    request: Request,
    response: Response,
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                },
            ],
        ),
    ],
    current_user: UserDBDep,
    service: BlogServiceDep,
) -> BlogDetail:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload; any owner in it is ignored.
    current_user : UserDB
        Authenticated user, becomes the owner.

    Returns
    -------
    BlogDetail
        Created blog.
    """
    created = await service.create_blog(current_user.uuid, blog)
    return BlogDetail.model_validate(created)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog. Only the user who created it may delete it.",
    responses={
        400: INVALID_ID,
        401: UNAUTHORIZED,
        403: {
            "description": "Not the owner",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Permission denied: only the creator can delete this blog",
                        "outcome": "forbidden",
                    },
                },
            },
        },
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="blogs_delete",
)
@timed("/api/blogs/delete")
@limiter.limit(lambda key: "30/minute" if "apikey" in key else "10/minute")
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: str,
    current_user: UserDBDep,
    service: BlogServiceDep,
) -> Response:
    """
    Delete a blog owned by the authenticated user.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    current_user : UserDB
        Authenticated user.

    Returns
    -------
    Response
        Empty 204 response.
    """
    await service.delete_blog(current_user.uuid, blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogDetail,
    summary="Update blog",
    description=(
        "Replace title, author, url and likes of a blog. "
        "No authentication or ownership check is applied."
    ),
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: INVALID_ID,
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="blogs_update",
)
@timed("/api/blogs/update")
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def update_blog(
    request: Request,
    response: Response,
    blog_id: str,
    blog: Annotated[BlogUpdate, Body(examples=[{"likes": 8}])],
    service: BlogServiceDep,
) -> BlogDetail:
    """
    Update a blog.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    blog : BlogUpdate
        New field values; omitted fields keep their stored value.

    Returns
    -------
    BlogDetail
        Updated blog.
    """
    updated = await service.update_blog(blog_id, blog)
    return BlogDetail.model_validate(updated)
