# bloglist/routes/stats.py

"""Statistics over all stored blogs."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from bloglist.decorators import timed
from bloglist.dependencies import BlogServiceDep
from bloglist.managers import limiter
from bloglist.schemas import BlogResponse, BlogStatisticsResponse

router = APIRouter(prefix="/api/stats", tags=["📊 Statistics"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=BlogStatisticsResponse,
    summary="Blog statistics",
    description="Total likes, most liked blog, most prolific author and most liked author.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "total_likes": 13,
                        "favorite_blog": {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "title": "Second",
                            "author": "Ioan",
                            "url": "https://example.com/2",
                            "likes": 8,
                            "user": None,
                        },
                        "most_blogs": {"author": "Darius", "count": 1},
                        "most_likes": {"author": "Ioan", "likes": 8},
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="blogs_statistics",
)
@timed("/api/stats")
@limiter.limit(lambda key: "60/minute" if "apikey" in key else "20/minute")
async def get_statistics(
    request: Request,
    response: Response,
    service: BlogServiceDep,
) -> BlogStatisticsResponse:
    """
    Aggregate every stored blog.

    Ties go to whichever blog or author comes first in creation order.

    Returns
    -------
    BlogStatisticsResponse
        Aggregates; everything but `total_likes` is null when there are no blogs.
    """
    stats = await service.statistics()
    favorite = stats.favorite_blog
    return BlogStatisticsResponse(
        total_likes=stats.total_likes,
        favorite_blog=BlogResponse.from_owned(favorite.blog, favorite.owner) if favorite else None,
        most_blogs=stats.most_blogs,
        most_likes=stats.most_likes,
    )
