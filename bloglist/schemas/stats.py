"""Response schemas for blog statistics."""

from pydantic import BaseModel, Field

from bloglist.schemas.blog import BlogResponse


class AuthorBlogCount(BaseModel):
    """Author with the number of blogs attributed to them."""

    author: str
    count: int = Field(ge=0)


class AuthorLikes(BaseModel):
    """Author with the likes summed over their blogs."""

    author: str
    likes: int = Field(ge=0)


class BlogStatisticsResponse(BaseModel):
    """Aggregates over every stored blog."""

    total_likes: int
    favorite_blog: BlogResponse | None = None
    most_blogs: AuthorBlogCount | None = None
    most_likes: AuthorLikes | None = None
