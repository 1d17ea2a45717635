from bloglist.services.aggregation import (
    BlogStatistics,
    favorite_blog,
    most_blogs,
    most_likes,
    summarize,
    total_likes,
)
from bloglist.services.auth import AuthService
from bloglist.services.blog import BlogService, parse_record_id

__all__ = [
    "AuthService",
    "BlogService",
    "BlogStatistics",
    "favorite_blog",
    "most_blogs",
    "most_likes",
    "parse_record_id",
    "summarize",
    "total_likes",
]
