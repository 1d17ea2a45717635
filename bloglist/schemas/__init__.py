from bloglist.schemas.auth import LoginRequest, Token, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogDetail,
    BlogResponse,
    BlogSummary,
    BlogUpdate,
    OwnerSummary,
)
from bloglist.schemas.outcome import Outcome
from bloglist.schemas.stats import AuthorBlogCount, AuthorLikes, BlogStatisticsResponse
from bloglist.schemas.user import UserCreate, UserResponse

__all__ = [
    "AuthorBlogCount",
    "AuthorLikes",
    "BlogCreate",
    "BlogDetail",
    "BlogResponse",
    "BlogStatisticsResponse",
    "BlogSummary",
    "BlogUpdate",
    "LoginRequest",
    "Outcome",
    "OwnerSummary",
    "Token",
    "TokenData",
    "UserCreate",
    "UserResponse",
]
