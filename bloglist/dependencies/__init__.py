from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    UserDBDep,
    UserRepoDep,
    get_auth_service,
    get_blog_repository,
    get_blog_service,
    get_current_user,
    get_user_repository,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "UserDBDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_repository",
    "get_blog_service",
    "get_current_user",
    "get_user_repository",
]
