# bloglist/dependencies/dependencies.py

"""Application dependencies: repositories, services and the current user."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.errors.auth import InvalidTokenError
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService, BlogService

# auto_error is off so a missing token renders through our own 401 handler
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_blog_service(repo: BlogRepoDep) -> BlogService:
    return BlogService(repo)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


def get_auth_service(repo: UserRepoDep) -> AuthService:
    return AuthService(repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    repo: UserRepoDep,
) -> UserDB:
    """
    Get the authenticated user from the bearer token.

    Parameters
    ----------
    token : str | None
        Bearer token, None when the Authorization header is absent.
    repo : UserRepository
        User repository.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    InvalidTokenError
        If the token is missing, invalid, expired or names an unknown user.
    """
    if not token:
        raise InvalidTokenError

    token_data = decode_access_token(token)
    if not token_data:
        raise InvalidTokenError

    user = await repo.get_by_id(token_data.user_id)
    if not user:
        raise InvalidTokenError

    return user


UserDBDep = Annotated[UserDB, Depends(get_current_user)]
