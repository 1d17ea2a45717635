# bloglist/routes/auth.py

"""Login route issuing bearer tokens."""

from typing import Annotated

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from bloglist.decorators import timed
from bloglist.dependencies import AuthServiceDep
from bloglist.managers import limiter
from bloglist.schemas import LoginRequest, Token

router = APIRouter(prefix="/api/login", tags=["🔑 Auth"])


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Log in",
    description="Exchange username and password for a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {"example": {"detail": "invalid username or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@timed("/api/login")
@limiter.limit(lambda key: "20/minute" if "apikey" in key else "5/minute")
async def login(
    request: Request,
    response: Response,
    credentials: Annotated[
        LoginRequest,
        Body(examples=[{"username": "mluukkai", "password": "salainen"}]),
    ],
    service: AuthServiceDep,
) -> Token:
    """
    Authenticate and issue an access token.

    Returns
    -------
    Token
        Bearer token with the user's username and name.

    Raises
    ------
    InvalidCredentialsError
        If the username is unknown or the password is wrong.
    """
    user = await service.authenticate_user(credentials.username, credentials.password)
    return service.create_token_for_user(user)
