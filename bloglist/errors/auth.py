"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password", HTTP_401_UNAUTHORIZED)


class InvalidTokenError(UserAuthenticationError):
    """Raised when a bearer token is missing, malformed or expired."""

    def __init__(self) -> None:
        super().__init__("token missing or invalid", HTTP_401_UNAUTHORIZED)


auth_exception_handler = create_exception_handler(logger)
