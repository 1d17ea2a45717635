"""
Blog operation errors.

Every error raised by the blog orchestrator carries the ``Outcome`` it
terminates in, so callers can branch on the outcome without caring about the
HTTP status that the exception handler eventually renders.
"""

from logging import getLogger

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from bloglist.configs import DEFAULT_ERROR_MESSAGE, file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.schemas.outcome import Outcome

logger = file_logger(getLogger(__name__))


class BlogOperationError(BaseAppError):
    """Base error for blog create/update/delete operations."""

    outcome: Outcome = Outcome.UNEXPECTED

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)
        self.outcome = type(self).outcome


class PreconditionFailedError(BlogOperationError):
    """Raised when a request is rejected before the store is touched."""

    outcome = Outcome.PRECONDITION_FAILED

    def __init__(self, detail: str = "Precondition failed") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class MalformedIdError(PreconditionFailedError):
    """Raised when a blog id is not a well-formed identifier."""

    def __init__(self, raw_id: object = None) -> None:
        super().__init__("Invalid ID format")
        self.raw_id = str(raw_id)


class MissingFieldError(PreconditionFailedError):
    """Raised when a required blog field is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"`{field}` is required")
        self.field = field


class InvalidFieldError(PreconditionFailedError):
    """Raised when a blog field has a value the blog cannot hold."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"`{field}` is invalid: {message}")
        self.field = field


class UnownedBlogError(PreconditionFailedError):
    """Raised when deletion targets a blog without an owning user."""

    def __init__(self) -> None:
        super().__init__("Blog has no associated user")


class BlogNotFoundError(BlogOperationError):
    """Raised when the referenced blog does not exist."""

    outcome = Outcome.NOT_FOUND

    def __init__(self, detail: str = "Blog not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ForbiddenError(BlogOperationError):
    """Raised when the actor does not own the blog."""

    outcome = Outcome.FORBIDDEN

    def __init__(
        self,
        detail: str = "Permission denied: only the creator can delete this blog",
    ) -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


class UnexpectedBlogError(BlogOperationError):
    """Raised for store failures not covered by another outcome."""

    outcome = Outcome.UNEXPECTED

    def __init__(self, detail: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


blog_exception_handler = create_exception_handler(logger)
