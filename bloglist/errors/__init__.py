from bloglist.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.blog import (
    BlogNotFoundError,
    BlogOperationError,
    ForbiddenError,
    InvalidFieldError,
    MalformedIdError,
    MissingFieldError,
    PreconditionFailedError,
    UnexpectedBlogError,
    UnownedBlogError,
    blog_exception_handler,
)
from bloglist.errors.database import (
    DatabaseError,
    DuplicateEntryError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "BlogNotFoundError",
    "BlogOperationError",
    "DatabaseError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InvalidFieldError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MalformedIdError",
    "MissingFieldError",
    "PasswordHashingError",
    "PreconditionFailedError",
    "UnexpectedBlogError",
    "UnownedBlogError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "blog_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
