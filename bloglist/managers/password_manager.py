"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU bound, so the async helpers run it on a small thread pool to
keep the event loop responsive.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor
from logging import getLogger

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, file_logger, settings
from bloglist.decorators.with_retry import with_retry
from bloglist.errors.password_hasher import PasswordHashingError

executor = ThreadPoolExecutor(max_workers=4)
logger = file_logger(getLogger(__name__))


class PasswordHasher:
    """
    A secure password hashing and verification manager using Argon2id algorithm.

    This class wraps passlib's CryptContext; pbkdf2_sha256 is accepted for
    verification only and flagged as deprecated.
    """

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a hashed password.

        A missing hash still runs a dummy verification so that unknown users
        take as long to reject as wrong passwords.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The process-wide password hasher
    """
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


@with_retry(base_delay=0.1, max_delay=1, exec_retry=PasswordHashingError)
async def hash_password(password: str) -> str:
    """
    Hash a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """
    Verify a password with the default hasher off the event loop.

    Args:
        password: The plaintext password to verify
        hashed_password: The stored hash, or None for an unknown user

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
