"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the bloglist backend application.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr
from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_TITLE_LENGTH = 200
MAX_URL_LENGTH = 2048

# Response constants
DEFAULT_ERROR_MESSAGE = "Internal server error"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # Authentication
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "bloglist-backend"
    JWT_AUDIENCE: str = "bloglist-frontend"
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True


settings = Settings()


@dataclass(frozen=True, slots=True)
class Argon2Config:
    """Argon2id cost parameters for one security level."""

    memory_cost: int
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, Argon2Config] = {
    "low": Argon2Config(memory_cost=8192, time_cost=1, parallelism=1),
    "medium": Argon2Config(memory_cost=65536, time_cost=2, parallelism=2),
    "high": Argon2Config(memory_cost=262144, time_cost=3, parallelism=4),
}


class LimiterConfig(BaseSettings):
    """Rate limiter configuration passed straight to slowapi's ``Limiter``."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    default_limits: list[str] = ["100/minute"]
    storage_uri: str = "memory://"
    headers_enabled: bool = False
    enabled: bool = settings.RATE_LIMIT_ENABLED


def pool_kwargs(database_url: str) -> dict[str, Any]:
    """
    Build engine pool arguments for the configured database.

    SQLite engines manage their own pool, so sizing arguments only apply to
    server databases.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        dict[str, Any]: Keyword arguments for ``create_async_engine``
    """
    if database_url.startswith("sqlite"):
        return {}

    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
    }
