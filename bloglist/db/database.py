"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import file_logger, pool_kwargs, settings

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def _connect_args(database_url: str) -> dict[str, object]:
    """Server-side statement timeouts, only understood by asyncpg."""
    if not database_url.startswith("postgresql+asyncpg"):
        return {}
    return {
        "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
        "server_settings": {
            "statement_timeout": str(STATEMENT_TIMEOUT_MS),
            "lock_timeout": str(STATEMENT_TIMEOUT_MS),
        },
    }


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores ``ON DELETE SET NULL`` unless foreign keys are switched on."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str = settings.DATABASE_URL) -> AsyncEngine:
    """
    Create the async engine for ``database_url``.

    Args:
        database_url: SQLAlchemy async database URL

    Returns:
        AsyncEngine: Configured engine
    """
    new_engine = create_async_engine(
        database_url,
        echo=settings.DATABASE_ECHO,
        connect_args=_connect_args(database_url),
        **pool_kwargs(database_url),
    )
    if database_url.startswith("sqlite"):
        _enable_sqlite_foreign_keys(new_engine)
    if settings.DEBUG:
        _configure_engine_events(new_engine)
    return new_engine


engine: AsyncEngine = build_engine()

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    The session commits when the request handler returns and rolls back if
    it raises.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            await BlogRepository(session).delete_by_id(blog_id)
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.warning("Transaction rolled back")
            raise


async def init_db() -> None:
    """
    Create all tables defined in SQLModel models.

    Called on application startup. Existing tables are left untouched.
    """
    async with engine.begin() as conn:
        # Import all models to ensure they are registered
        from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

        await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")


async def close_db() -> None:
    """Dispose of the engine's connection pool on shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
