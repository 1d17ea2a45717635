# bloglist/main.py

"""Bloglist Backend - blogs, users and like statistics over FastAPI."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, Response
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from bloglist.configs import settings
from bloglist.db import engine
from bloglist.errors import (
    BlogOperationError,
    DatabaseError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
    blog_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.managers import (
    get_system_metrics,
    limiter,
    metrics_manager,
    rate_limit_exceeded_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import auth_router, blog_router, stats_router, user_router
from bloglist.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog list API with ownership-checked deletion and like statistics",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={"docExpansion": "none", "operationsSorter": "method"},
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

routes = [blog_router, user_router, auth_router, stats_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (BlogOperationError, blog_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (DatabaseError, database_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "ok",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint.

    Returns
    -------
    ORJSONResponse
        Application version and database reachability. Always 200, so the
        process stays up while the database is being restored.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        database = "ok"
    except (SQLAlchemyError, OSError):
        database = "unavailable"

    return ORJSONResponse(
        {
            "version": app.version,
            "status": "ok",
            "timestamp": today_str(),
            "database": database,
        },
    )


@app.get(
    "/metrics",
    tags=["📈 Metrics"],
    response_class=ORJSONResponse,
    summary="Get metrics",
    description="Get API performance metrics.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "timestamp": "2025-01-01 12:00:00",
                        "api_metrics": {"request_counts": {"/api/blogs": 3}},
                        "system_metrics": {"cpu_percent": 4.2},
                    },
                },
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="get_metrics",
)
@limiter.limit("5/minute")
async def get_metrics(request: Request, response: Response) -> ORJSONResponse:
    """
    Get API performance metrics.

    Notes
    -----
    Rate limited to 5 requests per minute.
    """
    return ORJSONResponse(
        content={
            "timestamp": today_str(),
            "api_metrics": metrics_manager.get_metrics(),
            "system_metrics": await get_system_metrics(),
        },
    )
