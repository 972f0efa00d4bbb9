"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.
"""

from contextlib import asynccontextmanager
from logging import getLogger
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from microblog import __version__
from microblog.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from microblog.config.settings import Config
from microblog.presentation.web import comments_router, posts_router, users_router
from microblog.presentation.web.outcomes import register_outcome_handlers
from microblog.setup.ioc.container import create_container

logger = getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: nothing to do, the container is built with the app.
    Shutdown: close the DI container (disconnects Prisma when in use).
    """
    logger.info("microblog started")
    yield
    await app.state.dishka_container.close()
    logger.info("microblog shut down, DI container closed")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; a new one (store chosen by
            STORE_BACKEND) is created when omitted

    Returns:
        FastAPI application instance

    Raises:
        RuntimeError: If the configuration is unsafe for APP_ENV
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
    Config.validate()

    app = FastAPI(
        title="microblog",
        description="Short posts and comments",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(CorrelationIdMiddleware)

    register_outcome_handlers(app)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(
            f"Unhandled error on {request.method} {request.url.path}: {exc}"
        )
        return PlainTextResponse("Internal Server Error", status_code=500)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(posts_router)  # /, /posts, /posts/{id}, ...
    app.include_router(comments_router)  # POST /posts/{post_id}/comments
    app.include_router(users_router)  # /users/sign_in, /users/sign_up, ...

    return app
