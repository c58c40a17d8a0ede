"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (authors, posts, comments, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database engine lifecycle

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from a2wsgi import ASGIMiddleware
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.engine import Engine

from blogapi.core.config import Settings, settings as default_settings
from blogapi.infrastructure.database import build_engine, create_schema
from blogapi.interfaces.blog.author_router import router as author_router
from blogapi.interfaces.blog.comment_router import router as comment_router
from blogapi.interfaces.blog.post_router import router as post_router
from blogapi.interfaces.health import router as health_router
from blogapi.shared.errors.handlers import register_error_handlers
from blogapi.shared.logging import configure_logging
from blogapi.shared.security.headers import SecurityHeadersMiddleware
from blogapi.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def open_database(app: FastAPI) -> Engine:
    """Build the engine from the app settings and attach it to app.state.

    Creates missing tables first when create_schema_on_startup is set.
    """
    app_settings: Settings = app.state.settings
    engine = build_engine(app_settings.get_database_url())
    if app_settings.create_schema_on_startup:
        create_schema(engine)
    app.state.engine = engine
    logger.info("Database engine started (%s).", engine.url.get_backend_name())
    return engine


def build_wsgi_app(app: FastAPI) -> ASGIMiddleware:
    """Wrap the app for a WSGI host.

    The ASGI lifespan is not guaranteed to run under WSGI, so the
    database is opened here before the first request.
    """
    open_database(app)
    return ASGIMiddleware(app)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the database engine, close it on shutdown."""
    engine = open_database(app)

    yield

    engine.dispose()
    logger.info("Database engine disposed.")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Configuration to use. Defaults to the environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, sql_echo=settings.database_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(author_router)
    app.include_router(post_router)
    app.include_router(comment_router)

    return app


app = create_app()
