"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses. A missing entity, whichever kind,
becomes a 404 whose plain-text body is the error message, e.g.
"Post not found with id: 7". Anything else is a bare 500.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from blogapi.domain.blog.errors import EntityNotFoundError
from blogapi.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(EntityNotFoundError)
    async def handle_entity_not_found(
        _request: Request, exc: EntityNotFoundError
    ) -> PlainTextResponse:
        """Translate any not-found failure into a 404 with its message."""
        logger.warning("%s not found: id=%s", exc.entity, exc.entity_id)
        return PlainTextResponse(exc.message, status_code=HTTP_404)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> PlainTextResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Runs outside every user middleware, so the secure headers are
        set here directly.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return PlainTextResponse(
            "Internal Server Error", status_code=HTTP_500, headers=SECURE_HEADERS
        )
