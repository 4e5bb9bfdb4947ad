"""Error Handlers — global exception handlers for the plugin API.

Invariants:
    - Exception (catch-all) → 500 "internal error" as text/plain, never leaks internal details

Design Decisions:
    - The dispatcher converts PluginError itself; this layer only covers errors
      that escape it (framework code, bugs)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_generic_error_handler(app)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "internal error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
