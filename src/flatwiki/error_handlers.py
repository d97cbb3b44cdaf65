"""Global exception handlers.

WikiError subclasses answer with their own status and message; template
failures answer 500 with the Jinja2 error text. Bodies are plain text.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from jinja2 import TemplateError
from starlette.exceptions import HTTPException as StarletteHTTPException

from flatwiki.core.errors import WikiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_wiki_error_handler(app)
    _register_template_error_handler(app)
    _register_http_error_handler(app)


def _register_wiki_error_handler(app: FastAPI) -> None:
    @app.exception_handler(WikiError)
    async def wiki_error_handler(request: Request, exc: WikiError):
        """Handle storage and validation errors."""
        if exc.http_status >= 500:
            logger.error(
                "%s on %s: %s", type(exc).__name__, request.url.path, exc.message
            )
        else:
            logger.warning(
                "%s on %s: %s", type(exc).__name__, request.url.path, exc.message
            )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_template_error_handler(app: FastAPI) -> None:
    @app.exception_handler(TemplateError)
    async def template_error_handler(request: Request, exc: TemplateError):
        """Handle template loading and rendering failures."""
        logger.error(
            "Template error on %s: %s", request.url.path, exc, exc_info=exc
        )
        return PlainTextResponse(
            str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing errors (unknown paths, bad titles, wrong methods)."""
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )
