"""Global exception handlers.

Registry and request errors are rendered as plain text with the error
message as the body.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_registry.errors import MethodNotAllowedError, RegistryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_registry_error_handler(app)
    _register_http_error_handler(app)


def _error_response(exc: RegistryError, headers: dict[str, str] | None = None) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)


def _register_registry_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError):
        """Handle registry and request errors."""
        logger.warning(
            f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}"
        )
        return _error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        """Render routing-level 405s like every other registry error."""
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            return await http_exception_handler(request, exc)

        logger.warning(f"{request.method} not allowed on {request.url.path}")
        return _error_response(MethodNotAllowedError(), headers=exc.headers)
