"""Global exception handlers for the bloglist API.

Invariants:
    - Every error body has the shape {"error": "<message>"}
    - ValidationError and pydantic RequestValidationError → 400
    - PersistenceError and any other exception → 500, never leaks driver details
    - Unknown routes → 404 {"error": "unknown endpoint"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import PersistenceError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"
UNKNOWN_ENDPOINT_MESSAGE = "unknown endpoint"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_request_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_persistence_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register domain validation error handler (duplicate username included)."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)


def _register_request_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request body validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        message = _format_request_errors(exc)
        logger.warning(f"Invalid request on {request.url.path}: {message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, message)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = str(exc.detail)
        if exc.status_code == status.HTTP_404_NOT_FOUND and message == "Not Found":
            message = UNKNOWN_ENDPOINT_MESSAGE
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )


def _register_persistence_error_handler(app: FastAPI) -> None:
    """Register document store failure handler."""

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error(
            f"Persistence error on {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def _format_request_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into "field: message; field: message"."""
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"path" location segment
        location = [str(loc) for loc in error.get("loc", ())[1:]]
        field = ".".join(location) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
