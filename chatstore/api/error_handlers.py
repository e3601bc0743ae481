"""
Exception handlers.

Maps the service error taxonomy, request validation failures and
unexpected exceptions to the uniform error body
``{timestamp, status, error, message, path}``.

Dependencies: fastapi, sqlalchemy, chatstore.application.exceptions
System role: HTTP error translation
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatstore.application.exceptions import ChatStoreError
from chatstore.models.error import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please contact support."
DATABASE_ERROR_MESSAGE = "A database error occurred. Please try again later."


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body for a request."""
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=_reason_phrase(status_code),
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def format_validation_errors(exc: RequestValidationError) -> str:
    """Render validation errors as ``field: problem`` pairs."""
    parts = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path", "header")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return ", ".join(parts) or "Invalid request"


async def chatstore_error_handler(request: Request, exc: ChatStoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            exc_info=exc,
            extra={"path": request.url.path, "resource_id": exc.resource_id},
        )
        return error_response(request, exc.status_code, DATABASE_ERROR_MESSAGE)

    logger.warning(
        "Request rejected",
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "resource_id": exc.resource_id,
            "error": exc.message,
        },
    )
    return error_response(request, exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc)
    logger.warning("Invalid request", extra={"path": request.url.path, "error": message})
    return error_response(request, status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("HTTP error", extra={"path": request.url.path, "status_code": exc.status_code})
    else:
        logger.warning("HTTP error", extra={"path": request.url.path, "status_code": exc.status_code})
    response = error_response(request, exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error", exc_info=exc, extra={"path": request.url.path})
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, DATABASE_ERROR_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", exc_info=exc, extra={"path": request.url.path})
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install every exception handler on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ChatStoreError, chatstore_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
