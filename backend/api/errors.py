"""
API exception handlers.

Maps application exceptions to JSON responses. Anything unexpected becomes
a bare 500 so that no internal detail reaches the client.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import AppError
from .models.errors import ErrorResponse, FieldError, ValidationErrorResponse

logger = logging.getLogger(__name__)


def to_field_error(error: dict[str, Any]) -> FieldError:
    """Flatten one pydantic error into ``{field, message, location}``."""
    loc = [str(part) for part in error.get("loc", ())]
    location = loc[0] if loc else "body"
    return FieldError(
        field=".".join(loc[1:]),
        message=error.get("msg", "Invalid value"),
        location=location,
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=headers,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = ValidationErrorResponse(errors=[to_field_error(e) for e in exc.errors()])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(error="InternalServerError", message="Internal server error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on an application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
