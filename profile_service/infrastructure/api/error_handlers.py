"""Global exception handlers.

- ProfileServiceError -> its own status with an ``{"error": ...}`` body
- RequestValidationError -> 400 with field-level details
- Exception (catch-all) -> 500, never leaks internal details
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from profile_service.domain.errors import (
    INTERNAL_SERVER_ERROR,
    INVALID_DATE_FORMAT,
    ProfileServiceError,
)

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = "Invalid request body"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_profile_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_profile_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ProfileServiceError)
    async def profile_error_handler(request: Request, exc: ProfileServiceError):
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.http_status >= 500:
            logger.error(str(exc), extra=extra, exc_info=exc)
        else:
            logger.info(f"{exc.code}: {exc.message}", extra=extra)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_SERVER_ERROR},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    errors = exc.errors()
    date_failed = any(e["loc"] and e["loc"][-1] == "dateOfBirth" for e in errors)
    return {
        "error": INVALID_DATE_FORMAT if date_failed else INVALID_REQUEST_BODY,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    }
