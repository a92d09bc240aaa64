"""
Exception handlers mapping domain errors to HTTP responses.

Every handled error renders as ``{"detail": "<message>"}``, the same shape
FastAPI uses for HTTPException.  Anything unexpected is logged with its
traceback and returned as a generic 500.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from insureclaim.core.errors import (
    ForbiddenError,
    InsureClaimError,
    InvalidStateError,
    NotFoundError,
    UnauthorizedError,
)
from insureclaim.core.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"

# Checked in order, so subclasses must come before their bases.
STATUS_BY_ERROR: tuple[tuple[type[InsureClaimError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: InsureClaimError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: InsureClaimError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("Domain error", path=request.url.path, error=exc.message, details=exc.details)
        return JSONResponse(status_code=status_code, content={"detail": INTERNAL_ERROR_MESSAGE})

    logger.info(
        "Request rejected",
        path=request.url.path,
        status_code=status_code,
        error=type(exc).__name__,
        message=exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=status_code, content={"detail": exc.message}, headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", method=request.method, path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InsureClaimError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
