"""FastAPI application entry point."""

import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from insureclaim import __version__
from insureclaim.api.errors import register_exception_handlers
from insureclaim.api.v1 import auth, claims, payments, policies
from insureclaim.core.config import settings
from insureclaim.core.logging import get_logger, setup_logging

logger = get_logger("http")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else "INFO")
    startup_logger = get_logger("startup")
    startup_logger.info("Application starting", env=settings.APP_ENV, version=__version__)
    yield
    startup_logger.info("Application shutting down")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request.headers.get("x-request-id") or uuid.uuid4().hex)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                status_code=500,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return response


app = FastAPI(
    title="InsureClaim API",
    description="Insurance policy, claim and payment management",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

API_PREFIX = "/api/v1"
app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(policies.router, prefix=API_PREFIX)
app.include_router(claims.router, prefix=API_PREFIX)
app.include_router(payments.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
