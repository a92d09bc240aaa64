"""
Structured logging setup (structlog on top of stdlib logging).

Usage:
    from insureclaim.core.logging import get_logger, setup_logging

    setup_logging("INFO")   # call once at startup

    logger = get_logger(__name__)
    logger.info("Policy created", policy_number="POL-2025-000001")
"""

from __future__ import annotations

import logging
import sys

import structlog

from insureclaim.core.config import settings


def setup_logging(level: str = "INFO", *, json_logs: bool | None = None) -> None:
    """Configure structlog and the stdlib root logger."""
    if json_logs is None:
        json_logs = settings.LOG_JSON

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
    # SQLAlchemy echo is controlled by the engine; keep its logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a named structlog logger."""
    return structlog.get_logger(name)
