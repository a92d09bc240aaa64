"""Password hashing (bcrypt) and JWT access tokens (PyJWT)."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from insureclaim.core.config import settings
from insureclaim.core.logging import get_logger

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash in storage
        return False


def token_expiry() -> datetime:
    """Expiration instant for a token issued now."""
    return datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)


def create_access_token(claims: dict[str, Any], expires_at: datetime | None = None) -> str:
    """
    Sign an access token.

    ``claims`` should carry at least ``sub``; issuer, audience, issue time,
    expiry and a unique ``jti`` are added here.
    """
    now = datetime.now(timezone.utc)
    payload = {
        **claims,
        "iat": now,
        "exp": expires_at or token_expiry(),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Validate a token and return its payload, or None when invalid/expired."""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options={"require": ["sub", "exp"]},
        )
    except jwt.PyJWTError as exc:
        logger.info("Rejected access token", reason=str(exc))
        return None
