"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Any, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.constants import UserRole
from insureclaim.core.permissions import Viewer
from insureclaim.core.security import decode_access_token
from insureclaim.db.models.user import User
from insureclaim.db.session import get_db as _get_db
from insureclaim.repositories import users as user_repository

security_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield an async DB session.

    Routes depend on this with ``scope="function"`` so the commit (or the
    error it raises) completes before the response is sent.
    """
    async for session in _get_db():
        yield session


async def get_current_token_payload(
    credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> dict[str, Any]:
    """Extract and validate JWT payload from bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication credentials were not provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload


async def get_current_user(
    db: AsyncSession = Depends(get_db, scope="function"),
    token_payload: dict[str, Any] = Depends(get_current_token_payload),
) -> User:
    """Resolve an active user from JWT payload."""
    subject = token_payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        ) from None

    user = await user_repository.get_active_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or inactive user",
        )

    return user


async def get_viewer(current_user: User = Depends(get_current_user)) -> Viewer:
    """The caller's (id, role) pair, as the services expect it."""
    return Viewer.of(current_user)


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Allow only users with the Admin role."""
    if current_user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return current_user
