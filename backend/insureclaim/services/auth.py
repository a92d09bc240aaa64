"""
Registration, login and access-token issuance.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.config import settings
from insureclaim.core.constants import UserRole
from insureclaim.core.errors import ForbiddenError, InvalidStateError, UnauthorizedError
from insureclaim.core.logging import get_logger
from insureclaim.core.security import create_access_token, token_expiry, verify_password
from insureclaim.db.models.user import User
from insureclaim.repositories import users as user_repository

logger = get_logger(__name__)


@dataclass(frozen=True)
class IssuedToken:
    user: User
    access_token: str
    expires_at: datetime


def issue_token(user: User) -> IssuedToken:
    """Sign an access token carrying the user's id, role, email and name."""
    expires_at = token_expiry()
    token = create_access_token(
        {
            "sub": str(user.id),
            "role": user.role,
            "email": user.email,
            "name": user.full_name,
        },
        expires_at=expires_at,
    )
    return IssuedToken(user=user, access_token=token, expires_at=expires_at)


async def register(
    db: AsyncSession,
    *,
    full_name: str,
    email: str,
    password: str,
    phone_number: str,
    role: UserRole = UserRole.CUSTOMER,
) -> IssuedToken:
    """Create an account and sign the new user in."""
    role = UserRole(role)
    if role == UserRole.ADMIN and not settings.ALLOW_ADMIN_SELF_REGISTRATION:
        logger.warning("Admin self-registration refused", email=email)
        raise ForbiddenError("Self-registration as Admin is disabled")

    if await user_repository.get_user_by_email(db, email) is not None:
        logger.warning("Registration failed, email already exists", email=email)
        raise InvalidStateError("User with this email already exists", details={"email": email})

    user = await user_repository.create_user(
        db,
        email=email,
        password=password,
        full_name=full_name,
        phone_number=phone_number,
        role=role.value,
    )
    logger.info("User registered", user_id=user.id, email=user.email, role=user.role)
    return issue_token(user)


async def login(db: AsyncSession, *, email: str, password: str) -> IssuedToken:
    """
    Check credentials and issue a token.

    Unknown email and wrong password get the same message; an inactive
    account is reported as such.
    """
    user = await user_repository.get_user_by_email(db, email)
    if user is None or not verify_password(password, user.hashed_password):
        logger.warning("Login failed, invalid credentials", email=email)
        raise UnauthorizedError("Invalid email or password")
    if not user.is_active:
        logger.warning("Login failed, account inactive", email=email)
        raise UnauthorizedError("Account is inactive. Please contact support.")

    await user_repository.record_login(db, user.id)
    logger.info("User logged in", user_id=user.id)
    return issue_token(user)
