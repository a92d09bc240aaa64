"""
User repository containing all data-access operations for the users table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.constants import UserRole
from insureclaim.core.security import hash_password
from insureclaim.db.models.base import utcnow
from insureclaim.db.models.user import User


def normalize_email(email: str) -> str:
    return email.lower().strip()


async def create_user(
    db: AsyncSession,
    *,
    email: str,
    password: str,
    full_name: str,
    phone_number: str = "",
    role: str = UserRole.CUSTOMER.value,
) -> User:
    """Create a new user with a hashed password."""
    user = User(
        email=normalize_email(email),
        hashed_password=hash_password(password),
        full_name=full_name.strip(),
        phone_number=phone_number.strip(),
        role=UserRole(role).value,
        is_active=True,
        created_at=utcnow(),
    )
    db.add(user)
    await db.flush()
    return user


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user by primary key."""
    return await db.get(User, user_id)


async def get_active_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch an active user by primary key."""
    stmt = select(User).where(User.id == user_id, User.is_active.is_(True))
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Fetch a user by email address (case-insensitive)."""
    stmt = select(User).where(func.lower(User.email) == normalize_email(email))
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def record_login(db: AsyncSession, user_id: int) -> None:
    """Stamp last_login_at on successful authentication."""
    stmt = update(User).where(User.id == user_id).values(last_login_at=utcnow())
    await db.execute(stmt)
    await db.flush()
