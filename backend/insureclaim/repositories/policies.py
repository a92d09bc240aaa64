"""
Policy repository — data access for the policies table.

Functions flush, but never commit.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.constants import PolicyStatus
from insureclaim.db.models.base import utcnow
from insureclaim.db.models.policy import Policy


async def add_policy(db: AsyncSession, policy: Policy) -> Policy:
    db.add(policy)
    await db.flush()
    return policy


async def get_policy_by_id(db: AsyncSession, policy_id: int) -> Policy | None:
    """Fetch a policy (with its owner) by primary key."""
    return await db.get(Policy, policy_id)


async def list_policies(
    db: AsyncSession,
    *,
    user_id: int | None = None,
) -> list[Policy]:
    """List policies newest first, optionally restricted to one owner."""
    stmt = select(Policy).order_by(Policy.created_at.desc(), Policy.id.desc())
    if user_id is not None:
        stmt = stmt.where(Policy.user_id == user_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def mark_lapsed_as_expired(db: AsyncSession, today: date) -> int:
    """Flip Active policies whose end date is before ``today`` to Expired. Returns row count."""
    stmt = (
        update(Policy)
        .where(Policy.status == PolicyStatus.ACTIVE.value, Policy.end_date < today)
        .values(status=PolicyStatus.EXPIRED.value, updated_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    await db.flush()
    return result.rowcount or 0
