"""
Claim repository — data access for the claims table.

Functions flush, but never commit.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.db.models.claim import Claim


async def add_claim(db: AsyncSession, claim: Claim) -> Claim:
    db.add(claim)
    await db.flush()
    return claim


async def get_claim_by_id(db: AsyncSession, claim_id: int) -> Claim | None:
    """Fetch a claim (with its policy and claimant) by primary key."""
    return await db.get(Claim, claim_id)


async def list_claims(
    db: AsyncSession,
    *,
    user_id: int | None = None,
    policy_id: int | None = None,
) -> list[Claim]:
    """List claims, most recently submitted first."""
    stmt = select(Claim).order_by(Claim.submitted_date.desc(), Claim.id.desc())
    if user_id is not None:
        stmt = stmt.where(Claim.user_id == user_id)
    if policy_id is not None:
        stmt = stmt.where(Claim.policy_id == policy_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_by_status(db: AsyncSession) -> dict[str, int]:
    stmt = select(Claim.status, func.count(Claim.id)).group_by(Claim.status)
    result = await db.execute(stmt)
    return {status: count for status, count in result.all()}


async def amount_totals(db: AsyncSession) -> tuple[Decimal, Decimal]:
    """Return (sum of claimed amounts, sum of approved amounts)."""
    stmt = select(
        func.coalesce(func.sum(Claim.claim_amount), 0),
        func.coalesce(func.sum(Claim.approved_amount), 0),
    )
    result = await db.execute(stmt)
    claimed, approved = result.one()
    return Decimal(str(claimed)), Decimal(str(approved))
