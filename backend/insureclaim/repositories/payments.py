"""
Payment repository — data access for the payments table.

Functions flush, but never commit.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.db.models.payment import Payment
from insureclaim.db.models.policy import Policy


async def add_payment(db: AsyncSession, payment: Payment) -> Payment:
    db.add(payment)
    await db.flush()
    return payment


async def get_payment_by_id(db: AsyncSession, payment_id: int) -> Payment | None:
    """Fetch a payment (with its policy) by primary key."""
    return await db.get(Payment, payment_id)


async def list_payments(
    db: AsyncSession,
    *,
    owner_id: int | None = None,
    policy_id: int | None = None,
) -> list[Payment]:
    """List payments newest first; ``owner_id`` filters through the policy owner."""
    stmt = select(Payment).order_by(Payment.payment_date.desc(), Payment.id.desc())
    if owner_id is not None:
        stmt = stmt.join(Policy, Payment.policy_id == Policy.id).where(Policy.user_id == owner_id)
    if policy_id is not None:
        stmt = stmt.where(Payment.policy_id == policy_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_by_status(db: AsyncSession) -> dict[str, int]:
    stmt = select(Payment.status, func.count(Payment.id)).group_by(Payment.status)
    result = await db.execute(stmt)
    return {status: count for status, count in result.all()}


async def sum_by_status(db: AsyncSession) -> dict[str, Decimal]:
    stmt = select(Payment.status, func.coalesce(func.sum(Payment.amount), 0)).group_by(Payment.status)
    result = await db.execute(stmt)
    return {status: Decimal(str(total)) for status, total in result.all()}


async def sum_by_method(db: AsyncSession, *, status: str) -> dict[str, Decimal]:
    stmt = (
        select(Payment.method, func.coalesce(func.sum(Payment.amount), 0))
        .where(Payment.status == status)
        .group_by(Payment.method)
    )
    result = await db.execute(stmt)
    return {method: Decimal(str(total)) for method, total in result.all()}
