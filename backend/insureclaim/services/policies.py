"""
Policy lifecycle: create, update, cancel, read.

Premium and end date are always derived here; clients never supply them.
Cancellation is a status change, the row is kept.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.constants import IdentifierTag, PolicyStatus, PolicyType
from insureclaim.core.errors import ForbiddenError, InvalidStateError, NotFoundError
from insureclaim.core.logging import get_logger
from insureclaim.core.permissions import Viewer, can_create_for, ensure_can_access
from insureclaim.db.models.base import utcnow
from insureclaim.db.models.policy import Policy
from insureclaim.repositories import policies as policy_repository
from insureclaim.repositories import users as user_repository
from insureclaim.repositories.identifiers import allocate_identifier
from insureclaim.services.premium import add_months, calculate_premium, months_between

logger = get_logger(__name__)


async def create_policy(
    db: AsyncSession,
    *,
    owner_id: int,
    policy_type: PolicyType,
    coverage_amount: Decimal,
    start_date: date,
    duration_months: int,
    viewer: Viewer | None = None,
) -> Policy:
    """
    Open a new Active policy for ``owner_id``.

    When ``viewer`` is given, a Customer may only open policies for
    themselves.  Raises NotFoundError when the owner does not exist.
    """
    if viewer is not None and not can_create_for(viewer.user_id, viewer.role, owner_id):
        logger.warning("Policy creation for another user refused", viewer_id=viewer.user_id, owner_id=owner_id)
        raise ForbiddenError(
            "Customers can only create policies for themselves",
            details={"viewer_id": viewer.user_id, "owner_id": owner_id},
        )

    owner = await user_repository.get_user_by_id(db, owner_id)
    if owner is None:
        raise NotFoundError("User", owner_id)

    policy_type = PolicyType(policy_type)
    premium = calculate_premium(coverage_amount, policy_type, duration_months)
    policy_number = await allocate_identifier(db, IdentifierTag.POLICY)

    policy = Policy(
        policy_number=policy_number,
        user=owner,
        type=policy_type.value,
        coverage_amount=Decimal(str(coverage_amount)),
        premium_amount=premium,
        start_date=start_date,
        end_date=add_months(start_date, duration_months),
        status=PolicyStatus.ACTIVE.value,
        created_at=utcnow(),
    )
    await policy_repository.add_policy(db, policy)

    logger.info(
        "Policy created",
        policy_number=policy.policy_number,
        owner_id=owner_id,
        type=policy.type,
        coverage_amount=str(policy.coverage_amount),
        premium_amount=str(premium),
    )
    return policy


async def update_policy(
    db: AsyncSession,
    policy_id: int,
    *,
    coverage_amount: Decimal | None = None,
    status: PolicyStatus | None = None,
    end_date: date | None = None,
) -> Policy:
    """
    Apply a partial update.  Fields left as None are unchanged.

    A coverage change recomputes the premium using the duration the policy
    had before this update, even if ``end_date`` changes in the same call.
    """
    policy = await policy_repository.get_policy_by_id(db, policy_id)
    if policy is None:
        raise NotFoundError("Policy", policy_id)

    if end_date is not None and end_date <= policy.start_date:
        logger.warning("Policy end date rejected", policy_number=policy.policy_number, end_date=str(end_date))
        raise InvalidStateError(
            f"End date must be after the policy start date ({policy.start_date:%Y-%m-%d})",
            details={"policy_id": policy_id, "end_date": str(end_date)},
        )

    if coverage_amount is not None:
        duration = max(months_between(policy.start_date, policy.end_date), 1)
        policy.coverage_amount = Decimal(str(coverage_amount))
        policy.premium_amount = calculate_premium(policy.coverage_amount, policy.type, duration)
    if status is not None:
        policy.status = PolicyStatus(status).value
    if end_date is not None:
        policy.end_date = end_date

    policy.updated_at = utcnow()
    await db.flush()

    logger.info(
        "Policy updated",
        policy_number=policy.policy_number,
        status=policy.status,
        premium_amount=str(policy.premium_amount),
    )
    return policy


async def cancel_policy(db: AsyncSession, policy_id: int) -> Policy:
    policy = await policy_repository.get_policy_by_id(db, policy_id)
    if policy is None:
        raise NotFoundError("Policy", policy_id)

    policy.status = PolicyStatus.CANCELLED.value
    policy.updated_at = utcnow()
    await db.flush()

    logger.info("Policy cancelled", policy_number=policy.policy_number)
    return policy


async def get_policy(db: AsyncSession, policy_id: int, viewer: Viewer) -> Policy:
    policy = await policy_repository.get_policy_by_id(db, policy_id)
    if policy is None:
        raise NotFoundError("Policy", policy_id)
    ensure_can_access(viewer, policy.user_id, action="view this policy")
    return policy


async def list_policies(db: AsyncSession, viewer: Viewer) -> list[Policy]:
    """Admins see every policy, everyone else only their own."""
    if viewer.is_admin:
        return await policy_repository.list_policies(db)
    return await policy_repository.list_policies(db, user_id=viewer.user_id)


async def list_user_policies(db: AsyncSession, user_id: int, viewer: Viewer) -> list[Policy]:
    ensure_can_access(viewer, user_id, action="view this user's policies")
    return await policy_repository.list_policies(db, user_id=user_id)


async def expire_lapsed_policies(db: AsyncSession, today: date | None = None) -> int:
    """Mark Active policies whose end date has passed as Expired. Returns how many changed."""
    today = today or utcnow().date()
    expired = await policy_repository.mark_lapsed_as_expired(db, today)
    logger.info("Lapsed policies expired", count=expired, as_of=str(today))
    return expired
