"""
Payment ledger: record premium payments against a policy and track their status.

No gateway is involved.  A recorded payment starts as Completed; admins
correct the status afterwards (refunds, failures).
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.constants import IdentifierTag, PaymentMethod, PaymentStatus
from insureclaim.core.errors import NotFoundError
from insureclaim.core.logging import get_logger
from insureclaim.core.permissions import Viewer, ensure_can_access
from insureclaim.db.models.base import utcnow
from insureclaim.db.models.payment import Payment
from insureclaim.repositories import payments as payment_repository
from insureclaim.repositories import policies as policy_repository
from insureclaim.repositories.identifiers import allocate_identifier

logger = get_logger(__name__)


async def record_payment(
    db: AsyncSession,
    *,
    policy_id: int,
    amount: Decimal,
    method: PaymentMethod,
    reference: str | None = None,
    viewer: Viewer | None = None,
) -> Payment:
    """Record a payment; any policy status is accepted so arrears can be settled."""
    policy = await policy_repository.get_policy_by_id(db, policy_id)
    if policy is None:
        raise NotFoundError("Policy", policy_id)
    if viewer is not None:
        ensure_can_access(viewer, policy.user_id, action="record payments for this policy")

    transaction_id = await allocate_identifier(db, IdentifierTag.PAYMENT)
    now = utcnow()
    payment = Payment(
        transaction_id=transaction_id,
        policy=policy,
        amount=Decimal(str(amount)),
        method=PaymentMethod(method).value,
        status=PaymentStatus.COMPLETED.value,
        reference=reference or None,
        payment_date=now,
        processed_date=now,
        created_at=now,
    )
    await payment_repository.add_payment(db, payment)

    logger.info(
        "Payment recorded",
        transaction_id=transaction_id,
        policy_number=policy.policy_number,
        amount=str(payment.amount),
        method=payment.method,
    )
    return payment


async def update_payment_status(
    db: AsyncSession,
    payment_id: int,
    *,
    status: PaymentStatus,
    reference: str | None = None,
) -> Payment:
    """Change a payment's status; entering Completed stamps processed_date."""
    payment = await payment_repository.get_payment_by_id(db, payment_id)
    if payment is None:
        raise NotFoundError("Payment", payment_id)

    old_status = PaymentStatus(payment.status)
    new_status = PaymentStatus(status)
    payment.status = new_status.value
    if new_status == PaymentStatus.COMPLETED and old_status != PaymentStatus.COMPLETED:
        payment.processed_date = utcnow()
    if reference and reference.strip():
        payment.reference = reference
    await db.flush()

    logger.info(
        "Payment status updated",
        transaction_id=payment.transaction_id,
        old_status=old_status,
        new_status=new_status,
    )
    return payment


async def get_payment(db: AsyncSession, payment_id: int, viewer: Viewer) -> Payment:
    payment = await payment_repository.get_payment_by_id(db, payment_id)
    if payment is None:
        raise NotFoundError("Payment", payment_id)
    ensure_can_access(viewer, payment.policy.user_id, action="view this payment")
    return payment


async def list_payments(db: AsyncSession, viewer: Viewer) -> list[Payment]:
    if viewer.is_admin:
        return await payment_repository.list_payments(db)
    return await payment_repository.list_payments(db, owner_id=viewer.user_id)


async def list_policy_payments(db: AsyncSession, policy_id: int, viewer: Viewer) -> list[Payment]:
    policy = await policy_repository.get_policy_by_id(db, policy_id)
    if policy is None:
        raise NotFoundError("Policy", policy_id)
    ensure_can_access(viewer, policy.user_id, action="view payments for this policy")
    return await payment_repository.list_payments(db, policy_id=policy_id)
