"""
Dashboard aggregates for claims and payments.

Computed with COUNT/SUM ... GROUP BY on each call; every status and
method appears in the result, with zero when absent.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.constants import ClaimStatus, PaymentMethod, PaymentStatus
from insureclaim.repositories import claims as claim_repository
from insureclaim.repositories import payments as payment_repository

ZERO = Decimal("0.00")
CENTS = Decimal("0.01")


def percentage(part: int, total: int) -> float:
    """``part / total`` as a percentage rounded to two places; 0 when ``total`` is 0."""
    if total == 0:
        return 0.0
    return round(part / total * 100, 2)


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENTS)


async def claim_statistics(db: AsyncSession) -> dict[str, Any]:
    counts = await claim_repository.count_by_status(db)
    by_status = {status.value: counts.get(status.value, 0) for status in ClaimStatus}
    total = sum(by_status.values())
    claimed, approved = await claim_repository.amount_totals(db)

    return {
        "total_claims": total,
        "by_status": by_status,
        "amounts": {
            "total_claimed": _money(claimed),
            "total_approved": _money(approved),
            "approval_rate": percentage(by_status[ClaimStatus.APPROVED.value], total),
        },
    }


async def payment_statistics(db: AsyncSession) -> dict[str, Any]:
    counts = await payment_repository.count_by_status(db)
    by_status = {status.value: counts.get(status.value, 0) for status in PaymentStatus}
    total = sum(by_status.values())

    sums = await payment_repository.sum_by_status(db)
    received = _money(sums.get(PaymentStatus.COMPLETED.value, ZERO))
    refunded = _money(sums.get(PaymentStatus.REFUNDED.value, ZERO))

    method_sums = await payment_repository.sum_by_method(db, status=PaymentStatus.COMPLETED.value)
    by_method = {method.value: _money(method_sums.get(method.value, ZERO)) for method in PaymentMethod}

    return {
        "total_payments": total,
        "by_status": by_status,
        "amounts": {
            "total_received": received,
            "total_refunded": refunded,
            "net_revenue": received - refunded,
            "success_rate": percentage(by_status[PaymentStatus.COMPLETED.value], total),
        },
        "by_method": by_method,
    }
