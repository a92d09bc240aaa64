"""Dashboard statistics response schemas."""

from __future__ import annotations

from pydantic import BaseModel

from insureclaim.api.schemas.common import Money


class ClaimAmounts(BaseModel):
    total_claimed: Money
    total_approved: Money
    approval_rate: float


class ClaimStatisticsResponse(BaseModel):
    """Counts keyed by claim status name, plus amount totals."""

    total_claims: int
    by_status: dict[str, int]
    amounts: ClaimAmounts


class PaymentAmounts(BaseModel):
    total_received: Money
    total_refunded: Money
    net_revenue: Money
    success_rate: float


class PaymentStatisticsResponse(BaseModel):
    """Counts keyed by payment status; completed amounts keyed by method."""

    total_payments: int
    by_status: dict[str, int]
    amounts: PaymentAmounts
    by_method: dict[str, Money]
