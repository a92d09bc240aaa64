"""Payment request/response schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from insureclaim.api.schemas.common import Money, PaymentMethodField, PaymentStatusField
from insureclaim.core.constants import PaymentMethod, PaymentStatus
from insureclaim.db.models.payment import Payment


class RecordPaymentRequest(BaseModel):
    policy_id: int = Field(..., ge=1)
    amount: Decimal = Field(..., ge=1, le=10_000_000, decimal_places=2)
    method: PaymentMethodField
    reference: str | None = Field(default=None, max_length=200)


class UpdatePaymentRequest(BaseModel):
    status: PaymentStatusField
    reference: str | None = Field(default=None, max_length=200)


class PaymentResponse(BaseModel):
    id: int
    transaction_id: str
    policy_id: int
    policy_number: str
    amount: Money
    method: PaymentMethod
    status: PaymentStatus
    payment_date: datetime
    processed_date: datetime | None
    reference: str | None
    created_at: datetime

    @classmethod
    def from_model(cls, payment: Payment) -> PaymentResponse:
        return cls(
            id=payment.id,
            transaction_id=payment.transaction_id,
            policy_id=payment.policy_id,
            policy_number=payment.policy.policy_number,
            amount=payment.amount,
            method=payment.method,
            status=payment.status,
            payment_date=payment.payment_date,
            processed_date=payment.processed_date,
            reference=payment.reference,
            created_at=payment.created_at,
        )
