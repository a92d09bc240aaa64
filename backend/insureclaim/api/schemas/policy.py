"""Policy request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from insureclaim.api.schemas.common import Money, PolicyStatusField, PolicyTypeField
from insureclaim.core.constants import PolicyStatus, PolicyType
from insureclaim.db.models.policy import Policy


class CreatePolicyRequest(BaseModel):
    user_id: int = Field(..., ge=1)
    type: PolicyTypeField
    coverage_amount: Decimal = Field(..., ge=1_000, le=100_000_000, decimal_places=2)
    start_date: date
    duration_months: int = Field(..., ge=1, le=60)


class UpdatePolicyRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    coverage_amount: Decimal | None = Field(default=None, ge=1_000, le=100_000_000, decimal_places=2)
    status: PolicyStatusField | None = None
    end_date: date | None = None


class PolicyResponse(BaseModel):
    id: int
    policy_number: str
    user_id: int
    user_name: str
    type: PolicyType
    coverage_amount: Money
    premium_amount: Money
    start_date: date
    end_date: date
    status: PolicyStatus
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_model(cls, policy: Policy) -> PolicyResponse:
        return cls(
            id=policy.id,
            policy_number=policy.policy_number,
            user_id=policy.user_id,
            user_name=policy.user.full_name,
            type=policy.type,
            coverage_amount=policy.coverage_amount,
            premium_amount=policy.premium_amount,
            start_date=policy.start_date,
            end_date=policy.end_date,
            status=policy.status,
            created_at=policy.created_at,
            updated_at=policy.updated_at,
        )
