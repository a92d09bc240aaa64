"""Claim request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from insureclaim.api.schemas.common import ClaimStatusField, Money
from insureclaim.core.constants import ClaimStatus
from insureclaim.db.models.claim import Claim


class SubmitClaimRequest(BaseModel):
    policy_id: int = Field(..., ge=1)
    description: str = Field(..., min_length=10, max_length=1000)
    claim_amount: Decimal = Field(..., ge=100, le=100_000_000, decimal_places=2)
    incident_date: date
    document_path: str | None = Field(default=None, max_length=500)


class ReviewClaimRequest(BaseModel):
    """Admin review: new status, optional approved amount and notes."""

    status: ClaimStatusField
    approved_amount: Decimal | None = Field(default=None, ge=0, le=100_000_000, decimal_places=2)
    review_notes: str | None = Field(default=None, max_length=1000)


class ClaimResponse(BaseModel):
    id: int
    claim_number: str
    policy_id: int
    policy_number: str
    user_id: int
    user_name: str
    user_email: str
    description: str
    claim_amount: Money
    approved_amount: Money | None
    status: ClaimStatus
    incident_date: date
    submitted_date: datetime
    reviewed_date: datetime | None
    document_path: str | None
    review_notes: str | None
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_model(cls, claim: Claim) -> ClaimResponse:
        return cls(
            id=claim.id,
            claim_number=claim.claim_number,
            policy_id=claim.policy_id,
            policy_number=claim.policy.policy_number,
            user_id=claim.user_id,
            user_name=claim.user.full_name,
            user_email=claim.user.email,
            description=claim.description,
            claim_amount=claim.claim_amount,
            approved_amount=claim.approved_amount,
            status=claim.status,
            incident_date=claim.incident_date,
            submitted_date=claim.submitted_date,
            reviewed_date=claim.reviewed_date,
            document_path=claim.document_path,
            review_notes=claim.review_notes,
            created_at=claim.created_at,
            updated_at=claim.updated_at,
        )
