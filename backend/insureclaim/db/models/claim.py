"""
Claim — a customer's request for payout under a policy.

``user_id`` duplicates the policy owner so claims can be filtered by user
without a join.  Workflow: Submitted → UnderReview → Approved/Denied → Paid.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from insureclaim.core.constants import ClaimStatus
from insureclaim.db.models.base import Base, utcnow

if TYPE_CHECKING:
    from insureclaim.db.models.policy import Policy
    from insureclaim.db.models.user import User


class Claim(Base):
    __tablename__ = "claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    claim_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    policy_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("policies.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # ── Claim details ─────────────────────────
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    claim_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    approved_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2), nullable=True)
    document_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # ── Workflow ──────────────────────────────
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ClaimStatus.SUBMITTED.value, index=True
    )
    incident_date: Mapped[date] = mapped_column(Date, nullable=False)
    submitted_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    reviewed_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    review_notes: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)

    # ── Timestamps ────────────────────────────
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # ── Relationships ─────────────────────────
    policy: Mapped[Policy] = relationship(lazy="selectin")
    user: Mapped[User] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return f"<Claim {self.claim_number} amount={self.claim_amount} status={self.status}>"
