"""
Payment — a premium payment recorded against a policy.

This is a ledger entry, not a gateway transaction: payments are recorded
as Completed and only change status through an admin update.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from insureclaim.core.constants import PaymentStatus
from insureclaim.db.models.base import Base, utcnow

if TYPE_CHECKING:
    from insureclaim.db.models.policy import Policy


class Payment(Base):
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    transaction_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    policy_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("policies.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    method: Mapped[str] = mapped_column(String(20), nullable=False)  # CreditCard | DebitCard | ...
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PaymentStatus.COMPLETED.value, index=True
    )
    reference: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)  # external gateway ref

    # ── Timestamps ────────────────────────────
    payment_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    processed_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    # ── Relationships ─────────────────────────
    policy: Mapped[Policy] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return f"<Payment {self.transaction_id} amount={self.amount} status={self.status}>"
