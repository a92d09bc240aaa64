"""
Policy — an insurance contract owned by one user.

Premium is always derived from coverage, type and duration; it is never
accepted from the client.  Policies are cancelled by status change, never
deleted.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from insureclaim.core.constants import PolicyStatus
from insureclaim.db.models.base import Base, utcnow

if TYPE_CHECKING:
    from insureclaim.db.models.user import User


class Policy(Base):
    __tablename__ = "policies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    policy_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # ── Terms ─────────────────────────────────
    type: Mapped[str] = mapped_column(String(20), nullable=False)  # Life | Auto | Health | Property
    coverage_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    premium_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    # ── Status ────────────────────────────────
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PolicyStatus.ACTIVE.value, index=True
    )

    # ── Timestamps ────────────────────────────
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # ── Relationships ─────────────────────────
    user: Mapped[User] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return f"<Policy {self.policy_number} type={self.type} status={self.status}>"
