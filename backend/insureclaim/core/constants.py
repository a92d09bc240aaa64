"""Shared constants and enums used across the application."""

from __future__ import annotations

from enum import StrEnum


class CodedEnum(StrEnum):
    """
    StrEnum whose members also carry a 1-based integer code.

    Codes follow declaration order and are what older clients send
    (e.g. ``PolicyType`` 2 is ``Auto``).
    """

    @classmethod
    def from_code(cls, code: int) -> CodedEnum:
        members = list(cls)
        if not 1 <= code <= len(members):
            raise ValueError(f"{code} is not a valid {cls.__name__} code (1-{len(members)})")
        return members[code - 1]

    @property
    def code(self) -> int:
        return list(type(self)).index(self) + 1


class UserRole(CodedEnum):
    """Application roles carried in the access token."""

    CUSTOMER = "Customer"
    AGENT = "Agent"
    ADMIN = "Admin"


class PolicyType(CodedEnum):
    LIFE = "Life"
    AUTO = "Auto"
    HEALTH = "Health"
    PROPERTY = "Property"


class PolicyStatus(CodedEnum):
    ACTIVE = "Active"
    EXPIRED = "Expired"
    CANCELLED = "Cancelled"
    SUSPENDED = "Suspended"


class ClaimStatus(CodedEnum):
    """Claim workflow status: Submitted → UnderReview → Approved/Denied → Paid."""

    SUBMITTED = "Submitted"
    UNDER_REVIEW = "UnderReview"
    APPROVED = "Approved"
    DENIED = "Denied"
    PAID = "Paid"


class PaymentMethod(CodedEnum):
    CREDIT_CARD = "CreditCard"
    DEBIT_CARD = "DebitCard"
    BANK_TRANSFER = "BankTransfer"
    CASH = "Cash"
    MOBILE_PAYMENT = "MobilePayment"


class PaymentStatus(CodedEnum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    REFUNDED = "Refunded"


class IdentifierTag(StrEnum):
    """Prefixes of the year-scoped human-readable identifiers."""

    POLICY = "POL"
    CLAIM = "CLM"
    PAYMENT = "TXN"


# Forward-only claim workflow, applied when ENFORCE_CLAIM_TRANSITIONS is on.
CLAIM_TRANSITIONS: dict[ClaimStatus, frozenset[ClaimStatus]] = {
    ClaimStatus.SUBMITTED: frozenset({ClaimStatus.UNDER_REVIEW}),
    ClaimStatus.UNDER_REVIEW: frozenset({ClaimStatus.APPROVED, ClaimStatus.DENIED}),
    ClaimStatus.APPROVED: frozenset({ClaimStatus.PAID}),
    ClaimStatus.DENIED: frozenset(),
    ClaimStatus.PAID: frozenset(),
}

# Statuses that count as a completed review.
REVIEWED_CLAIM_STATUSES = frozenset({ClaimStatus.APPROVED, ClaimStatus.DENIED})
