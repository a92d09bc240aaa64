"""
Claim lifecycle: submission by the policy owner and review by an admin.

Workflow: Submitted → UnderReview → Approved/Denied → Paid.  Transitions
are only checked against CLAIM_TRANSITIONS when ENFORCE_CLAIM_TRANSITIONS
is on; otherwise an admin may set any status.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.core.config import settings
from insureclaim.core.constants import (
    CLAIM_TRANSITIONS,
    REVIEWED_CLAIM_STATUSES,
    ClaimStatus,
    IdentifierTag,
    PolicyStatus,
)
from insureclaim.core.errors import ForbiddenError, InvalidStateError, NotFoundError, OutOfRangeError
from insureclaim.core.logging import get_logger
from insureclaim.core.permissions import Viewer, ensure_can_access
from insureclaim.db.models.base import utcnow
from insureclaim.db.models.claim import Claim
from insureclaim.repositories import claims as claim_repository
from insureclaim.repositories import policies as policy_repository
from insureclaim.repositories.identifiers import allocate_identifier

logger = get_logger(__name__)


def is_transition_allowed(current: ClaimStatus, target: ClaimStatus, *, enforce: bool | None = None) -> bool:
    """Whether a claim may move from ``current`` to ``target``; staying put is always allowed."""
    if enforce is None:
        enforce = settings.ENFORCE_CLAIM_TRANSITIONS
    if not enforce or current == target:
        return True
    return target in CLAIM_TRANSITIONS[current]


async def submit_claim(
    db: AsyncSession,
    *,
    user_id: int,
    policy_id: int,
    description: str,
    claim_amount: Decimal,
    incident_date: date,
    document_path: str | None = None,
) -> Claim:
    """
    File a claim against one of the submitter's own Active policies.

    Checks, in order: policy exists, submitter owns it, policy is Active,
    incident date inside the coverage window, amount within coverage.
    """
    policy = await policy_repository.get_policy_by_id(db, policy_id)
    if policy is None:
        raise NotFoundError("Policy", policy_id)

    if policy.user_id != user_id:
        logger.warning("Claim refused, submitter does not own policy", policy_id=policy_id, user_id=user_id)
        raise ForbiddenError(
            "You can only submit claims for your own policies",
            details={"policy_id": policy_id, "user_id": user_id},
        )

    if policy.status != PolicyStatus.ACTIVE:
        logger.warning("Claim refused, policy not active", policy_number=policy.policy_number, status=policy.status)
        raise InvalidStateError(
            f"Cannot submit claim for {policy.status} policy",
            details={"policy_id": policy_id, "status": policy.status},
        )

    if not policy.start_date <= incident_date <= policy.end_date:
        logger.warning("Claim refused, incident outside coverage", policy_number=policy.policy_number)
        raise OutOfRangeError(
            "Incident date must be within policy coverage period "
            f"({policy.start_date:%Y-%m-%d} to {policy.end_date:%Y-%m-%d})",
            details={"policy_id": policy_id, "incident_date": str(incident_date)},
        )

    claim_amount = Decimal(str(claim_amount))
    if claim_amount > policy.coverage_amount:
        logger.warning("Claim refused, amount exceeds coverage", policy_number=policy.policy_number)
        raise OutOfRangeError(
            f"Claim amount ({claim_amount:,.2f}) cannot exceed policy coverage ({policy.coverage_amount:,.2f})",
            details={"policy_id": policy_id, "claim_amount": str(claim_amount)},
        )

    claim_number = await allocate_identifier(db, IdentifierTag.CLAIM)
    now = utcnow()
    claim = Claim(
        claim_number=claim_number,
        policy=policy,
        user=policy.user,
        description=description,
        claim_amount=claim_amount,
        incident_date=incident_date,
        document_path=document_path,
        status=ClaimStatus.SUBMITTED.value,
        submitted_date=now,
        created_at=now,
    )
    await claim_repository.add_claim(db, claim)

    logger.info(
        "Claim submitted",
        claim_number=claim_number,
        policy_number=policy.policy_number,
        claim_amount=str(claim_amount),
    )
    return claim


async def review_claim(
    db: AsyncSession,
    claim_id: int,
    *,
    status: ClaimStatus,
    approved_amount: Decimal | None = None,
    review_notes: str | None = None,
) -> Claim:
    """
    Set a claim's status and optionally its approved amount and notes.

    Everything is validated before the claim is touched.  Blank notes
    leave the existing notes in place.
    """
    claim = await claim_repository.get_claim_by_id(db, claim_id)
    if claim is None:
        raise NotFoundError("Claim", claim_id)

    old_status = ClaimStatus(claim.status)
    new_status = ClaimStatus(status)
    if not is_transition_allowed(old_status, new_status):
        logger.warning("Claim transition refused", claim_number=claim.claim_number, old=old_status, new=new_status)
        raise InvalidStateError(
            f"Cannot move claim from {old_status} to {new_status}",
            details={"claim_id": claim_id},
        )

    if approved_amount is not None:
        approved_amount = Decimal(str(approved_amount))
        if approved_amount > claim.claim_amount:
            logger.warning("Approved amount exceeds claim", claim_number=claim.claim_number)
            raise OutOfRangeError(
                f"Approved amount ({approved_amount:,.2f}) cannot exceed claim amount ({claim.claim_amount:,.2f})",
                details={"claim_id": claim_id, "approved_amount": str(approved_amount)},
            )

    now = utcnow()
    claim.status = new_status.value
    if new_status in REVIEWED_CLAIM_STATUSES:
        claim.reviewed_date = now
    if approved_amount is not None:
        claim.approved_amount = approved_amount
    if review_notes and review_notes.strip():
        claim.review_notes = review_notes
    claim.updated_at = now
    await db.flush()

    logger.info("Claim reviewed", claim_number=claim.claim_number, old_status=old_status, new_status=new_status)
    return claim


async def get_claim(db: AsyncSession, claim_id: int, viewer: Viewer) -> Claim:
    claim = await claim_repository.get_claim_by_id(db, claim_id)
    if claim is None:
        raise NotFoundError("Claim", claim_id)
    ensure_can_access(viewer, claim.user_id, action="view this claim")
    return claim


async def list_claims(db: AsyncSession, viewer: Viewer) -> list[Claim]:
    if viewer.is_admin:
        return await claim_repository.list_claims(db)
    return await claim_repository.list_claims(db, user_id=viewer.user_id)


async def list_policy_claims(db: AsyncSession, policy_id: int, viewer: Viewer) -> list[Claim]:
    policy = await policy_repository.get_policy_by_id(db, policy_id)
    if policy is None:
        raise NotFoundError("Policy", policy_id)
    ensure_can_access(viewer, policy.user_id, action="view claims for this policy")
    return await claim_repository.list_claims(db, policy_id=policy_id)


async def list_user_claims(db: AsyncSession, user_id: int, viewer: Viewer) -> list[Claim]:
    ensure_can_access(viewer, user_id, action="view this user's claims")
    return await claim_repository.list_claims(db, user_id=user_id)
