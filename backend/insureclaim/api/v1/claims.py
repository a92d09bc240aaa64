"""Claim endpoints: submission by policy owners, review and statistics for admins."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.api.deps import get_db, get_viewer, require_admin
from insureclaim.api.schemas.claim import ClaimResponse, ReviewClaimRequest, SubmitClaimRequest
from insureclaim.api.schemas.statistics import ClaimStatisticsResponse
from insureclaim.core.permissions import Viewer
from insureclaim.services import claims as claim_service
from insureclaim.services import statistics as statistics_service

router = APIRouter(prefix="/claim", tags=["Claims"])


@router.post("", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED)
async def submit_claim(
    payload: SubmitClaimRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> ClaimResponse:
    claim = await claim_service.submit_claim(
        db,
        user_id=viewer.user_id,
        policy_id=payload.policy_id,
        description=payload.description,
        claim_amount=payload.claim_amount,
        incident_date=payload.incident_date,
        document_path=payload.document_path,
    )
    return ClaimResponse.from_model(claim)


@router.get("", response_model=list[ClaimResponse])
async def list_claims(
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> list[ClaimResponse]:
    claims = await claim_service.list_claims(db, viewer)
    return [ClaimResponse.from_model(c) for c in claims]


# Declared before /{claim_id} so "statistics" is not parsed as an id.
@router.get("/statistics", response_model=ClaimStatisticsResponse, dependencies=[Depends(require_admin)])
async def claim_statistics(
    db: AsyncSession = Depends(get_db, scope="function"),
) -> ClaimStatisticsResponse:
    stats = await statistics_service.claim_statistics(db)
    return ClaimStatisticsResponse.model_validate(stats)


@router.get("/policy/{policy_id}", response_model=list[ClaimResponse])
async def list_policy_claims(
    policy_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> list[ClaimResponse]:
    claims = await claim_service.list_policy_claims(db, policy_id, viewer)
    return [ClaimResponse.from_model(c) for c in claims]


@router.get("/user/{user_id}", response_model=list[ClaimResponse])
async def list_user_claims(
    user_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> list[ClaimResponse]:
    claims = await claim_service.list_user_claims(db, user_id, viewer)
    return [ClaimResponse.from_model(c) for c in claims]


@router.get("/{claim_id}", response_model=ClaimResponse)
async def get_claim(
    claim_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> ClaimResponse:
    claim = await claim_service.get_claim(db, claim_id, viewer)
    return ClaimResponse.from_model(claim)


@router.put("/{claim_id}", response_model=ClaimResponse, dependencies=[Depends(require_admin)])
async def review_claim(
    claim_id: int,
    payload: ReviewClaimRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
) -> ClaimResponse:
    """Review a claim: set its status, approved amount and notes."""
    claim = await claim_service.review_claim(
        db,
        claim_id,
        status=payload.status,
        approved_amount=payload.approved_amount,
        review_notes=payload.review_notes,
    )
    return ClaimResponse.from_model(claim)
