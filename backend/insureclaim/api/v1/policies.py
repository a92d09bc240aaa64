"""Policy endpoints. Reads are role-filtered; update and cancel are admin-only."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.api.deps import get_db, get_viewer, require_admin
from insureclaim.api.schemas.policy import CreatePolicyRequest, PolicyResponse, UpdatePolicyRequest
from insureclaim.core.permissions import Viewer
from insureclaim.services import policies as policy_service

router = APIRouter(prefix="/policy", tags=["Policies"])


@router.post("", response_model=PolicyResponse, status_code=status.HTTP_201_CREATED)
async def create_policy(
    payload: CreatePolicyRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> PolicyResponse:
    """Open a policy; customers may only open policies for themselves."""
    policy = await policy_service.create_policy(
        db,
        owner_id=payload.user_id,
        policy_type=payload.type,
        coverage_amount=payload.coverage_amount,
        start_date=payload.start_date,
        duration_months=payload.duration_months,
        viewer=viewer,
    )
    return PolicyResponse.from_model(policy)


@router.get("", response_model=list[PolicyResponse])
async def list_policies(
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> list[PolicyResponse]:
    policies = await policy_service.list_policies(db, viewer)
    return [PolicyResponse.from_model(p) for p in policies]


@router.get("/user/{user_id}", response_model=list[PolicyResponse])
async def list_user_policies(
    user_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> list[PolicyResponse]:
    policies = await policy_service.list_user_policies(db, user_id, viewer)
    return [PolicyResponse.from_model(p) for p in policies]


@router.get("/{policy_id}", response_model=PolicyResponse)
async def get_policy(
    policy_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
    viewer: Viewer = Depends(get_viewer),
) -> PolicyResponse:
    policy = await policy_service.get_policy(db, policy_id, viewer)
    return PolicyResponse.from_model(policy)


@router.put("/{policy_id}", response_model=PolicyResponse, dependencies=[Depends(require_admin)])
async def update_policy(
    policy_id: int,
    payload: UpdatePolicyRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
) -> PolicyResponse:
    policy = await policy_service.update_policy(
        db,
        policy_id,
        coverage_amount=payload.coverage_amount,
        status=payload.status,
        end_date=payload.end_date,
    )
    return PolicyResponse.from_model(policy)


@router.delete("/{policy_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
async def cancel_policy(
    policy_id: int,
    db: AsyncSession = Depends(get_db, scope="function"),
) -> Response:
    """Cancel a policy. The row is kept with status Cancelled."""
    await policy_service.cancel_policy(db, policy_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
